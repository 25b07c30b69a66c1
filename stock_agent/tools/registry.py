"""Tools registry for dispatching model tool calls."""

from typing import Any

from stock_agent.errors import UnknownTool
from stock_agent.models.llm import LLMToolDefinition
from stock_agent.tools.base import ToolDefinition
from stock_agent.tools.stock_price import create_stock_price_tool
from stock_agent.utils.logging import get_logger

logger = get_logger(__name__)


class ToolsRegistry:
    """Registry mapping tool names to their definitions."""

    def __init__(self, register_defaults: bool = True):
        self._tools: dict[str, ToolDefinition] = {}
        if register_defaults:
            self._register_default_tools()

    def _register_default_tools(self) -> None:
        """Register the default set of tools."""
        for tool in [create_stock_price_tool()]:
            self.register_tool(tool)

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a new tool in the registry."""
        self._tools[tool.name] = tool

    def get_tool_definitions(self) -> list[LLMToolDefinition]:
        """Get the descriptors advertised to the model, in registration order."""
        return [tool.to_llm_tool() for tool in self._tools.values()]

    async def resolve(self, name: str, raw_input: dict[str, Any]) -> str:
        """Execute the named tool with raw model-supplied input.

        Raises:
            UnknownTool: If no tool is registered under ``name``
            InvalidArgument: If the input fails the tool's validation
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownTool(name)

        params = tool.parse_input(raw_input)
        logger.debug(f"Executing tool {name} with {params!r}")
        return await tool.handler(params)

    def get_tool_names(self) -> list[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def has_tool(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools


_tools_registry: ToolsRegistry | None = None


def get_tools_registry() -> ToolsRegistry:
    """Get or create tools registry instance."""
    global _tools_registry
    if _tools_registry is None:
        _tools_registry = ToolsRegistry()
    return _tools_registry
