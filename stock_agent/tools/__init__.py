"""Tools the model may call."""

from stock_agent.tools.base import ToolDefinition
from stock_agent.tools.registry import ToolsRegistry, get_tools_registry

__all__ = ["ToolDefinition", "ToolsRegistry", "get_tools_registry"]
