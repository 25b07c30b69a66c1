"""Conversation driver alternating between model calls and tool resolution."""

from enum import Enum
from typing import Protocol

from stock_agent.clients.anthropic import AnthropicClient
from stock_agent.models.llm import (
    ConversationResult,
    LLMMessage,
    LLMResponse,
    LLMUsage,
    ToolCallResult,
    ToolResultBlock,
    ToolUseBlock,
)
from stock_agent.tools.registry import ToolsRegistry, get_tools_registry
from stock_agent.utils.logging import get_logger

logger = get_logger(__name__)

TOOL_USE_STOP_REASON = "tool_use"


class DriverState(Enum):
    AWAITING_MODEL = "awaiting_model"
    RESOLVING_TOOL = "resolving_tool"
    DONE = "done"


class ConversationObserver(Protocol):
    """Receives progress events from a driver run."""

    def on_response(self, label: str, response: LLMResponse) -> None: ...

    def on_tool_call(self, block: ToolUseBlock) -> None: ...

    def on_tool_result(self, block: ToolUseBlock, result: ToolCallResult) -> None: ...


class ConversationDriver:
    """Runs one prompt through the model, resolving tool calls until a final answer.

    Only the first tool use block of a response is resolved. The follow-up
    request is rebuilt from the original prompt, the assistant turn and the
    tool result; earlier rounds are not carried forward, and tools are not
    advertised again.
    """

    def __init__(
        self,
        client: AnthropicClient,
        tools_registry: ToolsRegistry | None = None,
        observer: ConversationObserver | None = None,
        max_tool_rounds: int = 10,
    ):
        self.client = client
        self.tools_registry = tools_registry or get_tools_registry()
        self.observer = observer
        self.max_tool_rounds = max_tool_rounds
        self.state = DriverState.AWAITING_MODEL

    async def run(self, user_message: str) -> ConversationResult:
        """Drive the conversation for a single user prompt.

        Returns:
            The final answer (None when the last response holds no text) plus run metadata

        Raises:
            TransportFailure: If any model call fails
        """
        self.state = DriverState.AWAITING_MODEL
        user_turn = LLMMessage(role="user", content=user_message)
        messages = [user_turn]
        usage = LLMUsage()
        tool_results: list[ToolCallResult] = []

        logger.info(f"Starting conversation with {len(self.tools_registry.get_tool_names())} tools")
        response = await self.client.create_message(messages, tools=self.tools_registry.get_tool_definitions())
        usage.add(response.usage)
        turns = 1
        self._notify_response("Initial Response", response)

        rounds = 0
        while response.stop_reason == TOOL_USE_STOP_REASON:
            if rounds >= self.max_tool_rounds:
                logger.warning(f"Stopping after {rounds} tool rounds without a final answer")
                break

            tool_use = self._select_tool_use(response)
            if tool_use is None:
                break

            self.state = DriverState.RESOLVING_TOOL
            result = await self._resolve_tool(tool_use)
            tool_results.append(result)
            rounds += 1

            messages = [
                user_turn,
                LLMMessage(role="assistant", content=response.content),
                LLMMessage(
                    role="user",
                    content=[
                        ToolResultBlock(tool_use_id=tool_use.id, content=result.value, is_error=result.is_error)
                    ],
                ),
            ]

            self.state = DriverState.AWAITING_MODEL
            response = await self.client.create_message(messages)
            usage.add(response.usage)
            turns += 1
            self._notify_response("Response", response)

        self.state = DriverState.DONE
        logger.info(f"Conversation finished in {turns} turns, stop reason: {response.stop_reason}")
        return ConversationResult(
            final_text=response.first_text(),
            stop_reason=response.stop_reason,
            messages=messages,
            turns=turns,
            tool_results=tool_results,
            usage=usage,
        )

    def _select_tool_use(self, response: LLMResponse) -> ToolUseBlock | None:
        tool_uses = response.tool_use_blocks()
        if not tool_uses:
            logger.warning("Stop reason is tool_use but the response has no tool use block")
            return None

        if len(tool_uses) > 1:
            ignored = ", ".join(block.id for block in tool_uses[1:])
            logger.warning(f"Response requested {len(tool_uses)} tools; only the first is resolved (ignored: {ignored})")

        return tool_uses[0]

    async def _resolve_tool(self, tool_use: ToolUseBlock) -> ToolCallResult:
        """Execute a tool call, converting any failure into an error result."""
        if self.observer:
            self.observer.on_tool_call(tool_use)

        try:
            value = await self.tools_registry.resolve(tool_use.name, tool_use.input)
            result = ToolCallResult(value=str(value), is_error=False)
            logger.debug(f"Tool {tool_use.name} succeeded: {result.value[:100]}")
        except Exception as e:
            logger.error(f"Tool {tool_use.name} failed: {e}")
            result = ToolCallResult(value=str(e), is_error=True)

        if self.observer:
            self.observer.on_tool_result(tool_use, result)
        return result

    def _notify_response(self, label: str, response: LLMResponse) -> None:
        if self.observer:
            self.observer.on_response(label, response)
