"""Anthropic API client with error mapping."""

from dataclasses import dataclass
from typing import Any

from anthropic import APIError, AsyncAnthropic
from anthropic.types import ContentBlock as AnthropicContentBlock
from anthropic.types import Message

from stock_agent.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, AgentConfig
from stock_agent.errors import ConfigurationError, TransportFailure
from stock_agent.models.llm import (
    LLMMessage,
    LLMResponse,
    LLMToolDefinition,
    LLMUsage,
    RawBlock,
    TextBlock,
    ToolUseBlock,
)
from stock_agent.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AnthropicConfig:
    """Configuration for Anthropic API client."""

    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    # Failed requests are surfaced, never retried
    max_retries: int = 0


class AnthropicClient:
    """Thin wrapper over the Anthropic Messages API."""

    api_key: str
    client: AsyncAnthropic
    config: AnthropicConfig

    def __init__(self, api_key: str, config: AnthropicConfig | None = None, client: AsyncAnthropic | None = None):
        """Initialize Anthropic client.

        Args:
            api_key: Anthropic API key
            config: Client configuration
            client: Pre-built SDK client, mainly for tests
        """
        if not api_key:
            raise ConfigurationError("An Anthropic API key is required")

        self.api_key = api_key
        self.config = config or AnthropicConfig()
        self.client = client or AsyncAnthropic(api_key=self.api_key, max_retries=self.config.max_retries)

    @classmethod
    def from_agent_config(cls, agent_config: AgentConfig) -> "AnthropicClient":
        return cls(
            api_key=agent_config.api_key,
            config=AnthropicConfig(model=agent_config.model, max_tokens=agent_config.max_tokens),
        )

    async def create_message(
        self,
        messages: list[LLMMessage],
        tools: list[LLMToolDefinition] | None = None,
        **kwargs,
    ) -> LLMResponse:
        """Create a message with the Claude API.

        Args:
            messages: Conversation to send
            tools: Tools to advertise; omitted from the request when empty
            **kwargs: Overrides for model and max_tokens

        Returns:
            Structured response

        Raises:
            TransportFailure: If the API call fails for any reason
        """
        request_params: dict[str, Any] = {
            "model": kwargs.get("model", self.config.model),
            "max_tokens": kwargs.get("max_tokens", self.config.max_tokens),
            "messages": [msg.model_dump() for msg in messages],
        }
        if tools:
            request_params["tools"] = [tool.model_dump() for tool in tools]

        logger.debug(
            f"Making Anthropic API call with model: {request_params['model']}, "
            f"{len(messages)} messages, {len(tools) if tools else 0} tools"
        )

        try:
            response: Message = await self.client.messages.create(**request_params)
        except APIError as e:
            status_code = getattr(e, "status_code", None)
            logger.error(f"Anthropic API call failed (status {status_code}): {e}")
            raise TransportFailure(f"Anthropic API request failed: {e}", status_code=status_code) from e

        usage = LLMUsage()
        if response.usage:
            usage = LLMUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
            )

        logger.debug(
            f"Response received - Stop reason: {response.stop_reason}, Content blocks: {len(response.content)}"
        )

        return LLMResponse(
            content=self._convert_content_blocks(response.content),
            stop_reason=response.stop_reason,
            model=response.model,
            usage=usage,
        )

    def _convert_content_blocks(
        self, anthropic_content: list[AnthropicContentBlock]
    ) -> list[TextBlock | ToolUseBlock | RawBlock]:
        """Convert Anthropic content blocks to our block types.

        Types other than text and tool_use are kept as ``RawBlock`` so the
        assistant turn can be sent back in full.
        """
        converted_blocks: list[TextBlock | ToolUseBlock | RawBlock] = []
        for block in anthropic_content:
            if hasattr(block, "model_dump"):
                block_dict = block.model_dump()
            elif isinstance(block, dict):
                block_dict = block
            else:
                block_dict = vars(block)

            block_type = block_dict.get("type")
            if block_type == "text":
                converted_blocks.append(TextBlock.model_validate(block_dict))
            elif block_type == "tool_use":
                converted_blocks.append(ToolUseBlock.model_validate(block_dict))
            else:
                logger.debug(f"Keeping content block of type {block_type} verbatim")
                converted_blocks.append(
                    RawBlock.model_validate({key: value for key, value in block_dict.items() if value is not None})
                )

        return converted_blocks
