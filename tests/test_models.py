"""Tests for data models."""

import pytest
from pydantic import ValidationError

from stock_agent.models.llm import (
    LLMMessage,
    LLMResponse,
    LLMToolDefinition,
    LLMUsage,
    RawBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)


class TestContentBlocks:
    """Tests for content block models."""

    def test_text_block_ignores_extra_fields(self):
        """Test that SDK-only fields are dropped from text blocks."""
        block = TextBlock.model_validate({"type": "text", "text": "Hello", "citations": None})
        assert block.model_dump() == {"type": "text", "text": "Hello"}

    def test_tool_use_block_valid(self):
        """Test valid tool use block."""
        block = ToolUseBlock(id="toolu_01", name="get_stock_price", input={"symbol": "AAPL"})
        assert block.type == "tool_use"
        assert block.input == {"symbol": "AAPL"}

    def test_tool_result_block_defaults_to_success(self):
        """Test tool result block is not an error by default."""
        block = ToolResultBlock(tool_use_id="toolu_01", content="$198.53 USD")
        assert block.model_dump() == {
            "type": "tool_result",
            "tool_use_id": "toolu_01",
            "content": "$198.53 USD",
            "is_error": False,
        }


class TestLLMMessage:
    """Tests for conversation messages."""

    def test_message_with_plain_text(self):
        """Test message with string content."""
        message = LLMMessage(role="user", content="What's the current stock price for Apple?")
        assert message.model_dump() == {"role": "user", "content": "What's the current stock price for Apple?"}

    def test_message_parses_blocks_by_type(self):
        """Test that content dicts are parsed into the matching block type."""
        message = LLMMessage.model_validate(
            {
                "role": "assistant",
                "content": [
                    {"type": "text", "text": "Let me check."},
                    {"type": "tool_use", "id": "toolu_01", "name": "get_stock_price", "input": {"symbol": "AAPL"}},
                ],
            }
        )
        assert isinstance(message.content[0], TextBlock)
        assert isinstance(message.content[1], ToolUseBlock)

    def test_message_rejects_system_role(self):
        """Test that only user and assistant roles are accepted."""
        with pytest.raises(ValidationError):
            LLMMessage(role="system", content="nope")


class TestLLMToolDefinition:
    """Tests for tool descriptors."""

    def test_descriptor_is_immutable(self):
        """Test descriptors cannot be modified after creation."""
        tool = LLMToolDefinition(name="t", description="d", input_schema={"type": "object"})
        with pytest.raises(ValidationError):
            tool.name = "other"


class TestLLMResponse:
    """Tests for response helpers."""

    def test_first_text_skips_tool_use(self):
        """Test that the first text block is found after a tool use block."""
        response = LLMResponse(
            content=[
                ToolUseBlock(id="toolu_01", name="get_stock_price", input={}),
                TextBlock(text="first"),
                TextBlock(text="second"),
            ],
            stop_reason="end_turn",
            model="claude",
        )
        assert response.first_text() == "first"

    def test_first_text_absent(self):
        """Test that a response without text reports None."""
        response = LLMResponse(content=[], stop_reason="end_turn", model="claude")
        assert response.first_text() is None

    def test_usage_accumulates(self):
        """Test usage records add up."""
        usage = LLMUsage(input_tokens=10, output_tokens=5)
        usage.add(LLMUsage(input_tokens=3, output_tokens=2))
        assert usage.input_tokens == 13
        assert usage.total_tokens == 20


class TestRawBlock:
    """Tests for blocks of types without a dedicated model."""

    def test_unmodelled_block_kept_verbatim(self):
        """Test that a thinking block round-trips through a message unchanged."""
        thinking = {"type": "thinking", "thinking": "Need a quote.", "signature": "sig"}
        message = LLMMessage.model_validate({"role": "assistant", "content": [thinking]})

        assert isinstance(message.content[0], RawBlock)
        assert message.model_dump() == {"role": "assistant", "content": [thinking]}

    def test_known_types_still_parse_to_their_models(self):
        """Test that a raw fallback does not shadow text blocks."""
        message = LLMMessage.model_validate({"role": "assistant", "content": [{"type": "text", "text": "Hi"}]})
        assert isinstance(message.content[0], TextBlock)
