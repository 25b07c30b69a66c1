"""Data models."""

from stock_agent.models.llm import (
    ContentBlock,
    ConversationResult,
    LLMMessage,
    LLMResponse,
    LLMToolDefinition,
    LLMUsage,
    RawBlock,
    TextBlock,
    ToolCallResult,
    ToolResultBlock,
    ToolUseBlock,
)

__all__ = [
    "ContentBlock",
    "ConversationResult",
    "LLMMessage",
    "LLMResponse",
    "LLMToolDefinition",
    "LLMUsage",
    "RawBlock",
    "TextBlock",
    "ToolCallResult",
    "ToolResultBlock",
    "ToolUseBlock",
]
