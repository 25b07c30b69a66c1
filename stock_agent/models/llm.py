"""LLM-related data models and types."""

from dataclasses import dataclass, field
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# Content block types
class TextBlock(BaseModel):
    """Text content block."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(BaseModel):
    """Tool use content block."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: dict[str, Any]


class ToolResultBlock(BaseModel):
    """Tool result content block."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: str
    is_error: bool = False


ContentBlock = Annotated[TextBlock | ToolUseBlock | ToolResultBlock, Field(discriminator="type")]


class RawBlock(BaseModel):
    """Block of a type not modelled here (thinking, server tool use, ...), kept verbatim.

    Lets an assistant turn be echoed back to the API unchanged.
    """

    model_config = ConfigDict(extra="allow")

    type: str


MessageBlock = Annotated[
    TextBlock | ToolUseBlock | ToolResultBlock | RawBlock, Field(union_mode="left_to_right")
]


class LLMMessage(BaseModel):
    """A message for LLM conversation."""

    role: Literal["user", "assistant"]
    content: str | list[MessageBlock]


class LLMToolDefinition(BaseModel):
    """Tool descriptor advertised to the model."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: dict[str, Any]


class ToolCallResult(BaseModel):
    """Outcome of executing a tool handler, reduced to a string."""

    value: str
    is_error: bool = False


@dataclass
class LLMUsage:
    """Token usage information from the LLM provider."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def add(self, other: "LLMUsage") -> None:
        """Accumulate another usage record into this one."""
        self.input_tokens += other.input_tokens
        self.output_tokens += other.output_tokens


@dataclass
class LLMResponse:
    """Response from the model service."""

    content: list[TextBlock | ToolUseBlock | RawBlock]
    stop_reason: str | None
    model: str
    usage: LLMUsage = field(default_factory=LLMUsage)

    def first_text(self) -> str | None:
        """Return the text of the first text block, if any."""
        for block in self.content:
            if isinstance(block, TextBlock):
                return block.text
        return None

    def tool_use_blocks(self) -> list[ToolUseBlock]:
        """Return every tool use block in order."""
        return [block for block in self.content if isinstance(block, ToolUseBlock)]


@dataclass
class ConversationResult:
    """Result of one conversation driver run."""

    final_text: str | None
    stop_reason: str | None
    messages: list[LLMMessage]
    turns: int
    tool_results: list[ToolCallResult] = field(default_factory=list)
    usage: LLMUsage = field(default_factory=LLMUsage)
