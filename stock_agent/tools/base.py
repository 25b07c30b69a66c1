"""Base types and definitions for tools."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from stock_agent.errors import InvalidArgument
from stock_agent.models.llm import LLMToolDefinition

ToolHandler = Callable[[Any], Awaitable[str]]


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error into one readable line."""
    parts = []
    for item in error.errors():
        message = item["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


@dataclass(frozen=True)
class ToolDefinition:
    """Definition of a tool available to the model."""

    name: str
    description: str
    input_schema_class: type[BaseModel]
    handler: ToolHandler

    def get_json_schema(self) -> dict[str, Any]:
        """Get the JSON schema advertised for this tool's input."""
        schema = self.input_schema_class.model_json_schema()
        properties = {
            name: {key: value for key, value in prop.items() if key != "title"}
            for name, prop in schema.get("properties", {}).items()
        }
        return {
            "type": "object",
            "properties": properties,
            "required": schema.get("required", []),
        }

    def to_llm_tool(self) -> LLMToolDefinition:
        return LLMToolDefinition(name=self.name, description=self.description, input_schema=self.get_json_schema())

    def parse_input(self, raw_input: dict[str, Any]) -> BaseModel:
        """Parse and validate tool input.

        Raises:
            InvalidArgument: If the input does not match the schema
        """
        try:
            return self.input_schema_class.model_validate(raw_input)
        except ValidationError as e:
            raise InvalidArgument(_describe_validation_error(e)) from e
