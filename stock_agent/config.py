"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from stock_agent.errors import ConfigurationError

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_PROMPT = "What's the current stock price for Apple?"


@dataclass
class AgentConfig:
    """Configuration for a single agent run."""

    api_key: str
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_tool_rounds: int = 10
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, load_env_file: bool = True, **overrides) -> "AgentConfig":
        """Build configuration from environment variables.

        Args:
            load_env_file: Load a ``.env`` file from the working directory first
            **overrides: Values that take precedence over the environment (None is ignored)

        Raises:
            ConfigurationError: If the API key is missing or a numeric setting is malformed
        """
        if load_env_file:
            load_dotenv()

        api_key = overrides.pop("api_key", None) or os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY environment variable is required")

        values: dict = {"api_key": api_key}

        model = os.getenv("ANTHROPIC_MODEL")
        if model:
            values["model"] = model

        max_tokens = os.getenv("ANTHROPIC_MAX_TOKENS")
        if max_tokens:
            try:
                values["max_tokens"] = int(max_tokens)
            except ValueError as e:
                raise ConfigurationError(f"ANTHROPIC_MAX_TOKENS must be an integer, got {max_tokens!r}") from e

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
