"""Exception hierarchy for stock-agent."""


class StockAgentError(Exception):
    """Base class for all stock-agent errors."""


class ConfigurationError(StockAgentError):
    """Raised when required configuration is missing or malformed."""


class ToolError(StockAgentError):
    """Base class for failures raised while resolving a tool call.

    These are recovered by the conversation driver and reported back to the
    model as an error tool result.
    """


class InvalidArgument(ToolError):
    """Raised when a tool receives malformed input."""


class UnknownTool(ToolError):
    """Raised when the model requests a tool that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class TransportFailure(StockAgentError):
    """Raised when the model service call itself fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
