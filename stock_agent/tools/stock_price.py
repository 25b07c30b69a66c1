"""Stock price lookup tool."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from stock_agent.tools.base import ToolDefinition

PLACEHOLDER_PRICE = "$198.53 USD"


class StockPriceInput(BaseModel):
    """Input schema for the stock price tool."""

    symbol: str = Field(..., description="The ticker symbol of the stock to retrieve")

    @model_validator(mode="before")
    @classmethod
    def require_symbol(cls, data: Any) -> Any:
        """Reject missing, null, empty or whitespace-only symbols with one message."""
        if isinstance(data, dict):
            symbol = data.get("symbol")
            if not symbol or (isinstance(symbol, str) and symbol.isspace()):
                raise ValueError("stock symbol is required")
        return data

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        return v.strip()


async def get_stock_price(params: StockPriceInput) -> str:  # noqa: RUF029
    """Return the current price for a ticker symbol.

    Mock implementation: always returns a fixed placeholder until a real
    market data source is wired in.
    """
    return PLACEHOLDER_PRICE


def create_stock_price_tool() -> ToolDefinition:
    return ToolDefinition(
        name="get_stock_price",
        description="The get_stock_price tool retrieves the current price of a single stock by its ticker symbol",
        input_schema_class=StockPriceInput,
        handler=get_stock_price,
    )
