"""Command-line entry point for stock-agent."""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from stock_agent import __version__
from stock_agent.clients.anthropic import AnthropicClient
from stock_agent.config import DEFAULT_PROMPT, AgentConfig
from stock_agent.errors import StockAgentError
from stock_agent.models.llm import ConversationResult, LLMResponse, ToolCallResult, ToolUseBlock
from stock_agent.services.conversation import ConversationDriver
from stock_agent.tools.registry import get_tools_registry
from stock_agent.utils.logging import LogConfig, get_logger, setup_logging

logger = get_logger(__name__)


class ConsoleObserver:
    """Prints conversation progress to the terminal."""

    def __init__(self, console: Console):
        self.console = console

    def on_response(self, label: str, response: LLMResponse) -> None:
        self.console.print(f"\n[bold blue]{label}:[/bold blue]")
        self.console.print(f"Stop Reason: {response.stop_reason}", markup=False)
        self.console.print("Content:")
        self.console.print_json(data=[block.model_dump() for block in response.content])

    def on_tool_call(self, block: ToolUseBlock) -> None:
        self.console.print(f"\n[bold yellow]Tool Used:[/bold yellow] {block.name}")
        self.console.print("Tool Input:")
        self.console.print_json(data=block.input)

    def on_tool_result(self, block: ToolUseBlock, result: ToolCallResult) -> None:
        style = "red" if result.is_error else "green"
        self.console.print(f"\n[bold {style}]Tool Result:[/bold {style}]")
        self.console.print(result.value, markup=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stock-agent",
        description="Ask Claude a question, letting it call the stock price tool",
    )
    parser.add_argument("--version", action="version", version=f"stock-agent {__version__}")
    parser.add_argument(
        "prompt",
        nargs="?",
        default=DEFAULT_PROMPT,
        help=f"Question to send (default: {DEFAULT_PROMPT!r})",
    )
    parser.add_argument("--model", default=None, help="Model identifier (can be set via ANTHROPIC_MODEL)")
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=None,
        help="Maximum output tokens per request (can be set via ANTHROPIC_MAX_TOKENS)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


async def run_agent(config: AgentConfig, console: Console) -> ConversationResult:
    """Run one conversation and print the final answer."""
    driver = ConversationDriver(
        client=AnthropicClient.from_agent_config(config),
        tools_registry=get_tools_registry(),
        observer=ConsoleObserver(console),
        max_tool_rounds=config.max_tool_rounds,
    )
    result = await driver.run(config.prompt)

    answer = result.final_text if result.final_text is not None else "(no text response)"
    console.print()
    console.print(Panel(Text(answer), title="Final Response", border_style="green"))
    return result


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)

    try:
        setup_logging(LogConfig(level="DEBUG") if args.verbose else None)
        config = AgentConfig.from_env(prompt=args.prompt, model=args.model, max_tokens=args.max_tokens)
        asyncio.run(run_agent(config, console))
    except StockAgentError as e:
        err_console.print(f"Error: {e}", style="bold red", markup=False)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        err_console.print(f"Error: {e}", style="bold red", markup=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
