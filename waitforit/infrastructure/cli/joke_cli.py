"""
WaitForIt Command-Line Interface.

Runs the terminal UI, or with --once fetches a single joke and prints it.
"""
import argparse
import asyncio
import sys
from dataclasses import replace
from typing import Optional, List

import httpx

from waitforit.config import WaitForItConfig
from waitforit.infrastructure.errors import DownloadError
from waitforit.infrastructure.joke_fetcher import JokeFetcher
from waitforit.infrastructure.logging import StructuredLogger, create_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="waitforit",
        description="Fetch random developer jokes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                 Launch the terminal UI
  %(prog)s --once          Print one joke and exit
  %(prog)s --once --json-logs --log-level DEBUG
        """,
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch a single joke, print it and exit",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override WAITFORIT_LOG_LEVEL",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def resolve_config(args: argparse.Namespace) -> WaitForItConfig:
    """Environment config with command-line overrides applied."""
    config = WaitForItConfig.from_env()
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if args.json_logs:
        config = replace(config, json_logs=True)
    return config


async def run_once(
    config: WaitForItConfig,
    logger: StructuredLogger,
    fetcher: Optional[JokeFetcher] = None,
) -> int:
    """Fetch one joke and print it. Returns the process exit code."""
    fetcher = fetcher or JokeFetcher(config=config)

    async with fetcher:
        try:
            joke = await fetcher.load()
        except DownloadError as e:
            logger.error(f"Joke fetch failed: {e}", exc_info=False)
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except httpx.HTTPError as e:
            logger.error(f"Network error: {type(e).__name__}: {e}", exc_info=False)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(joke.value)
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Synchronous main entry point."""
    parsed_args = parse_args(args)
    config = resolve_config(parsed_args)

    logger = create_logger(
        "cli",
        level=config.log_level,
        json_output=config.json_logs,
        log_dir=config.log_dir,
        # The TUI owns the terminal; its console logs go through Textual.
        textual=not parsed_args.once,
    )
    logger.debug("Configuration loaded", **config.to_dict())

    if parsed_args.once:
        return asyncio.run(run_once(config, logger))

    from waitforit.gui.tui.app import run_tui
    run_tui(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
