#!/usr/bin/env python
"""
WaitForIt Entry Point.

Usage:
    python -m waitforit
    python -m waitforit --once
    python -m waitforit --once --json-logs --log-level DEBUG
"""
import sys


def main() -> int:
    """Main entry point for the WaitForIt CLI."""
    from waitforit.infrastructure.cli.joke_cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
