"""
Terminal UI for WaitForIt, built on Textual.
"""
from .app import JokeTUI, JokeWidget, FetchStatusWidget, run_tui

__all__ = [
    "JokeTUI",
    "JokeWidget",
    "FetchStatusWidget",
    "run_tui",
]
