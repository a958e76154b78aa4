"""
GUI Presenters

Presenters own the state a view renders and run the operations that
change it. State is published only on the event loop the UI runs on.
"""
import asyncio
import logging
from typing import Optional, Any, List, Tuple, Protocol
from abc import abstractmethod

from waitforit.infrastructure.joke_fetcher import JokeFetcher
from .view_models import JokeViewModel

logger = logging.getLogger(__name__)

PLACEHOLDER_JOKE = "Joke appears here"


class JokeViewProtocol(Protocol):
    """Protocol defining what methods the joke view may implement."""

    @abstractmethod
    def set_fetching(self, is_fetching: bool) -> None:
        """Show or hide the fetching indicator."""
        ...

    @abstractmethod
    def show_joke(self, text: str) -> None:
        """Display the current joke."""
        ...

    @abstractmethod
    def add_previous_joke(self, text: str) -> None:
        """Append a joke to the history display."""
        ...


class JokePresenter:
    """
    Presenter for the joke screen.

    State:
    - joke: current joke text, starts as a placeholder
    - is_fetching: True while a fetch is in flight
    - previous_jokes: every successfully loaded joke, in order

    The presenter binds to the first event loop that drives it and
    refuses calls from any other loop.
    """

    def __init__(self, fetcher: JokeFetcher, view: Any = None):
        """Initialize with a fetcher and an optional JokeViewProtocol view."""
        self._fetcher = fetcher
        self._view = view
        self._joke = PLACEHOLDER_JOKE
        self._is_fetching = False
        self._previous_jokes: List[str] = []
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def joke(self) -> str:
        return self._joke

    @property
    def is_fetching(self) -> bool:
        return self._is_fetching

    @property
    def previous_jokes(self) -> Tuple[str, ...]:
        return tuple(self._previous_jokes)

    def snapshot(self) -> JokeViewModel:
        """Current state as a view model."""
        return JokeViewModel.from_state(
            self._joke, self._is_fetching, self._previous_jokes
        )

    async def fetch_joke(self) -> None:
        """
        Load one joke and publish it.

        On failure the joke text and history are left untouched and the
        error propagates. The fetching flag is cleared on every path.

        Raises:
            HttpStatusError: status outside [200, 300)
            DecodeError: body does not match {"value": string}
            RuntimeError: called from a loop other than the bound one
        """
        self._ensure_ui_context()

        self._set_fetching(True)
        try:
            loaded = await self._fetcher.load()
            self._joke = loaded.value
            self._previous_jokes.append(loaded.value)
            logger.debug("Published joke #%d", len(self._previous_jokes))
            if hasattr(self._view, 'show_joke'):
                self._view.show_joke(loaded.value)
            if hasattr(self._view, 'add_previous_joke'):
                self._view.add_previous_joke(loaded.value)
        finally:
            self._set_fetching(False)

    def _set_fetching(self, is_fetching: bool) -> None:
        self._is_fetching = is_fetching
        if hasattr(self._view, 'set_fetching'):
            self._view.set_fetching(is_fetching)

    def _ensure_ui_context(self) -> None:
        loop = asyncio.get_running_loop()
        if self._loop is None:
            self._loop = loop
        elif loop is not self._loop:
            raise RuntimeError("JokePresenter used from a different event loop than its UI")
