"""
Joke Store Actor

Single owner of the fetcher's last loaded joke. Writes arrive through
the mailbox one at a time, so concurrent loads can never interleave
their updates.
"""
import logging

from waitforit.domain.entities import Joke
from waitforit.infrastructure.actors.base import BaseActor
from waitforit.infrastructure.actors.messages import StoreJoke, GetLoadedJoke

logger = logging.getLogger(__name__)


class JokeStoreActor(BaseActor):
    """
    Actor holding exactly one Joke.

    Messages:
    - StoreJoke(joke) -> overwrites the remembered joke, returns it
    - GetLoadedJoke() -> returns the remembered joke
    """

    def __init__(self, initial: Joke = Joke.EMPTY):
        super().__init__()
        self._loaded_joke = initial
        self._store_count = 0

    @property
    def store_count(self) -> int:
        """Number of commits handled (for testing)."""
        return self._store_count

    async def handle_message(self, message):
        if isinstance(message, StoreJoke):
            self._loaded_joke = message.joke
            self._store_count += 1
            logger.debug("Stored joke %s (%d chars)", message.correlation_id, len(message.joke.value))
            return self._loaded_joke

        if isinstance(message, GetLoadedJoke):
            return self._loaded_joke

        raise TypeError(f"Unknown message: {type(message).__name__}")
