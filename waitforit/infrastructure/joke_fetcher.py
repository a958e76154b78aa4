"""
Joke Fetcher

Loads a joke over HTTP and remembers the last one loaded.

The round trip runs in the caller's task, so concurrent loads proceed
independently. Only the commit of the result goes through the store
actor, which serializes writes to the remembered joke.
"""
from typing import Optional
from uuid import uuid4

from waitforit.config import WaitForItConfig
from waitforit.domain.entities import Joke
from waitforit.infrastructure.actors.joke_store_actor import JokeStoreActor
from waitforit.infrastructure.actors.messages import StoreJoke, GetLoadedJoke
from waitforit.infrastructure.joke_client import JokeClient
from waitforit.infrastructure.logging import LogContext, StructuredLogger


class JokeFetcher:
    """
    Fetcher with an actor-isolated remembered joke.

    Usage:
        async with JokeFetcher() as fetcher:
            joke = await fetcher.load()
    """

    def __init__(
        self,
        client: Optional[JokeClient] = None,
        store: Optional[JokeStoreActor] = None,
        config: Optional[WaitForItConfig] = None,
    ):
        self._client = client or JokeClient(config=config)
        self._store = store or JokeStoreActor()
        self._logger = StructuredLogger("fetcher")

    async def start(self) -> None:
        await self._store.start()

    async def stop(self) -> None:
        await self._store.stop()

    async def __aenter__(self) -> 'JokeFetcher':
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    async def load(self) -> Joke:
        """
        Fetch one joke, remember it, and return it.

        Raises:
            HttpStatusError: status outside [200, 300)
            DecodeError: body does not match {"value": string}
        """
        await self.start()

        ctx = LogContext(correlation_id=str(uuid4()), component="fetcher")
        with self._logger.timed_operation("load_joke", ctx):
            joke = await self._client.fetch()
            return await self._store.ask(
                StoreJoke(correlation_id=ctx.correlation_id, joke=joke)
            )

    async def last_joke(self) -> Joke:
        """The last successfully loaded joke, or Joke.EMPTY."""
        await self.start()
        return await self._store.ask(GetLoadedJoke())
