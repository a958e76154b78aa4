"""
Test utilities for fetcher and actor testing.

Provides a recording store actor, scripted HTTP transports and fixtures.
"""
import asyncio
import json
from typing import List, Optional, Sequence, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from waitforit.config import WaitForItConfig
from waitforit.domain.entities import Joke
from waitforit.infrastructure.actors.joke_store_actor import JokeStoreActor
from waitforit.infrastructure.actors.messages import StoreJoke
from waitforit.infrastructure.joke_client import JokeClient
from waitforit.infrastructure.joke_fetcher import JokeFetcher


Body = Union[dict, str, bytes]


class RecordingJokeStore(JokeStoreActor):
    """
    Store actor that records every commit in the order it was applied.

    Use this in tests to verify the remembered joke matches the last commit.
    """

    def __init__(self):
        super().__init__()
        self.committed: List[Joke] = []

    async def handle_message(self, message):
        result = await super().handle_message(message)
        if isinstance(message, StoreJoke):
            self.committed.append(message.joke)
        return result


class ScriptedTransport:
    """
    Mock HTTP endpoint for the joke API.

    Replies with queued (status, body, delay) entries in order; the last
    entry repeats once the queue is exhausted.
    """

    def __init__(self, responses: Sequence[Tuple[int, Body, float]]):
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        index = min(len(self.requests), len(self._responses) - 1)
        self.requests.append(request)
        status, body, delay = self._responses[index]
        if delay:
            await asyncio.sleep(delay)
        return build_response(status, body)

    @property
    def request_count(self) -> int:
        return len(self.requests)


def build_response(status: int, body: Body) -> httpx.Response:
    """Build an httpx response from a dict (JSON), str or bytes body."""
    if isinstance(body, dict):
        return httpx.Response(status, json=body)
    if isinstance(body, str):
        return httpx.Response(status, content=body.encode("utf-8"))
    return httpx.Response(status, content=body)


def make_client(
    responses: Sequence[Tuple[int, Body, float]],
    config: Optional[WaitForItConfig] = None,
) -> Tuple[JokeClient, ScriptedTransport]:
    """JokeClient wired to a scripted transport."""
    transport = ScriptedTransport(responses)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return JokeClient(config=config, http_client=http_client), transport


def ok(value: str, delay: float = 0.0) -> Tuple[int, Body, float]:
    """A successful API reply carrying `value`."""
    return 200, {"value": value, "categories": ["dev"], "id": "x"}, delay


# ============ PYTEST FIXTURES ============

@pytest_asyncio.fixture
async def recording_store():
    """Fixture: Started recording store actor."""
    store = RecordingJokeStore()
    await store.start()
    yield store
    await store.stop()


@pytest.fixture
def make_fetcher():
    """Fixture: Factory for fetchers over scripted responses."""
    def _make(responses, store: Optional[JokeStoreActor] = None):
        client, transport = make_client(responses)
        return JokeFetcher(client=client, store=store), transport
    return _make
