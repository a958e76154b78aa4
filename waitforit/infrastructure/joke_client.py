"""
Async HTTP client for the joke API.
"""
import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from waitforit.config import WaitForItConfig
from waitforit.domain.entities import Joke
from waitforit.infrastructure.errors import (
    DecodeError,
    HttpStatusError,
    is_successful_status,
)

logger = logging.getLogger(__name__)


class JokePayload(BaseModel):
    """Wire shape of the API response. Fields other than `value` are ignored."""
    model_config = ConfigDict(extra="ignore")

    value: StrictStr


def decode_joke(body: bytes) -> Joke:
    """
    Decode a response body into a Joke.

    Raises:
        DecodeError: body is not a JSON object with a string `value`
    """
    try:
        payload = JokePayload.model_validate_json(body)
    except ValidationError as e:
        snippet = body.decode("utf-8", errors="replace") if body else ""
        raise DecodeError(f"Invalid joke payload: {e.error_count()} error(s)", snippet) from e
    return Joke(value=payload.value)


class JokeClient:
    """
    Performs one GET per call against the configured joke endpoint.
    Redirects are followed; the status of the final response is checked.

    Uses the injected `httpx.AsyncClient` when given; otherwise opens a
    short-lived client for each request.
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    def __init__(
        self,
        config: Optional[WaitForItConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Endpoint and timeout settings
            http_client: Shared client to send requests through
        """
        self._config = config or WaitForItConfig()
        self._http_client = http_client

    @property
    def url(self) -> str:
        return self._config.url

    async def fetch(self) -> Joke:
        """
        Fetch and decode one random joke.

        Returns:
            The decoded Joke

        Raises:
            HttpStatusError: status outside [200, 300)
            DecodeError: body does not match {"value": string}
            httpx.HTTPError: transport failure (connection, timeout)
        """
        url = self._config.url

        if self._http_client is not None:
            response = await self._http_client.get(
                url, headers=self.DEFAULT_HEADERS, follow_redirects=True
            )
        else:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.get(
                    url, headers=self.DEFAULT_HEADERS, follow_redirects=True
                )

        if not is_successful_status(response.status_code):
            logger.warning(f"HTTP {response.status_code} for {url}")
            raise HttpStatusError(response.status_code, url)

        try:
            joke = decode_joke(response.content)
        except DecodeError:
            logger.warning(f"Undecodable body from {url} ({len(response.content)} bytes)")
            raise

        logger.debug(f"Fetched {url} ({len(joke.value)} chars)")
        return joke
