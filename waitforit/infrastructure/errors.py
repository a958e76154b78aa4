"""
Download Error Types

Custom exceptions for loading jokes from the remote API.
Both kinds are terminal for the attempt; nothing here is retried.
"""
from typing import Optional


class DownloadError(Exception):
    """Base exception for all joke download errors."""
    pass


class HttpStatusError(DownloadError):
    """
    HTTP response status was not successful.

    Raised when the status code falls outside [200, 300).
    """
    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"HTTP {status_code} for {url}" if url else f"HTTP {status_code}")
        self.status_code = status_code
        self.url = url


class DecodeError(DownloadError):
    """
    Response body could not be decoded into a Joke.

    Raised for malformed JSON, a non-object body, a missing `value`
    field, or a `value` that is not a string.
    """
    def __init__(self, message: str, body_snippet: Optional[str] = ""):
        super().__init__(message)
        self.body_snippet = body_snippet[:200] if body_snippet else ""  # Truncate for debugging


def is_successful_status(status_code: int) -> bool:
    """True for 2xx status codes."""
    return 200 <= status_code < 300
