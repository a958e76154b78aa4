"""
WaitForIt configuration and settings.

Centralizes the endpoint, HTTP and logging settings,
including default values and environment variables.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any
from urllib.parse import urlencode, urlunsplit
import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number (got: {raw!r})") from None


def build_joke_url(
    scheme: str = "https",
    host: str = "api.chucknorris.io",
    path: str = "/jokes/random",
    query: Optional[Dict[str, str]] = None,
) -> str:
    """
    Assemble the joke endpoint URL from its parts.

    Pure and deterministic: the same parts always give the same URL.
    """
    if query is None:
        query = {"category": "dev"}
    return urlunsplit((scheme, host, path, urlencode(query), ""))


@dataclass(frozen=True)
class WaitForItConfig:
    """Configuration for the joke fetcher and its front ends."""

    # Endpoint
    scheme: str = "https"
    host: str = "api.chucknorris.io"
    path: str = "/jokes/random"
    category: str = "dev"

    # HTTP
    timeout: float = 10.0  # Seconds; applies to connect and read

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'WaitForItConfig':
        """Create config from environment variables."""
        return cls(
            scheme=os.getenv("WAITFORIT_SCHEME", "https"),
            host=os.getenv("WAITFORIT_HOST", "api.chucknorris.io"),
            path=os.getenv("WAITFORIT_PATH", "/jokes/random"),
            category=os.getenv("WAITFORIT_CATEGORY", "dev"),
            timeout=_env_float("WAITFORIT_TIMEOUT", "10.0"),
            log_level=os.getenv("WAITFORIT_LOG_LEVEL", "INFO").upper(),
            json_logs=_env_bool("WAITFORIT_JSON_LOGS", "false"),
            log_dir=os.getenv("WAITFORIT_LOG_DIR") or None,
        )

    @property
    def url(self) -> str:
        """Endpoint URL for a random joke in the configured category."""
        return build_joke_url(
            scheme=self.scheme,
            host=self.host,
            path=self.path,
            query={"category": self.category},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "timeout": self.timeout,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "log_dir": self.log_dir,
        }


DEFAULT_JOKE_URL = build_joke_url()
