"""
Typed actor messages for the joke store.

Convention:
- Commands: Imperative verbs (StoreJoke)
- Queries: Get* (GetLoadedJoke)
- All messages are frozen dataclasses
"""
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from waitforit.domain.entities import Joke


def _generate_correlation_id() -> str:
    """Generate a unique correlation ID for message tracking."""
    return str(uuid4())


def _now() -> datetime:
    """Generate current timestamp."""
    return datetime.now()


# ============ BASE ============

@dataclass(frozen=True)
class ActorMessage:
    """
    Base class for all typed actor messages.

    Provides automatic correlation_id and timestamp for tracking.
    """
    correlation_id: str = field(default_factory=_generate_correlation_id)
    timestamp: datetime = field(default_factory=_now)


# ============ COMMANDS ============

@dataclass(frozen=True)
class StoreJoke(ActorMessage):
    """
    Command: Remember a successfully loaded joke.

    Replies with the joke now held by the store.
    """
    joke: Joke = Joke.EMPTY


# ============ QUERIES ============

@dataclass(frozen=True)
class GetLoadedJoke(ActorMessage):
    """Query: Return the last remembered joke."""
    pass
