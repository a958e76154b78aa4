"""
Joke Actor System

Actor-based isolation for the fetcher's mutable state.
"""
from .base import BaseActor
from .messages import (
    ActorMessage,
    # Commands
    StoreJoke,
    # Queries
    GetLoadedJoke,
)
from .joke_store_actor import JokeStoreActor

__all__ = [
    # Base
    "BaseActor",
    "ActorMessage",
    # Commands
    "StoreJoke",
    # Queries
    "GetLoadedJoke",
    # Actors
    "JokeStoreActor",
]
