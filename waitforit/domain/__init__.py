"""
WaitForIt Domain Layer

Immutable value objects with ZERO external dependencies.
"""
from .entities import Joke

__all__ = [
    "Joke",
]
