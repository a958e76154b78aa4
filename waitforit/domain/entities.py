"""
Domain Entities

The joke payload returned by the remote API.
"""
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Joke:
    """
    A single joke.

    Defined only by its text. `Joke.EMPTY` is the placeholder used
    before anything has been loaded.
    """
    value: str

    EMPTY: ClassVar['Joke']

    @property
    def is_empty(self) -> bool:
        return self.value == ""


Joke.EMPTY = Joke(value="")
