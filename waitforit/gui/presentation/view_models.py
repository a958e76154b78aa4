"""
GUI View Models

View models translate presenter state into UI-friendly representations.
They contain display logic but no business logic.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple


FETCH_STATUS_DISPLAY = {
    True: "Fetching...",
    False: "Idle",
}

FETCH_STATUS_COLORS = {
    True: "yellow",
    False: "grey50",
}


@dataclass(frozen=True)
class JokeViewModel:
    """Snapshot of the joke screen."""
    joke_text: str
    is_fetching: bool
    status_display: str
    status_color: str
    previous_jokes: Tuple[str, ...]
    history_display: str
    can_fetch: bool

    @classmethod
    def from_state(
        cls,
        joke: str,
        is_fetching: bool,
        previous_jokes: Sequence[str],
    ) -> 'JokeViewModel':
        """Create view model from presenter state."""
        return cls(
            joke_text=joke,
            is_fetching=is_fetching,
            status_display=FETCH_STATUS_DISPLAY[is_fetching],
            status_color=FETCH_STATUS_COLORS[is_fetching],
            previous_jokes=tuple(previous_jokes),
            history_display=cls._format_history_count(len(previous_jokes)),
            can_fetch=not is_fetching,
        )

    @staticmethod
    def _format_history_count(count: int) -> str:
        if count == 0:
            return "No previous jokes"
        if count == 1:
            return "1 previous joke"
        return f"{count} previous jokes"
