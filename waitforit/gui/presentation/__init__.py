# GUI Presentation Layer
"""
Presentation layer containing:
- View Models: UI-optimized snapshots of presenter state
- Presenters: State owners that run fetches and notify views
"""
from .view_models import JokeViewModel
from .presenters import (
    JokePresenter,
    JokeViewProtocol,
    PLACEHOLDER_JOKE,
)

__all__ = [
    'JokeViewModel',
    'JokePresenter',
    'JokeViewProtocol',
    'PLACEHOLDER_JOKE',
]
