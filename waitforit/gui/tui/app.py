"""
Terminal TUI Application using Textual

Shows the current joke, a fetching indicator and the joke history.
Fetches run as async workers on the app's own event loop, which is
the UI context the presenter publishes on.
"""
import logging
from typing import Optional

import httpx
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import (
    Header,
    Footer,
    Static,
    Button,
    RichLog,
)
from textual.binding import Binding
from textual.reactive import reactive
from rich.text import Text
from rich.panel import Panel

from waitforit.config import WaitForItConfig
from waitforit.infrastructure.errors import DownloadError
from waitforit.infrastructure.joke_fetcher import JokeFetcher
from waitforit.gui.presentation.presenters import JokePresenter, PLACEHOLDER_JOKE
from waitforit.gui.presentation.view_models import (
    FETCH_STATUS_COLORS,
    FETCH_STATUS_DISPLAY,
    JokeViewModel,
)

logger = logging.getLogger(__name__)


class JokeWidget(Static):
    """Widget displaying the current joke."""

    joke_text = reactive(PLACEHOLDER_JOKE)

    def update_joke(self, text: str):
        self.joke_text = text
        self.refresh()

    def render(self) -> Panel:
        style = "dim italic" if self.joke_text == PLACEHOLDER_JOKE else "bold"
        return Panel(Text(self.joke_text, style=style), title="Joke", border_style="blue")


class FetchStatusWidget(Static):
    """Widget displaying whether a fetch is in flight."""

    status_display = reactive(FETCH_STATUS_DISPLAY[False])
    status_color = reactive(FETCH_STATUS_COLORS[False])

    def update_status(self, vm: JokeViewModel):
        self.status_display = vm.status_display
        self.status_color = vm.status_color
        self.refresh()

    def render(self) -> Text:
        return Text(self.status_display, style=f"{self.status_color} bold")


class JokeTUI(App):
    """
    Main Terminal TUI Application.

    Acts as the presenter's view: the presenter calls back into
    set_fetching/show_joke/add_previous_joke as its state changes.
    """

    TITLE = "WaitForIt"

    CSS = """
    #joke {
        height: auto;
        min-height: 5;
    }

    #controls {
        height: auto;
        align: left middle;
    }

    #fetch_status {
        width: auto;
        margin: 1 2;
    }

    #history {
        height: 1fr;
        border: round $accent;
    }

    Button {
        margin: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("f", "fetch", "Fetch joke"),
    ]

    def __init__(
        self,
        fetcher: Optional[JokeFetcher] = None,
        config: Optional[WaitForItConfig] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._fetcher = fetcher or JokeFetcher(config=config)
        self._presenter = JokePresenter(self._fetcher, view=self)

    @property
    def presenter(self) -> JokePresenter:
        return self._presenter

    def compose(self) -> ComposeResult:
        yield Header()
        yield JokeWidget(id="joke")
        with Horizontal(id="controls"):
            yield Button("Fetch joke", id="btn_fetch", variant="primary")
            yield FetchStatusWidget(id="fetch_status")
        yield RichLog(id="history", wrap=True, markup=False)
        yield Footer()

    async def on_mount(self):
        self._render_state()
        await self._fetcher.start()

    async def on_unmount(self):
        await self._fetcher.stop()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_fetch":
            self.action_fetch()

    def action_fetch(self) -> None:
        """Start a fetch without blocking the UI. Ignored while one is running."""
        if self._presenter.is_fetching:
            return
        self.run_worker(self._fetch_joke(), group="fetch")

    async def _fetch_joke(self) -> None:
        try:
            await self._presenter.fetch_joke()
        except DownloadError as e:
            logger.warning(f"Joke fetch failed: {e}")
            self.notify(f"Joke fetch failed: {e}", title="Error", severity="error")
        except httpx.HTTPError as e:
            logger.warning(f"Joke fetch failed: {type(e).__name__}: {e}")
            self.notify(f"Network error: {e}", title="Error", severity="error")

    def _render_state(self) -> None:
        vm = self._presenter.snapshot()
        self.query_one("#joke", JokeWidget).update_joke(vm.joke_text)
        self.query_one("#fetch_status", FetchStatusWidget).update_status(vm)
        self.query_one("#btn_fetch", Button).disabled = not vm.can_fetch
        self.query_one("#history", RichLog).border_title = vm.history_display

    # View protocol

    def set_fetching(self, is_fetching: bool) -> None:
        self._render_state()

    def show_joke(self, text: str) -> None:
        self._render_state()

    def add_previous_joke(self, text: str) -> None:
        history = self.query_one("#history", RichLog)
        history.write(f"{len(self._presenter.previous_jokes)}. {text}")
        self._render_state()

    async def action_quit(self):
        """Quit the application."""
        await self._fetcher.stop()
        self.exit()


def run_tui(config: Optional[WaitForItConfig] = None):
    """Run the TUI application."""
    app = JokeTUI(config=config)
    app.run()


if __name__ == "__main__":
    run_tui()
