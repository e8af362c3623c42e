"""Main Textual application."""

from pathlib import Path
from typing import ClassVar

from loguru import logger
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Header

from clockedin.config import DEFAULT_CONFIG_PATH, Settings
from clockedin.presenter import StatusPresenter
from clockedin.widgets import ProgressPanel


class ClockedInApp(App):
    """Terminal host for the progress label."""

    CSS = """
    #main-container {
        height: 100%;
        align: center middle;
    }

    #progress-panel {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $panel;
        border: solid $primary;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("space", "cycle_mode", "Next Mode"),
        ("r", "refresh", "Refresh"),
    ]

    def __init__(self, settings: Settings, config_path: Path = DEFAULT_CONFIG_PATH) -> None:
        super().__init__()
        self.settings = settings
        self.config_path = config_path
        self.presenter = StatusPresenter(settings)

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"):
            yield ProgressPanel(id="progress-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Draw the first value and start polling."""
        self.title = "Clocked In"
        self.refresh_progress()
        interval = self.presenter.update_interval
        logger.info(f"Refreshing every {interval:.0f}s")
        self.set_interval(interval, self.refresh_progress)

    def refresh_progress(self) -> None:
        """Recompute the progress and update the panel."""
        self.presenter.refresh()
        self._update_ui()

    def _update_ui(self) -> None:
        panel = self.query_one("#progress-panel", ProgressPanel)
        panel.show(self.presenter, self.presenter.tooltip())
        self.sub_title = self.presenter.current_mode.value

    def action_refresh(self) -> None:
        """Refresh immediately."""
        self.refresh_progress()

    def action_cycle_mode(self) -> None:
        """Switch to the next view mode and remember it."""
        mode = self.presenter.cycle_mode()
        self._update_ui()
        # Only the view mode is persisted; environment overrides stay in memory.
        try:
            stored = Settings.load(self.config_path)
            stored.current_view_mode = mode
            stored.save(self.config_path)
        except OSError as e:
            logger.warning(f"Could not save view mode: {e}")
            self.notify(f"Could not save view mode: {e}", severity="warning")
        logger.debug(f"View mode is now {mode.value}")
