"""Panel showing the current progress label and tooltip."""

from rich.text import Text
from textual.widgets import Static

from clockedin.presenter import StatusPresenter


class ProgressPanel(Static):
    """Status label for the current view mode, with its tooltip underneath."""

    def show(self, presenter: StatusPresenter, tooltip: str) -> None:
        """Render the presenter's current state."""
        style = "bold dark_orange" if presenter.is_overtime else "bold"
        label = presenter.label or presenter.current_mode.value

        text = Text(label, style=style, justify="center")
        text.append("\n")
        text.append(tooltip, style="dim")
        self.update(text)
