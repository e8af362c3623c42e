"""Textual widgets for the TUI."""

from clockedin.widgets.progress_panel import ProgressPanel

__all__ = ["ProgressPanel"]
