"""Data models for progress modes and day status."""

from dataclasses import dataclass
from enum import Enum


class ViewMode(str, Enum):
    """Time scope shown in the status label."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    def next(self) -> "ViewMode":
        """The mode that follows this one, wrapping from YEAR back to DAY."""
        modes = list(ViewMode)
        return modes[(modes.index(self) + 1) % len(modes)]

    @property
    def short_name(self) -> str:
        return self.value[0]


class WeekMode(str, Enum):
    """Which days make up a week."""

    FULL_WEEK = "Mon-Sun (7 days)"
    WORKING_DAYS = "Working days only (Mon-Fri)"


class CalendarMode(str, Enum):
    """Which days count towards month and year progress."""

    ALL_DAYS = "All days"
    WORKING_DAYS = "Working days only"


class DisplayStyle(str, Enum):
    """Primary display style."""

    TEXT = "Text"
    PIE = "Pie"
    BAR = "Bar"
    GAUGE = "Gauge"

    @property
    def is_visual(self) -> bool:
        return self != DisplayStyle.TEXT


class TextDetail(str, Enum):
    """Detail level for the text display style."""

    FULL = "Full"  # "Day 42%"
    COMPACT = "Compact"  # "D 42%"
    MINIMAL = "Minimal"  # "42%"


class VisualDetail(str, Enum):
    """Detail level for the visual display styles."""

    WITH_PERCENT = "With %"
    VISUAL_ONLY = "Visual Only"


class Scope(str, Enum):
    """Calendar period a working-day count covers."""

    MONTH = "month"
    YEAR = "year"


class DayPhase(str, Enum):
    """Where the current time sits relative to the work window."""

    BEFORE_WORK = "before_work"
    WORKING = "working"
    OVERTIME = "overtime"


@dataclass(frozen=True)
class DayStatus:
    """Status of the current work day."""

    phase: DayPhase
    percentage: int = 0

    @classmethod
    def before_work(cls) -> "DayStatus":
        return cls(DayPhase.BEFORE_WORK)

    @classmethod
    def working(cls, percentage: int) -> "DayStatus":
        return cls(DayPhase.WORKING, percentage)

    @classmethod
    def overtime(cls) -> "DayStatus":
        return cls(DayPhase.OVERTIME)

    @property
    def progress(self) -> float:
        """
        Fraction of the work day completed.

        Before work counts as 0.0 and overtime as a full day.
        """
        if self.phase == DayPhase.BEFORE_WORK:
            return 0.0
        if self.phase == DayPhase.OVERTIME:
            return 1.0
        return self.percentage / 100.0
