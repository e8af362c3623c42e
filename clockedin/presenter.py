"""Status label and tooltip presentation."""

from calendar import month_name
from datetime import datetime

from loguru import logger

from clockedin.cache import WorkingDaysCache
from clockedin.calculator import (
    FULL_WEEK_DAYS,
    WORKING_WEEK_DAYS,
    calculate_day_status,
    calculate_percentage,
    count_working_days,
    count_working_days_until,
    day_of_period,
    monday_based_weekday,
    optimal_update_interval,
    period_length,
)
from clockedin.config import Settings
from clockedin.models import (
    CalendarMode,
    DayPhase,
    Scope,
    TextDetail,
    ViewMode,
    VisualDetail,
    WeekMode,
)

OVERTIME_TEXT = "Overtime"
OVERTIME_LABEL = "OT"


def format_display(mode: ViewMode, percentage: int, text_detail: TextDetail) -> str:
    """Format a percentage for the text display style."""
    percentage_text = f"{percentage}%"
    if text_detail == TextDetail.FULL:
        return f"{mode.value} {percentage_text}"
    if text_detail == TextDetail.COMPACT:
        return f"{mode.short_name} {percentage_text}"
    return percentage_text


def visual_label(percentage: int, visual_detail: VisualDetail, is_overtime: bool) -> str | None:
    """Label shown beside a visual indicator, or None when it stands alone."""
    if visual_detail == VisualDetail.VISUAL_ONLY:
        return None
    return OVERTIME_LABEL if is_overtime else f"{percentage}%"


class StatusPresenter:
    """Keeps the displayed progress in sync with the settings and the clock."""

    def __init__(self, settings: Settings, cache: WorkingDaysCache | None = None) -> None:
        self.settings = settings
        self.cache = cache
        self.current_percentage: int = 0
        self.is_overtime: bool = False
        self.display_text: str = format_display(ViewMode.DAY, 0, settings.text_detail)
        self._last_tooltip: str = ""

    @property
    def current_mode(self) -> ViewMode:
        return self.settings.current_view_mode

    @property
    def update_interval(self) -> float:
        return optimal_update_interval(self.settings)

    @property
    def label(self) -> str | None:
        """Text for the status label in the configured display style."""
        if self.settings.display_style.is_visual:
            return visual_label(
                self.current_percentage, self.settings.visual_detail, self.is_overtime
            )
        return self.display_text

    def cycle_mode(self, now: datetime | None = None) -> ViewMode:
        """Switch to the next view mode and refresh."""
        self.settings.current_view_mode = self.current_mode.next()
        self.refresh(now)
        return self.current_mode

    def refresh(self, now: datetime | None = None) -> None:
        """
        Recompute the percentage for the current mode.

        A calendar failure keeps the previous state on screen.
        """
        now = now or datetime.now()
        mode = self.current_mode
        try:
            if mode == ViewMode.DAY:
                is_overtime = calculate_day_status(now, self.settings).phase == DayPhase.OVERTIME
            else:
                is_overtime = False
            percentage = calculate_percentage(mode, now, self.settings, self.cache)
        except (ValueError, OverflowError):
            logger.exception(f"Failed to refresh {mode.value} progress, keeping previous value")
            return

        self.current_percentage = percentage
        self.is_overtime = is_overtime
        if is_overtime:
            self.display_text = OVERTIME_TEXT
        else:
            self.display_text = format_display(mode, percentage, self.settings.text_detail)

    def tooltip(self, now: datetime | None = None) -> str:
        """Longer description of the current mode's progress."""
        now = now or datetime.now()
        try:
            self._last_tooltip = self._build_tooltip(now)
        except (ValueError, OverflowError):
            logger.exception("Failed to build tooltip, keeping previous text")
        return self._last_tooltip

    def _build_tooltip(self, now: datetime) -> str:
        mode = self.current_mode
        if mode == ViewMode.DAY:
            return self._day_tooltip(now)
        if mode == ViewMode.WEEK:
            return self._week_tooltip(now)
        if mode == ViewMode.MONTH:
            return self._period_tooltip(now, Scope.MONTH, month_name[now.month])
        return self._period_tooltip(now, Scope.YEAR, str(now.year))

    def _day_tooltip(self, now: datetime) -> str:
        status = calculate_day_status(now, self.settings)
        if status.phase == DayPhase.OVERTIME:
            return f"Day: {OVERTIME_TEXT}"
        return f"Day: {self.settings.day_start} - {self.settings.day_end} ({status.percentage}%)"

    def _week_tooltip(self, now: datetime) -> str:
        percentage = calculate_percentage(ViewMode.WEEK, now, self.settings)
        weekday = monday_based_weekday(now)
        if self.settings.week_mode == WeekMode.WORKING_DAYS:
            day_index = min(weekday, WORKING_WEEK_DAYS)
            return f"Week: Day {day_index} of {WORKING_WEEK_DAYS} ({percentage}%)"
        return f"Week: Day {weekday} of {FULL_WEEK_DAYS} ({percentage}%)"

    def _period_tooltip(self, now: datetime, scope: Scope, title: str) -> str:
        mode = ViewMode.MONTH if scope == Scope.MONTH else ViewMode.YEAR
        percentage = calculate_percentage(mode, now, self.settings, self.cache)
        today = now.date()
        if self.settings.calendar_mode == CalendarMode.WORKING_DAYS:
            elapsed = count_working_days_until(today, scope, self.cache)
            total = count_working_days(today, scope, self.cache)
            return f"{title}: Working day {elapsed} of {total} ({percentage}%)"
        day_index = day_of_period(today, scope)
        total = period_length(today, scope)
        return f"{title}: Day {day_index} of {total} ({percentage}%)"
