"""Progress calculations for the day, week, month and year."""

from calendar import isleap, monthrange
from datetime import date, datetime, timedelta

from clockedin.cache import WORKING_DAYS_CACHE, WorkingDaysCache
from clockedin.config import Settings
from clockedin.models import CalendarMode, DayPhase, DayStatus, Scope, ViewMode, WeekMode

# Constants
FULL_WEEK_DAYS = 7
WORKING_WEEK_DAYS = 5
MIN_UPDATE_INTERVAL = 30  # seconds


def monday_based_weekday(target_date: date) -> int:
    """Weekday number with Monday = 1 and Sunday = 7."""
    return target_date.isoweekday()


def is_weekend(target_date: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return monday_based_weekday(target_date) > WORKING_WEEK_DAYS


def is_working_day(target_date: date) -> bool:
    """Check if a date is a working day (Monday to Friday, holidays are not considered)."""
    return not is_weekend(target_date)


def period_start(target_date: date, scope: Scope) -> date:
    """First day of the month or year containing a date."""
    if scope == Scope.MONTH:
        return target_date.replace(day=1)
    return target_date.replace(month=1, day=1)


def period_length(target_date: date, scope: Scope) -> int:
    """Number of days in the month or year containing a date."""
    if scope == Scope.MONTH:
        _, days_in_month = monthrange(target_date.year, target_date.month)
        return days_in_month
    return 366 if isleap(target_date.year) else 365


def day_of_period(target_date: date, scope: Scope) -> int:
    """1-based position of a date within its month or year."""
    if scope == Scope.MONTH:
        return target_date.day
    return target_date.timetuple().tm_yday


def period_key(target_date: date, scope: Scope) -> str:
    """Cache key for the period containing a date, e.g. '2025-12' or '2025'."""
    if scope == Scope.MONTH:
        return f"{target_date.year:04d}-{target_date.month:02d}"
    return f"{target_date.year:04d}"


def _count_working_days_in(start: date, days: int) -> int:
    """Count working days among `days` consecutive dates from `start`."""
    return sum(1 for offset in range(days) if is_working_day(start + timedelta(days=offset)))


def count_working_days(
    target_date: date, scope: Scope, cache: WorkingDaysCache | None = None
) -> int:
    """Count the working days in the whole month or year containing a date."""
    cache = cache or WORKING_DAYS_CACHE
    start = period_start(target_date, scope)
    days = period_length(target_date, scope)
    return cache.total(
        scope, period_key(target_date, scope), lambda: _count_working_days_in(start, days)
    )


def count_working_days_until(
    target_date: date, scope: Scope, cache: WorkingDaysCache | None = None
) -> int:
    """
    Count working days from the start of the period up to and including a date.

    The result is at least 1, so a period that opens on a weekend still
    reports its first working day as day 1.
    """
    cache = cache or WORKING_DAYS_CACHE
    start = period_start(target_date, scope)
    index = day_of_period(target_date, scope)
    return cache.until(
        scope,
        period_key(target_date, scope),
        index,
        lambda: max(_count_working_days_in(start, index), 1),
    )


def calculate_day_status(now: datetime, settings: Settings) -> DayStatus:
    """Where `now` sits relative to the configured work window."""
    current_minutes = now.hour * 60 + now.minute
    start_minutes = settings.day_start.minutes
    end_minutes = settings.day_end.minutes

    if current_minutes < start_minutes:
        return DayStatus.before_work()
    if current_minutes >= end_minutes:
        return DayStatus.overtime()

    elapsed = current_minutes - start_minutes
    total = max(end_minutes - start_minutes, 1)
    return DayStatus.working((elapsed * 100) // total)


def calculate_day_progress(now: datetime, settings: Settings) -> float:
    """Fraction of today's work window completed, between 0.0 and 1.0."""
    return calculate_day_status(now, settings).progress


def _to_percentage(completed_days: float, total_days: int) -> int:
    """Truncate (completed / total) to a whole percentage clamped to [0, 100]."""
    percentage = int(completed_days / max(total_days, 1) * 100)
    return min(max(percentage, 0), 100)


def calculate_week_percentage(now: datetime, settings: Settings) -> int:
    """
    Percentage of the week completed.

    In working-days mode the week covers Monday to Friday and is reported
    as complete over the weekend.
    """
    weekday = monday_based_weekday(now)

    if settings.week_mode == WeekMode.WORKING_DAYS:
        if is_weekend(now):
            return 100
        total_days = WORKING_WEEK_DAYS
        day_index = min(weekday, WORKING_WEEK_DAYS)
    else:
        total_days = FULL_WEEK_DAYS
        day_index = weekday

    # (completed days + partial day) / total days
    day_progress = calculate_day_progress(now, settings)
    return _to_percentage((day_index - 1) + day_progress, total_days)


def _calculate_period_percentage(
    now: datetime, settings: Settings, scope: Scope, cache: WorkingDaysCache | None
) -> int:
    """Shared month/year calculation."""
    today = now.date()

    if settings.calendar_mode == CalendarMode.WORKING_DAYS:
        total_days = count_working_days(today, scope, cache)
        day_index = count_working_days_until(today, scope, cache)
    else:
        total_days = period_length(today, scope)
        day_index = day_of_period(today, scope)

    # A weekend is past in working-days mode: it adds a full day on top of
    # the last working day's count instead of partial progress.
    if settings.calendar_mode == CalendarMode.WORKING_DAYS and is_weekend(today):
        day_progress = 1.0
    else:
        day_progress = calculate_day_progress(now, settings)

    return _to_percentage((day_index - 1) + day_progress, total_days)


def calculate_month_percentage(
    now: datetime, settings: Settings, cache: WorkingDaysCache | None = None
) -> int:
    """Percentage of the current month completed."""
    return _calculate_period_percentage(now, settings, Scope.MONTH, cache)


def calculate_year_percentage(
    now: datetime, settings: Settings, cache: WorkingDaysCache | None = None
) -> int:
    """Percentage of the current year completed."""
    return _calculate_period_percentage(now, settings, Scope.YEAR, cache)


def calculate_percentage(
    mode: ViewMode, now: datetime, settings: Settings, cache: WorkingDaysCache | None = None
) -> int:
    """Percentage for any view mode. Day overtime counts as 100."""
    if mode == ViewMode.DAY:
        status = calculate_day_status(now, settings)
        return 100 if status.phase == DayPhase.OVERTIME else status.percentage
    if mode == ViewMode.WEEK:
        return calculate_week_percentage(now, settings)
    if mode == ViewMode.MONTH:
        return calculate_month_percentage(now, settings, cache)
    return calculate_year_percentage(now, settings, cache)


def optimal_update_interval(settings: Settings) -> float:
    """
    Seconds after which the day percentage may have moved by one point.

    Never shorter than 30 seconds.
    """
    return max(settings.minutes_per_percent * 60, MIN_UPDATE_INTERVAL)
