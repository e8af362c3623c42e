"""Tests for settings persistence and validation."""

import tempfile
from pathlib import Path

import pytest

from clockedin.config import SECTION, Settings
from clockedin.errors import InvalidSettingsError
from clockedin.models import CalendarMode, DisplayStyle, TextDetail, ViewMode, WeekMode
from clockedin.time_of_day import TimeOfDay


@pytest.fixture
def config_path():
    """Path to a temporary config file."""
    with tempfile.TemporaryDirectory() as directory:
        yield Path(directory) / "clocked-in" / "config.ini"


def test_defaults():
    """A fresh install works 9 to 5, every day counted."""
    settings = Settings()

    assert settings.day_start_hour == 9
    assert settings.day_start_minute == 0
    assert settings.day_end_hour == 17
    assert settings.day_end_minute == 0
    assert settings.week_mode == WeekMode.FULL_WEEK
    assert settings.calendar_mode == CalendarMode.ALL_DAYS
    assert settings.current_view_mode == ViewMode.DAY
    assert settings.workday_duration_minutes == 480
    assert settings.minutes_per_percent == pytest.approx(4.8)
    assert settings.is_valid_work_day


def test_load_missing_file_returns_defaults(config_path):
    """No file means default settings."""
    assert Settings.load(config_path) == Settings()


def test_save_and_load(config_path):
    """Settings survive a save and load."""
    settings = Settings(
        day_start=TimeOfDay.of(8, 30),
        day_end=TimeOfDay.of(18, 15),
        week_mode=WeekMode.WORKING_DAYS,
        calendar_mode=CalendarMode.WORKING_DAYS,
        current_view_mode=ViewMode.MONTH,
        display_style=DisplayStyle.BAR,
        text_detail=TextDetail.COMPACT,
    )
    settings.save(config_path)

    assert Settings.load(config_path) == settings


def test_load_late_start_keeps_stored_end(config_path):
    """A stored start after the default end does not clobber the stored end."""
    config_path.parent.mkdir(parents=True)
    config_path.write_text(f"[{SECTION}]\nday_start = 18:00\nday_end = 22:30\n")

    settings = Settings.load(config_path)

    assert settings.day_start == TimeOfDay.of(18)
    assert settings.day_end == TimeOfDay.of(22, 30)


def test_load_ignores_bad_values(config_path):
    """Unparsable values fall back to defaults one key at a time."""
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        f"[{SECTION}]\n"
        "day_start = soon\n"
        "day_end = 16:00\n"
        "week_mode = Fortnight\n"
        "calendar_mode = Working days only\n"
    )

    settings = Settings.load(config_path)

    assert settings.day_start == TimeOfDay.of(9)
    assert settings.day_end == TimeOfDay.of(16)
    assert settings.week_mode == WeekMode.FULL_WEEK
    assert settings.calendar_mode == CalendarMode.WORKING_DAYS


def test_load_without_section(config_path):
    """A file with another section is ignored."""
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[other]\nday_start = 07:00\n")

    assert Settings.load(config_path) == Settings()


def test_set_day_start_pushes_end():
    """A start at or after the end moves the end one hour later."""
    settings = Settings()
    settings.set_day_start(TimeOfDay.of(17))

    assert settings.day_start == TimeOfDay.of(17)
    assert settings.day_end == TimeOfDay.of(18)


def test_set_day_start_before_end_keeps_end():
    """A start before the end leaves the end alone."""
    settings = Settings()
    settings.set_day_start(TimeOfDay.of(7, 30))

    assert settings.day_start == TimeOfDay.of(7, 30)
    assert settings.day_end == TimeOfDay.of(17)


def test_set_day_end_before_start():
    """An end at or before the start becomes start plus one hour."""
    settings = Settings()
    settings.set_day_end(TimeOfDay.of(8))

    assert settings.day_end == TimeOfDay.of(10)


def test_set_day_start_wraps_past_midnight():
    """A late start wraps the adjusted end around midnight."""
    settings = Settings()
    settings.set_day_start(TimeOfDay.of(23, 30))

    assert settings.day_end == TimeOfDay.of(0, 30)
    assert not settings.is_valid_work_day


def test_apply_rejects_unknown_values():
    """Bad enum values and unknown keys raise InvalidSettingsError."""
    settings = Settings()

    with pytest.raises(InvalidSettingsError):
        settings.apply("week_mode", "Fortnight")
    with pytest.raises(InvalidSettingsError):
        settings.apply("launch_at_login", "yes")


def test_from_env(monkeypatch):
    """Environment variables override loaded values."""
    monkeypatch.setenv("CLOCKED_IN_DAY_START", "10:00")
    monkeypatch.setenv("CLOCKED_IN_DAY_END", "19:00")
    monkeypatch.setenv("CLOCKED_IN_WEEK_MODE", WeekMode.WORKING_DAYS.value)
    monkeypatch.delenv("CLOCKED_IN_CALENDAR_MODE", raising=False)

    settings = Settings.from_env()

    assert settings.day_start == TimeOfDay.of(10)
    assert settings.day_end == TimeOfDay.of(19)
    assert settings.week_mode == WeekMode.WORKING_DAYS
    assert settings.calendar_mode == CalendarMode.ALL_DAYS


def test_from_env_ignores_bad_values(monkeypatch):
    """A bad environment value leaves the base setting in place."""
    monkeypatch.setenv("CLOCKED_IN_DAY_START", "morning")
    monkeypatch.delenv("CLOCKED_IN_DAY_END", raising=False)
    monkeypatch.delenv("CLOCKED_IN_WEEK_MODE", raising=False)
    monkeypatch.delenv("CLOCKED_IN_CALENDAR_MODE", raising=False)
    base = Settings(day_start=TimeOfDay.of(8))

    assert Settings.from_env(base).day_start == TimeOfDay.of(8)


def test_view_mode_cycles():
    """View modes cycle day, week, month, year and back."""
    assert ViewMode.DAY.next() == ViewMode.WEEK
    assert ViewMode.WEEK.next() == ViewMode.MONTH
    assert ViewMode.MONTH.next() == ViewMode.YEAR
    assert ViewMode.YEAR.next() == ViewMode.DAY
