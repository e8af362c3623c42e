"""Settings management."""

import configparser
import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

from loguru import logger

from clockedin.errors import InvalidSettingsError, InvalidTimeError
from clockedin.models import (
    CalendarMode,
    DisplayStyle,
    TextDetail,
    ViewMode,
    VisualDetail,
    WeekMode,
)
from clockedin.time_of_day import TimeOfDay

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "clocked-in" / "config.ini"
SECTION = "clocked-in"
MIN_WORKDAY_MINUTES = 60

ENV_OVERRIDES = {
    "CLOCKED_IN_DAY_START": "day_start",
    "CLOCKED_IN_DAY_END": "day_end",
    "CLOCKED_IN_WEEK_MODE": "week_mode",
    "CLOCKED_IN_CALENDAR_MODE": "calendar_mode",
}


@dataclass
class Settings:
    """Work hours and display preferences."""

    day_start: TimeOfDay = field(default_factory=lambda: TimeOfDay.of(9))
    day_end: TimeOfDay = field(default_factory=lambda: TimeOfDay.of(17))
    week_mode: WeekMode = WeekMode.FULL_WEEK
    calendar_mode: CalendarMode = CalendarMode.ALL_DAYS
    current_view_mode: ViewMode = ViewMode.DAY
    display_style: DisplayStyle = DisplayStyle.TEXT
    text_detail: TextDetail = TextDetail.FULL
    visual_detail: VisualDetail = VisualDetail.WITH_PERCENT

    @property
    def day_start_hour(self) -> int:
        return self.day_start.hour

    @property
    def day_start_minute(self) -> int:
        return self.day_start.minute

    @property
    def day_end_hour(self) -> int:
        return self.day_end.hour

    @property
    def day_end_minute(self) -> int:
        return self.day_end.minute

    @property
    def workday_duration_minutes(self) -> int:
        return self.day_end - self.day_start

    @property
    def is_valid_work_day(self) -> bool:
        return self.day_end > self.day_start

    @property
    def minutes_per_percent(self) -> float:
        """Minutes of work needed to move the day percentage by one point."""
        return self.workday_duration_minutes / 100.0

    def set_day_start(self, start: TimeOfDay) -> None:
        """Set the start of the work day, pushing the end out if it would overlap."""
        if start >= self.day_end:
            self.day_end = start.plus_minutes(MIN_WORKDAY_MINUTES)
        self.day_start = start

    def set_day_end(self, end: TimeOfDay) -> None:
        """Set the end of the work day, keeping it at least an hour after the start."""
        if end <= self.day_start:
            self.day_end = self.day_start.plus_minutes(MIN_WORKDAY_MINUTES)
        else:
            self.day_end = end

    def apply(self, key: str, value: str) -> None:
        """Apply a raw string value to a setting."""
        if key == "day_start":
            self.set_day_start(TimeOfDay.parse(value))
        elif key == "day_end":
            self.set_day_end(TimeOfDay.parse(value))
        elif key in _ENUM_FIELDS:
            enum_type = _ENUM_FIELDS[key]
            try:
                setattr(self, key, enum_type(value))
            except ValueError as e:
                choices = ", ".join(member.value for member in enum_type)
                msg = f"Invalid {key} {value!r}, expected one of: {choices}"
                raise InvalidSettingsError(msg) from e
        else:
            msg = f"Unknown setting {key!r}"
            raise InvalidSettingsError(msg)

    @classmethod
    def from_env(cls, base: "Settings | None" = None) -> "Settings":
        """Overlay settings from environment variables."""
        settings = base or cls()
        for variable, key in ENV_OVERRIDES.items():
            if variable not in os.environ:
                continue
            try:
                settings.apply(key, os.environ[variable])
            except (InvalidSettingsError, InvalidTimeError) as e:
                logger.warning(f"Ignoring {variable}: {e}")
        return settings

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Settings":
        """Load settings from file, falling back to defaults for missing or bad values."""
        settings = cls()
        if not path.is_file():
            logger.debug(f"No config file at {path}, using defaults")
            return settings

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        if not config.has_section(SECTION):
            logger.warning(f"Config file {path} has no [{SECTION}] section, using defaults")
            return settings

        # Start before end so the end-time validation sees the stored start.
        for key in _FIELD_NAMES:
            value = config[SECTION].get(key)
            if value is None:
                continue
            try:
                settings.apply(key, value)
            except (InvalidSettingsError, InvalidTimeError) as e:
                logger.warning(f"Ignoring {key} in {path}: {e}")
        return settings

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save settings to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config[SECTION] = {
            "day_start": str(self.day_start),
            "day_end": str(self.day_end),
            **{key: getattr(self, key).value for key in _ENUM_FIELDS},
        }
        with path.open("w") as config_file:
            config.write(config_file)
        logger.debug(f"Saved settings to {path}")


_FIELD_NAMES = [f.name for f in fields(Settings)]
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "week_mode": WeekMode,
    "calendar_mode": CalendarMode,
    "current_view_mode": ViewMode,
    "display_style": DisplayStyle,
    "text_detail": TextDetail,
    "visual_detail": VisualDetail,
}
