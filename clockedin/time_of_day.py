"""Time-of-day handling utilities."""

from datetime import datetime

from clockedin.errors import InvalidTimeError

MINUTES_PER_DAY = 24 * 60


class TimeOfDay:
    """A wall-clock time stored as minutes since midnight."""

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse a time string like '09:30' into a TimeOfDay object."""
        try:
            hours, minutes = value.strip().split(":")
            return cls.of(int(hours), int(minutes))
        except ValueError as e:
            msg = f"Invalid time {value!r}, expected HH:MM"
            raise InvalidTimeError(msg) from e

    @classmethod
    def of(cls, hour: int, minute: int = 0) -> "TimeOfDay":
        """Build a TimeOfDay from an hour and a minute."""
        if not 0 <= hour < 24 or not 0 <= minute < 60:
            msg = f"Invalid time {hour}:{minute:02}"
            raise InvalidTimeError(msg)
        return cls(hour * 60 + minute)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeOfDay":
        """Get the wall-clock time of a datetime, dropping seconds."""
        return cls(moment.hour * 60 + moment.minute)

    def __init__(self, minutes: int = 0) -> None:
        self.minutes: int = minutes

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def __repr__(self) -> str:
        return f"{self.hour:02}:{self.minute:02}"

    __str__ = __repr__

    def __hash__(self) -> int:
        return hash(self.minutes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.minutes == other.minutes

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.minutes != other.minutes

    def __sub__(self, other: "TimeOfDay") -> int:
        """Minutes between two times on the same day."""
        return self.minutes - other.minutes

    def plus_minutes(self, minutes: int) -> "TimeOfDay":
        """Shift forward, wrapping past midnight."""
        return TimeOfDay((self.minutes + minutes) % MINUTES_PER_DAY)

    def __lt__(self, other: "TimeOfDay") -> bool:
        return self.minutes < other.minutes

    def __gt__(self, other: "TimeOfDay") -> bool:
        return self.minutes > other.minutes

    def __le__(self, other: "TimeOfDay") -> bool:
        return self.minutes <= other.minutes

    def __ge__(self, other: "TimeOfDay") -> bool:
        return self.minutes >= other.minutes
