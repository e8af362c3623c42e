"""Custom exceptions."""


class ClockedInError(Exception):
    """Base exception for clocked-in."""


class InvalidTimeError(ClockedInError, ValueError):
    """Raised when a time of day cannot be parsed."""


class InvalidSettingsError(ClockedInError):
    """Raised when a settings value cannot be applied."""
