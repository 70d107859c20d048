"""Custom exceptions."""


class YasumiError(Exception):
    """Base exception for yasumi."""


class ParseError(YasumiError, ValueError):
    """Raised when a value cannot be read as a calendar date."""


class HolidayCollisionError(YasumiError):
    """Raised when two holiday rules resolve to the same date."""


class ConfigError(YasumiError):
    """Raised when configuration holds an unsupported value."""
