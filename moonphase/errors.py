"""Error types for moonphase.

Every fatal condition is raised as a ``MoonPhaseError`` subclass and handled
once, by the command line entry point.
"""


class MoonPhaseError(Exception):
    """Base class for all moonphase errors."""

    pass


class ConfigurationError(MoonPhaseError):
    """Raised when a configuration value cannot be used."""

    pass


class FetchError(MoonPhaseError):
    """Raised when phase data cannot be retrieved from the data provider."""

    pass


class PayloadError(MoonPhaseError):
    """Raised when the data provider returns a malformed payload."""

    pass


class InsufficientDataError(MoonPhaseError):
    """Raised when the phase events do not bracket the target date."""

    pass


class PhaseSequenceError(MoonPhaseError):
    """Raised when two adjacent events are not consecutive major phases."""

    pass


class DateParseError(MoonPhaseError):
    """Raised when a date argument is not in YYYY-MM-DD form."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date '{value}', expected YYYY-MM-DD")


class CacheFormatError(MoonPhaseError):
    """Raised when the cache file content cannot be parsed."""

    pass


class CacheWriteError(MoonPhaseError):
    """Raised when the cache file cannot be written."""

    pass
