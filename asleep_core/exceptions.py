"""Custom exceptions for the asleep library."""


class AsleepError(Exception):
    """Base exception for all asleep errors."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to an error payload."""
        return {
            "error": {
                "code": self.__class__.__name__.replace("Error", "").lower(),
                "message": self.message,
                "source": self.source,
            }
        }


class ConfigError(AsleepError):
    """Invalid settings (unknown timezone, bad limit, etc.)."""


class DataSourceError(AsleepError):
    """Sleep data file missing, unreadable, or not in the expected shape."""


class NoSleepRecordsError(AsleepError):
    """The data source was readable but held no usable sleep records."""
