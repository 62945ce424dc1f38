"""Runtime settings loaded from the environment."""

import os
from datetime import tzinfo
from pathlib import Path

from dateutil import tz
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

DEFAULT_DATE_FORMAT = "%d %b %Y"  # dd MMM yyyy
DEFAULT_SAMPLE_LIMIT = 30


def resolve_timezone(name: str | None) -> tzinfo:
    """
    Resolve a reference timezone.

    Args:
        name: IANA timezone name, or None/empty for the system local zone

    Returns:
        tzinfo instance
    """
    if not name:
        return tz.tzlocal()
    zone = tz.gettz(name)
    if zone is None:
        raise ConfigError(f"Unknown timezone '{name}'. Use IANA timezone identifiers.")
    return zone


class AsleepSettings(BaseModel):
    """Settings for a report run."""

    timezone: str | None = Field(
        None,
        description="IANA name of the reference timezone (system local when unset)",
    )
    date_format: str = Field(
        DEFAULT_DATE_FORMAT,
        description="strftime pattern for report dates",
    )
    sample_limit: int = Field(
        DEFAULT_SAMPLE_LIMIT,
        description="Maximum number of records read per run",
        ge=1,
    )

    @field_validator("timezone", mode="before")
    @classmethod
    def blank_timezone(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date_format")
    @classmethod
    def non_empty_format(cls, v: str) -> str:
        if not v:
            raise ValueError("date_format must not be empty")
        return v

    def reference_tz(self) -> tzinfo:
        return resolve_timezone(self.timezone)

    @classmethod
    def from_env(cls, env_file: Path | None = None, **overrides) -> "AsleepSettings":
        """
        Build settings from ASLEEP_* environment variables.

        Values passed as keyword overrides win over the environment; None
        overrides are ignored.
        """
        if env_file is not None:
            if not env_file.exists():
                raise ConfigError(f"Env file not found: {env_file}", source=str(env_file))
            load_dotenv(env_file, override=True)
        else:
            load_dotenv()

        values = {}
        if os.getenv("ASLEEP_TIMEZONE") is not None:
            values["timezone"] = os.getenv("ASLEEP_TIMEZONE")
        if os.getenv("ASLEEP_DATE_FORMAT"):
            values["date_format"] = os.getenv("ASLEEP_DATE_FORMAT")
        if os.getenv("ASLEEP_SAMPLE_LIMIT"):
            values["sample_limit"] = os.getenv("ASLEEP_SAMPLE_LIMIT")
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            settings = cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}")

        # Fail early on unknown zone names
        settings.reference_tz()
        return settings
