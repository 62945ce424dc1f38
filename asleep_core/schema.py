"""Sleep interval schema."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SleepState(str, Enum):
    """Classification of a sleep interval."""

    IN_BED = "in_bed"
    ASLEEP = "asleep"


# Accepted spellings, including HealthKit identifiers and raw values
STATE_ALIASES: dict[Any, SleepState] = {
    "in_bed": SleepState.IN_BED,
    "inbed": SleepState.IN_BED,
    "in bed": SleepState.IN_BED,
    "hkcategoryvaluesleepanalysisinbed": SleepState.IN_BED,
    "asleep": SleepState.ASLEEP,
    "hkcategoryvaluesleepanalysisasleep": SleepState.ASLEEP,
    0: SleepState.IN_BED,
    1: SleepState.ASLEEP,
}


class SleepInterval(BaseModel):
    """
    A single sleep-state interval.

    ``start`` is inclusive and ``end`` exclusive; ``end`` must come after
    ``start``. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Interval start (inclusive)")
    end: datetime = Field(..., description="Interval end (exclusive)")
    state: SleepState = Field(..., description="Sleep state tag")

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_timestamp(cls, v: Any) -> datetime:
        """Parse timestamp from various formats."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, str):
            from dateutil import parser

            return parser.isoparse(v)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            # Assume Unix timestamp
            from dateutil import tz

            try:
                return datetime.fromtimestamp(v, tz=tz.UTC)
            except (OverflowError, OSError) as e:
                raise ValueError(f"Invalid timestamp: {v}") from e
        raise ValueError(f"Invalid timestamp format: {v}")

    @field_validator("state", mode="before")
    @classmethod
    def parse_state(cls, v: Any) -> SleepState:
        """Map state aliases onto SleepState."""
        if isinstance(v, SleepState):
            return v
        key = v.strip().lower() if isinstance(v, str) else v
        if isinstance(key, bool) or not isinstance(key, (str, int)) or key not in STATE_ALIASES:
            raise ValueError(f"Unknown sleep state: {v!r}")
        return STATE_ALIASES[key]

    @model_validator(mode="after")
    def check_order(self) -> "SleepInterval":
        """Reject empty or reversed intervals."""
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("start and end must both be naive or both be timezone-aware")
        if self.end <= self.start:
            raise ValueError(f"end ({self.end.isoformat()}) must be after start ({self.start.isoformat()})")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_seconds(self) -> int:
        """Duration in whole seconds, fractional part truncated."""
        return self.duration // timedelta(seconds=1)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return self.model_dump(mode="json")
