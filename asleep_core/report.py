"""Load, aggregate and format a sleep report."""

import logging
from datetime import date
from pathlib import Path

from pydantic import BaseModel

from .aggregation import aggregate_daily_totals
from .config import AsleepSettings
from .exceptions import NoSleepRecordsError
from .formatting import render_report
from .loader import load_intervals

logger = logging.getLogger(__name__)


class SleepReport(BaseModel):
    """Per-day totals for one source."""

    source: str
    totals: dict[date, int]
    record_count: int
    skipped: int = 0

    def lines(self, date_format: str) -> list[str]:
        return render_report(self.totals, date_format)

    def to_dict(self) -> dict[str, int]:
        """Totals keyed by ISO date, in seconds."""
        return {day.isoformat(): seconds for day, seconds in self.totals.items()}


def build_report(path: str | Path, settings: AsleepSettings) -> SleepReport:
    """
    Build a report from a sleep data file.

    Raises:
        DataSourceError: If the file cannot be read
        NoSleepRecordsError: If the file holds no usable records
    """
    result = load_intervals(path, limit=settings.sample_limit)
    if not result.intervals:
        raise NoSleepRecordsError("No sleep records available", source=result.source)

    totals = aggregate_daily_totals(result.intervals, settings.reference_tz())
    logger.info("Aggregated %s intervals into %s days", len(result.intervals), len(totals))

    return SleepReport(
        source=result.source,
        totals=totals,
        record_count=len(result.intervals),
        skipped=result.skipped,
    )
