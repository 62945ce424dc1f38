"""
Asleep Library

Turns sleep-state intervals into per-day sleep totals, attributing each
interval to the calendar day on which it ends.
"""

from .aggregation import aggregate_daily_totals, bucket_days, day_key, filter_asleep
from .config import AsleepSettings, resolve_timezone
from .exceptions import AsleepError, ConfigError, DataSourceError, NoSleepRecordsError
from .formatting import format_day, format_duration, format_report_line, render_report
from .loader import LoadResult, dump_intervals, load_intervals
from .report import SleepReport, build_report
from .schema import SleepInterval, SleepState

__version__ = "0.1.0"

__all__ = [
    "SleepInterval",
    "SleepState",
    "day_key",
    "filter_asleep",
    "bucket_days",
    "aggregate_daily_totals",
    "format_duration",
    "format_day",
    "format_report_line",
    "render_report",
    "LoadResult",
    "load_intervals",
    "dump_intervals",
    "SleepReport",
    "build_report",
    "AsleepSettings",
    "resolve_timezone",
    "AsleepError",
    "ConfigError",
    "DataSourceError",
    "NoSleepRecordsError",
]
