"""
Per-day sleep totals.

Every interval is attributed, whole, to the calendar day on which it ends in
the reference timezone. Intervals that cross midnight are not split.
"""

from collections import defaultdict
from datetime import date, datetime, tzinfo
from typing import Iterable

from dateutil import tz

from .schema import SleepInterval, SleepState


def day_key(instant: datetime, reference_tz: tzinfo | None = None) -> date:
    """
    Calendar date of an instant in the reference timezone.

    Naive instants are taken to be wall-clock time in the reference timezone.
    """
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(reference_tz or tz.tzlocal()).date()


def filter_asleep(intervals: Iterable[SleepInterval]) -> list[SleepInterval]:
    """Asleep intervals, in input order."""
    return [i for i in intervals if i.state is SleepState.ASLEEP]


def bucket_days(
    intervals: Iterable[SleepInterval],
    reference_tz: tzinfo | None = None,
) -> set[date]:
    """Distinct end dates over all intervals, whatever their state."""
    return {day_key(i.end, reference_tz) for i in intervals}


def aggregate_daily_totals(
    intervals: Iterable[SleepInterval],
    reference_tz: tzinfo | None = None,
) -> dict[date, int]:
    """
    Sum asleep seconds per end date.

    Args:
        intervals: Sleep intervals of any state, in any order
        reference_tz: Timezone used for day bucketing (system local if None)

    Returns:
        Mapping of date to whole seconds asleep, ascending by date. Days where
        only in-bed intervals end are present with 0.
    """
    intervals = list(intervals)
    reference_tz = reference_tz or tz.tzlocal()

    seconds_by_day: dict[date, int] = defaultdict(int)
    for interval in filter_asleep(intervals):
        seconds_by_day[day_key(interval.end, reference_tz)] += interval.duration_seconds

    return {
        day: seconds_by_day.get(day, 0)
        for day in sorted(bucket_days(intervals, reference_tz))
    }
