"""Random sample sleep data for local testing."""

import random
from datetime import datetime, timedelta

from dateutil import tz

from .schema import SleepInterval, SleepState


def generate_sample_intervals(
    now: datetime | None = None,
    nights: int = 11,
    rng: random.Random | None = None,
) -> list[SleepInterval]:
    """
    Generate one in-bed and one asleep interval per night.

    Night ``i`` goes to bed 0-23 hours plus ``i`` days before ``now``, falls
    asleep after 5-14 minutes, sleeps 5-10 hours and gets up 0-4 minutes
    after waking.

    Args:
        now: Reference time (defaults to now); offsets are applied in UTC
        nights: Number of nights to generate
        rng: Random source, seed it for reproducible output

    Returns:
        List of intervals, in-bed before asleep for each night
    """
    if nights < 0:
        raise ValueError(f"nights must be non-negative, got {nights}")
    now = datetime.now(tz.UTC) if now is None else now.astimezone(tz.UTC)
    rng = rng or random.Random()

    intervals = []
    for i in range(nights):
        offset_hours = rng.randrange(0, 24)
        sleep_seconds = rng.randrange(5 * 3600, 10 * 3600)
        fall_asleep_minutes = rng.randrange(5, 15)
        get_up_minutes = rng.randrange(0, 5)

        in_bed_start = now - timedelta(hours=offset_hours + i * 24)
        sleep_start = in_bed_start + timedelta(minutes=fall_asleep_minutes)
        sleep_end = sleep_start + timedelta(seconds=sleep_seconds)
        in_bed_end = sleep_end + timedelta(minutes=get_up_minutes)

        intervals.append(SleepInterval(start=in_bed_start, end=in_bed_end, state=SleepState.IN_BED))
        intervals.append(SleepInterval(start=sleep_start, end=sleep_end, state=SleepState.ASLEEP))

    return intervals
