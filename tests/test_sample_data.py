"""Tests for sample data generation."""

import random
from datetime import datetime, timedelta

import pytest
from dateutil import tz

from asleep_core.aggregation import aggregate_daily_totals
from asleep_core.sample_data import generate_sample_intervals
from asleep_core.schema import SleepState

NOW = datetime(2020, 11, 11, 12, 0, tzinfo=tz.UTC)


def test_two_intervals_per_night():
    intervals = generate_sample_intervals(now=NOW, nights=11, rng=random.Random(1))
    assert len(intervals) == 22
    assert [i.state for i in intervals[:2]] == [SleepState.IN_BED, SleepState.ASLEEP]


def test_asleep_inside_in_bed():
    intervals = generate_sample_intervals(now=NOW, nights=5, rng=random.Random(2))
    for in_bed, asleep in zip(intervals[::2], intervals[1::2]):
        assert in_bed.start < asleep.start
        assert asleep.end <= in_bed.end
        assert timedelta(minutes=5) <= asleep.start - in_bed.start < timedelta(minutes=15)
        assert timedelta(hours=5) <= asleep.duration < timedelta(hours=10)
        assert in_bed.end - asleep.end < timedelta(minutes=5)


def test_seeded_is_reproducible():
    first = generate_sample_intervals(now=NOW, nights=3, rng=random.Random(42))
    second = generate_sample_intervals(now=NOW, nights=3, rng=random.Random(42))
    assert first == second


def test_zero_nights():
    assert generate_sample_intervals(now=NOW, nights=0) == []


def test_negative_nights():
    with pytest.raises(ValueError):
        generate_sample_intervals(now=NOW, nights=-1)


def test_generated_data_aggregates():
    intervals = generate_sample_intervals(now=NOW, nights=11, rng=random.Random(3))
    totals = aggregate_daily_totals(intervals, tz.UTC)
    assert set(totals) == {i.end.date() for i in intervals}
    assert sum(totals.values()) == sum(i.duration_seconds for i in intervals if i.state is SleepState.ASLEEP)


def test_offsets_applied_in_utc_across_dst():
    # 2020-11-01 is the US fall-back date
    local_now = datetime(2020, 11, 2, 12, 0, tzinfo=tz.gettz("America/New_York"))
    intervals = generate_sample_intervals(now=local_now, nights=3, rng=random.Random(5))
    draws = random.Random(5)
    for i, in_bed in enumerate(intervals[::2]):
        offset_hours = draws.randrange(0, 24)
        draws.randrange(5 * 3600, 10 * 3600)
        draws.randrange(5, 15)
        draws.randrange(0, 5)
        assert local_now - in_bed.start == timedelta(hours=offset_hours + i * 24)
        assert in_bed.start.utcoffset() == timedelta(0)
