"""
Sleep interval loading.

Reads sleep records from a JSON file, either a bare list of records or an
object with a ``samples`` list, and converts them into SleepInterval values.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ValidationError

from .exceptions import DataSourceError
from .schema import SleepInterval

logger = logging.getLogger(__name__)

FIELD_ALIASES = {
    "start": ("start", "startDate", "start_date"),
    "end": ("end", "endDate", "end_date"),
    "state": ("state", "value"),
}


class LoadResult(BaseModel):
    """Intervals read from one source."""

    source: str
    intervals: list[SleepInterval]
    total_records: int
    skipped: int = 0


def _pick(entry: dict[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        if key in entry:
            return entry[key]
    raise KeyError(f"Missing required field '{field}'")


def parse_record(entry: Any) -> SleepInterval:
    """
    Convert one raw record into a SleepInterval.

    Raises:
        ValueError: If the record is malformed
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Record must be an object, got {type(entry).__name__}")
    try:
        return SleepInterval(
            start=_pick(entry, "start"),
            end=_pick(entry, "end"),
            state=_pick(entry, "state"),
        )
    except KeyError as e:
        raise ValueError(e.args[0])
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ValueError(messages)


def parse_records(raw_records: Iterable[Any], limit: int | None = None) -> tuple[list[SleepInterval], int]:
    """
    Parse raw records, skipping invalid ones.

    Valid intervals are ordered newest end first and truncated to ``limit``.

    Returns:
        (intervals, skipped_count)
    """
    intervals = []
    skipped = 0
    for idx, entry in enumerate(raw_records):
        try:
            intervals.append(parse_record(entry))
        except ValueError as e:
            skipped += 1
            logger.warning("Skipping sleep record %s: %s", idx, e)

    if intervals and len({i.end.tzinfo is None for i in intervals}) > 1:
        raise DataSourceError("Sleep records mix naive and timezone-aware timestamps")

    intervals.sort(key=lambda i: i.end, reverse=True)
    if limit is not None and len(intervals) > limit:
        logger.info("Keeping the %s most recent of %s sleep records", limit, len(intervals))
        intervals = intervals[:limit]
    return intervals, skipped


def load_intervals(path: str | Path, limit: int | None = None) -> LoadResult:
    """
    Load sleep intervals from a JSON file.

    Args:
        path: JSON file path
        limit: Maximum number of records to keep (newest end first)

    Returns:
        LoadResult with parsed intervals
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DataSourceError(f"Sleep data file not found: {path}", source=str(path))
    except json.JSONDecodeError as e:
        raise DataSourceError(f"Invalid JSON in sleep data file: {e}", source=str(path))
    except UnicodeDecodeError as e:
        raise DataSourceError(f"Sleep data file is not valid UTF-8: {e}", source=str(path))
    except OSError as e:
        raise DataSourceError(f"Could not read sleep data file: {e}", source=str(path))

    if isinstance(data, dict):
        if "samples" not in data:
            raise DataSourceError("Sleep data JSON must contain a 'samples' key", source=str(path))
        raw_records = data["samples"]
    else:
        raw_records = data

    if not isinstance(raw_records, list):
        raise DataSourceError(
            f"Sleep samples must be a list, got {type(raw_records).__name__}",
            source=str(path),
        )

    intervals, skipped = parse_records(raw_records, limit=limit)
    logger.debug("Loaded %s sleep intervals from %s (%s skipped)", len(intervals), path, skipped)

    return LoadResult(
        source=str(path),
        intervals=intervals,
        total_records=len(raw_records),
        skipped=skipped,
    )


def dump_intervals(intervals: Iterable[SleepInterval], path: str | Path) -> Path:
    """Write intervals as ``{"samples": [...]}`` JSON."""
    path = Path(path)
    payload = {"samples": [i.to_dict() for i in intervals]}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return path
