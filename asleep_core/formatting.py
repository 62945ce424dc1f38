"""Report formatting."""

from datetime import date

from .config import DEFAULT_DATE_FORMAT


def format_duration(seconds: int) -> str:
    """Render seconds as HH:MM:SS; hours are not capped at 24."""
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_day(day: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    return day.strftime(date_format)


def format_report_line(day: date, seconds: int, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """One report line, e.g. ``Sleep time on 06 Nov 2020 is: 08:45:00``."""
    return f"Sleep time on {format_day(day, date_format)} is: {format_duration(seconds)}"


def render_report(totals: dict[date, int], date_format: str = DEFAULT_DATE_FORMAT) -> list[str]:
    """Report lines for every day, ascending by date."""
    return [
        format_report_line(day, totals[day], date_format)
        for day in sorted(totals)
    ]
