"""Timestamp formatting and human-readable relative times."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}"
)
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as e.g. ``2025-01-02T03:04:05+01:00``.

    Naive datetimes are taken to be in local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.replace(microsecond=0).isoformat(timespec="seconds")


def parse_timestamp(timestamp: str) -> datetime:
    """Parse a timestamp written by :func:`format_timestamp`.

    Raises ValueError when the text is not in that exact form.
    """
    if not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise ValueError(f"cannot parse {timestamp!r} as a timestamp")
    return datetime.strptime(timestamp, _TIMESTAMP_FORMAT)


def _aware(moment: datetime) -> datetime:
    return moment.astimezone() if moment.tzinfo is None else moment


def _rounded(value: float) -> int:
    return int(value + 0.5)


def _describe(seconds: float) -> str:
    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    minutes = seconds / 60
    if minutes < 45:
        return f"{_rounded(minutes)} minutes"
    if minutes < 90:
        return "an hour"
    hours = seconds / 3600
    if hours < 22:
        return f"{_rounded(hours)} hours"
    if hours < 36:
        return "a day"
    days = seconds / 86400
    if days < 26:
        return f"{_rounded(days)} days"
    if days < 46:
        return "a month"
    if days < 320:
        return f"{_rounded(days / 30)} months"
    if days < 548:
        return "a year"
    return f"{_rounded(days / 365)} years"


def time_diff(moment: datetime, now: datetime | None = None) -> str:
    """Describe ``moment`` relative to ``now``, e.g. ``3 days ago`` or ``in an hour``."""
    moment = _aware(moment)
    now = datetime.now(timezone.utc) if now is None else _aware(now)
    seconds = (now - moment).total_seconds()
    phrase = _describe(abs(seconds))
    return f"{phrase} ago" if seconds >= 0 else f"in {phrase}"


def calculate_time_difference(timestamp: str, now: datetime | None = None) -> str:
    """Parse ``timestamp`` and describe it relative to ``now``."""
    return time_diff(parse_timestamp(timestamp), now)