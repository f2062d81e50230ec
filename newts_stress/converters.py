"""
Text-to-value converters for command-line options.

Each converter is a pure function of its input string: the same text always
yields the same value or the same error, and no locale or local timezone is
consulted. Malformed input raises ValueError with a message naming the text;
the loader turns those into InvalidValue errors.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from newts_stress.domain.models import Command
from newts_stress.errors import UnknownCommand

_TIMESTAMP_RE = re.compile(
    r"""
    (?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        [T\ ]
        (?P<hour>\d{2})
        (?::(?P<minute>\d{2})
            (?::(?P<second>\d{2})
                (?:[.,](?P<fraction>\d+))?
            )?
        )?
        (?P<zone>Z|[+-]\d{2}(?::?\d{2})?)?
    )?
    """,
    re.VERBOSE | re.ASCII,
)

_DURATION_RE = re.compile(r"\d+", re.ASCII)


def _zone(designator: str | None) -> timezone:
    if not designator or designator == "Z":
        return timezone.utc
    sign = -1 if designator[0] == "-" else 1
    digits = designator[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:] or 0)
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_timestamp(text: str) -> datetime:
    """
    Parse an ISO-8601 date-time into an aware UTC datetime.

    Accepts a calendar date with an optional time of day (hours, minutes,
    seconds and a fraction, each optional from the right) and an optional
    zone designator (`Z`, `+HH`, `+HHMM` or `+HH:MM`). Without a designator the
    value is taken as UTC. Fractions finer than microseconds are truncated.
    """
    match = _TIMESTAMP_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid timestamp: {text!r} (expected ISO-8601, e.g. 2015-01-01T00:00:00Z)")

    parts = match.groupdict()
    fraction = parts["fraction"] or ""
    try:
        value = datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            int(fraction[:6].ljust(6, "0")),
            tzinfo=_zone(parts["zone"]),
        )
        # Offsets near year 1 or 9999 can push the UTC value out of range.
        return value.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Invalid timestamp: {text!r} ({exc})") from exc


def parse_duration(text: str) -> timedelta:
    """Parse a non-negative whole number of seconds."""
    if _DURATION_RE.fullmatch(text.strip()) is None:
        raise ValueError(f"Invalid duration: {text!r} (expected a non-negative number of seconds)")
    try:
        return timedelta(seconds=int(text))
    except OverflowError as exc:
        raise ValueError(f"Invalid duration: {text!r} ({exc})") from exc


def parse_command(text: str) -> Command:
    """Match a command name case-insensitively against the Command members."""
    try:
        return Command[text.upper()]
    except KeyError:
        raise UnknownCommand(f"Unknown command: {text}", option="command") from None


def from_epoch_seconds(seconds: int) -> datetime:
    """Aware UTC datetime for a count of seconds since the Unix epoch."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def to_epoch_seconds(value: datetime) -> int:
    """Whole seconds since the Unix epoch; sub-second precision is dropped."""
    return int(value.timestamp())


__all__ = [
    "from_epoch_seconds",
    "parse_command",
    "parse_duration",
    "parse_timestamp",
    "to_epoch_seconds",
]
