"""Wall-clock string <-> minutes-of-day conversions."""

import re

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


class FormatError(ValueError):
    """Raised when a wall-clock string is not a valid HH:MM time."""


def parse_time(value: str) -> int:
    """Convert "HH:MM" into minutes after midnight.

    Raises:
        FormatError: If the string is not H:MM/HH:MM or the hour/minute is out of range
    """
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise FormatError(f"Invalid time string: {value!r} (expected HH:MM)")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise FormatError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Format minutes as "HH:MM", wrapping across midnight."""
    normalized = int(minutes) % MINUTES_PER_DAY
    return f"{normalized // 60:02d}:{normalized % 60:02d}"


def format_duration(minutes: int) -> str:
    """Human-readable duration, e.g. "2 hours 10 minutes"."""
    hours, rest = divmod(max(int(minutes), 0), 60)
    parts = []
    if hours:
        parts.append(f"{hours} hour{'s' if hours != 1 else ''}")
    if rest or not hours:
        parts.append(f"{rest} minute{'s' if rest != 1 else ''}")
    return " ".join(parts)
