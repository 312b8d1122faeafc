"""
Timestamp helpers.

All timestamps handled by the board are timezone-aware and stored in
UTC.  Clients exchange them as RFC3339 strings, e.g.
``2025-09-01T10:00:00Z`` or ``2025-09-01T13:00:00.250+03:00``.
"""

import re
from datetime import datetime, timezone

from .exceptions import InvalidInput

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC3339 timestamp into an aware datetime.

    The offset is mandatory.  Fractional seconds of any length are
    accepted and truncated to microseconds.  Raises ``InvalidInput`` if
    ``value`` is not a valid RFC3339 timestamp.
    """
    match = _RFC3339_RE.fullmatch(value)
    if not match:
        raise InvalidInput(f"invalid RFC3339 timestamp: {value!r}")
    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset in {"Z", "z"}:
        offset = "+00:00"
    normalized = f"{match.group('date')}T{match.group('time')}.{fraction}{offset}"
    try:
        return datetime.fromisoformat(normalized)
    except ValueError as e:
        # Well-formed but out of range, e.g. month 13 or hour 25.
        raise InvalidInput(f"invalid RFC3339 timestamp: {value!r}") from e
