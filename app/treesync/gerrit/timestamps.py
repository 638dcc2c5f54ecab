"""Gerrit timestamp decoding.

Gerrit reports timestamps in UTC as ``2017-12-01 17:33:30.000000000``
(space separated, nanosecond precision, no zone designator). ISO 8601
strings with a ``T`` separator and an optional ``Z`` or ``+hh:mm`` zone
are accepted as well.

Commit person records carry the committer's UTC offset separately, as a
signed number of minutes. ``decode_timestamp`` re-expresses the parsed
instant at that offset without changing the instant itself.
"""

import re
from datetime import UTC, datetime, timedelta, timezone

# Fixed UTC offsets are limited to +-18 hours
_MAX_OFFSET_MINUTES = 18 * 60

_TIMESTAMP_RE = re.compile(
    r"""
    (?P<date>\d{4}-\d{2}-\d{2})
    [T ]
    (?P<time>\d{2}:\d{2}:\d{2})
    (?:\.(?P<fraction>\d{1,9}))?
    (?P<zone>Z|[+-]\d{2}:\d{2})?
    """,
    re.VERBOSE | re.ASCII,
)


class TimestampParseError(ValueError):
    """Raised when a timestamp or UTC offset cannot be decoded."""


def parse_timestamp(raw: str) -> datetime:
    """Parse a Gerrit timestamp into an aware UTC datetime.

    Fractions finer than a microsecond are truncated. A timestamp without
    a zone designator is taken to be UTC.

    Args:
        raw: Timestamp string as returned by the Gerrit REST API.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        TimestampParseError: If the string is not a valid timestamp.
    """
    match = _TIMESTAMP_RE.fullmatch(raw)
    if match is None:
        msg = f"Invalid timestamp: {raw!r}"
        raise TimestampParseError(msg)

    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    zone = match["zone"] or "Z"
    if zone == "Z":
        zone = "+00:00"

    try:
        parsed = datetime.fromisoformat(f"{match['date']}T{match['time']}.{fraction}{zone}")
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        raise TimestampParseError(f"Invalid timestamp: {raw!r}: {e}") from e


def fixed_offset(tz_offset_minutes: int) -> timezone:
    """Build a fixed UTC offset from a signed number of minutes.

    Raises:
        TimestampParseError: If the offset exceeds 18 hours either way.
    """
    if abs(tz_offset_minutes) > _MAX_OFFSET_MINUTES:
        msg = f"UTC offset out of range: {tz_offset_minutes} minutes"
        raise TimestampParseError(msg)
    return timezone(timedelta(minutes=tz_offset_minutes))


def decode_timestamp(raw: str, tz_offset_minutes: int) -> datetime:
    """Decode a timestamp and re-express it at a fixed UTC offset.

    The result refers to the same instant as ``raw``; only its local
    representation changes. For example ``2016-01-01T10:00:00Z`` with an
    offset of ``-300`` decodes to ``2016-01-01T05:00:00-05:00``.

    Args:
        raw: Timestamp string as returned by the Gerrit REST API.
        tz_offset_minutes: Offset from UTC in minutes, may be negative.

    Returns:
        Timezone-aware datetime carrying the fixed offset.

    Raises:
        TimestampParseError: If the timestamp is malformed or the offset
            cannot be represented.
    """
    offset = fixed_offset(tz_offset_minutes)
    parsed = parse_timestamp(raw)
    try:
        return parsed.astimezone(offset)
    except (ValueError, OverflowError) as e:
        raise TimestampParseError(f"Timestamp {raw!r} out of range at offset {offset}") from e
