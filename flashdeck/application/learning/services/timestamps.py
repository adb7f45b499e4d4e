"""Conversion between bundle timestamps and aware datetimes."""

import math
from datetime import UTC, datetime
from numbers import Real


def parse_timestamp(value: object) -> datetime:
    """
    Parse an ISO-8601 string or a number of epoch milliseconds.

    A trailing ``Z`` is accepted. Naive values are taken as UTC.

    Raises:
        ValueError: If the value is neither form
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise ValueError(f"Not a timestamp: {value!r}")
        return datetime.fromtimestamp(float(value) / 1000, tz=UTC)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    raise ValueError(f"Not a timestamp: {value!r}")


def is_timestamp(value: object) -> bool:
    try:
        parse_timestamp(value)
    except (ValueError, OverflowError, OSError):
        return False
    return True


def format_timestamp(value: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc = value.astimezone(UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
