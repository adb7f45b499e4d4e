"""Wall-clock access, injectable wherever "now" matters."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision, the finest the bundle format keeps."""
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime, at millisecond precision."""
    return to_millis(datetime.now(UTC))
