"""Learning value objects."""

from .grade import PASSING_GRADE, Grade, InvalidGradeError
from .memory_state import (
    INITIAL_EFACTOR,
    INITIAL_INTERVAL,
    INITIAL_REPETITION,
    MIN_EFACTOR,
    MemoryState,
)

__all__ = [
    "INITIAL_EFACTOR",
    "INITIAL_INTERVAL",
    "INITIAL_REPETITION",
    "MIN_EFACTOR",
    "PASSING_GRADE",
    "Grade",
    "InvalidGradeError",
    "MemoryState",
]
