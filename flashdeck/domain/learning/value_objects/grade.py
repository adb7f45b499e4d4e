"""
Recall grade value object.

The canonical scale is SuperMemo's 0-5 quality of response. Clients that
present a five-button rating (Again/Hard/Good/Easy/Perfect, 1-5) convert
once at the boundary through ``Grade.from_rating``; the two scales are not
numerically equivalent, so no arithmetic offset is applied.
"""

import math
from enum import IntEnum
from numbers import Integral, Real

from flashdeck.domain.common.exceptions import ValidationError

PASSING_GRADE = 3


class InvalidGradeError(ValidationError):
    """Raised when a value is not a member of the grade scale."""

    def __init__(self, value: object, scale: str = "sm2") -> None:
        allowed = "0-5" if scale == "sm2" else "1-5"
        super().__init__(f"Grade must be an integer in {allowed}", field="grade", value=value)
        self.scale = scale


class Grade(IntEnum):
    """SuperMemo-2 quality of response."""

    BLACKOUT = 0
    INCORRECT_EASY_RECALL = 1
    INCORRECT_HARD_RECALL = 2
    CORRECT_VERY_HARD = 3
    CORRECT_HARD = 4
    CORRECT_EASY = 5

    @property
    def is_passing(self) -> bool:
        return self >= PASSING_GRADE

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "Grade":
        """
        Convert a raw value to a Grade, rejecting anything off the scale.

        Integral floats (``4.0``) are accepted; bools, fractional numbers,
        strings and out-of-range integers are not.
        """
        return cls(_as_scale_int(value, range(0, 6), "sm2"))

    @classmethod
    def from_rating(cls, value: object) -> "Grade":
        """Map a 1-5 button rating onto the canonical scale."""
        return _RATING_TO_GRADE[_as_scale_int(value, range(1, 6), "rating")]


def _as_scale_int(value: object, allowed: range, scale: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidGradeError(value, scale)
    if not isinstance(value, Integral):
        if not math.isfinite(value) or not float(value).is_integer():
            raise InvalidGradeError(value, scale)
    as_int = int(value)
    if as_int not in allowed:
        raise InvalidGradeError(value, scale)
    return as_int


_LABELS = {
    Grade.BLACKOUT: "Complete blackout",
    Grade.INCORRECT_EASY_RECALL: "Incorrect, easy to recall",
    Grade.INCORRECT_HARD_RECALL: "Incorrect, hard to recall",
    Grade.CORRECT_VERY_HARD: "Correct, very hard",
    Grade.CORRECT_HARD: "Correct, hard",
    Grade.CORRECT_EASY: "Correct, easy",
}

# Again fails the card; Hard is the weakest pass; Easy and Perfect share
# the top grade because SM-2 has nothing above 5.
_RATING_TO_GRADE = {
    1: Grade.BLACKOUT,
    2: Grade.CORRECT_VERY_HARD,
    3: Grade.CORRECT_HARD,
    4: Grade.CORRECT_EASY,
    5: Grade.CORRECT_EASY,
}
