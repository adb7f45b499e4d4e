"""
SuperMemo-2 scheduling.

This is a pure domain service with no infrastructure dependencies and no
side effects: callers write the result back onto the card.
"""

import math
from datetime import datetime, timedelta

from flashdeck.domain.learning.value_objects import MIN_EFACTOR, Grade, MemoryState

FIRST_INTERVAL = 1.0
SECOND_INTERVAL = 6.0


class Sm2Scheduler:
    """
    Maps (memory state, grade) to the next memory state.

    Failing grades (< 3) restart learning: repetition 0, interval 1.
    Passing grades advance repetition by one; the first two passes use
    fixed intervals of 1 and 6 days, later ones multiply the previous
    interval by the previous efactor.
    """

    def schedule(self, state: MemoryState, grade: Grade) -> MemoryState:
        """
        Compute the memory state after a review.

        Args:
            state: Current interval, repetition and efactor
            grade: Recall grade on the 0-5 scale

        Returns:
            New memory state
        """
        if grade.is_passing:
            repetition = state.repetition + 1
            if repetition == 1:
                interval = FIRST_INTERVAL
            elif repetition == 2:
                interval = SECOND_INTERVAL
            else:
                interval = max(state.interval, _round_half_up(state.interval * state.efactor))
        else:
            repetition = 0
            interval = FIRST_INTERVAL

        return MemoryState(
            interval=interval,
            repetition=repetition,
            efactor=self.next_efactor(state.efactor, grade),
        )

    @staticmethod
    def next_efactor(efactor: float, grade: Grade) -> float:
        miss = 5 - int(grade)
        return max(MIN_EFACTOR, efactor + (0.1 - miss * (0.08 + miss * 0.02)))

    @staticmethod
    def next_review(now: datetime, state: MemoryState) -> datetime:
        return now + timedelta(days=state.interval)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))
