"""Memory-strength parameters tracked per flashcard."""

from dataclasses import dataclass

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_object import ValueObject

INITIAL_INTERVAL = 1.0
INITIAL_REPETITION = 0
INITIAL_EFACTOR = 2.5
MIN_EFACTOR = 1.3


@dataclass(frozen=True, eq=False)
class MemoryState(ValueObject):
    """
    SM-2 scheduling state of a single card.

    Attributes:
        interval: Days until the card is next due (positive)
        repetition: Consecutive passing reviews since the last reset
        efactor: Ease factor, never below 1.3
    """

    interval: float = INITIAL_INTERVAL
    repetition: int = INITIAL_REPETITION
    efactor: float = INITIAL_EFACTOR

    def __post_init__(self) -> None:
        if not self.interval > 0:
            raise ValidationError("Interval must be positive", field="interval", value=self.interval)
        if self.repetition < 0:
            raise ValidationError(
                "Repetition must be non-negative", field="repetition", value=self.repetition
            )
        if not self.efactor >= MIN_EFACTOR:
            raise ValidationError(
                f"Efactor must be at least {MIN_EFACTOR}", field="efactor", value=self.efactor
            )

    @classmethod
    def initial(cls) -> "MemoryState":
        return cls()
