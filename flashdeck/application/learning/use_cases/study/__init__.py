"""Study session and statistics use cases."""

from .get_stats_use_case import GetStatsUseCase
from .study_session_use_case import StudySessionUseCase

__all__ = ["GetStatsUseCase", "StudySessionUseCase"]
