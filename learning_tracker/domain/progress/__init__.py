"""Progress domain layer: derived statistics over goals and study sessions."""

from learning_tracker.domain.progress.progress_stats import ProgressStats
from learning_tracker.domain.progress.services.progress_calculator import ProgressCalculator

__all__ = ["ProgressCalculator", "ProgressStats"]
