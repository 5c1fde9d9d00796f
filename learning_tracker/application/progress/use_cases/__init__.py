from .progress_stats_use_case import ProgressStatsUseCase

__all__ = ["ProgressStatsUseCase"]
