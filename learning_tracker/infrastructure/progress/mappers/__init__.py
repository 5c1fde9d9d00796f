from .progress_stats_mapper import ProgressStatsMapper

__all__ = ["ProgressStatsMapper"]
