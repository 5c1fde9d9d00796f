"""Progress context schemas."""

from .progress_schemas import ProgressStatsResponse

__all__ = ["ProgressStatsResponse"]
