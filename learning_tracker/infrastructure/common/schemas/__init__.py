"""Common schema types."""

from .date_types import IsoDate, OptionalIsoDate

__all__ = ["IsoDate", "OptionalIsoDate"]
