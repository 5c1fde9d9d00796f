"""Personal learning tracker: per-identity goals, study sessions and resources."""

__version__ = "0.1.0"
