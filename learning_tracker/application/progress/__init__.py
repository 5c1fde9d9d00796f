"""Progress application layer."""
