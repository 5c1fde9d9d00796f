"""Learning application layer: goal, study session and resource use cases."""
