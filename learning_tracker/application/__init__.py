"""Application layer: repository protocols and use cases."""
