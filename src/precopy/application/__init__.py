"""Application layer services."""
