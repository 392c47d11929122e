"""User interfaces for precopy."""
