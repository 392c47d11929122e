"""Platform integrations shared across features."""
