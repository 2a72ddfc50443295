"""Core models and schemas for the tile placement engine."""
