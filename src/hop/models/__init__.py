"""Domain models for Hop."""
