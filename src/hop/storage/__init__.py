"""History log storage for Hop."""
