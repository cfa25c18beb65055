"""Version-control providers for Hop."""
