"""Hop operations: scoring, resolution, ranking and switching."""
