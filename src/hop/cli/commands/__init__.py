"""Hop CLI subcommands."""
