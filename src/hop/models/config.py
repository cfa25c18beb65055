"""Configuration model for Hop.

HopConfig holds per-invocation settings.  Scoring constants are not
configurable and live in hop.operations.scoring.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HopConfig(BaseModel):
    """Per-invocation configuration."""

    history_path: Optional[str] = None  # None = <git-dir>/<tracking_dir_name>/<history_filename>
    tracking_dir_name: str = "hop"
    history_filename: str = "history"
    max_results: int = Field(default=20, ge=1)
    git_executable: str = "git"
