"""Ranked branch display model.

RankedBranch is what Hop.ranked_branches() returns for list displays.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RankedBranch(BaseModel):
    """A candidate branch with its usage score."""

    name: str
    score: float = Field(ge=0.0)
    stars: int = Field(ge=0, le=3)
    is_current: bool = False
