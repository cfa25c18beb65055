"""Hop: a usage-learning branch switcher for git.

Hop records every branch checkout and, given part of a name, jumps to the
branch you most likely mean, ranked by how often and how recently you used it.
"""

from hop._version import __version__

# Core entry point
from hop.hop import Hop

# Models
from hop.models.branch import RankedBranch
from hop.models.config import HopConfig
from hop.models.context import RepositoryContext
from hop.models.event import SwitchEvent

# Components
from hop.operations.resolve import CandidateResolver
from hop.operations.scoring import HALF_LIFE_SECONDS, ScoringEngine, star_rating
from hop.operations.select import (
    MAX_RESULTS,
    RankedSelector,
    Selection,
    SelectionKind,
    parse_selection,
)
from hop.operations.switch import SwitchCoordinator, SwitchOutcome, SwitchStatus
from hop.storage.file import FileHistoryStore
from hop.storage.store import HistoryStore, MemoryHistoryStore
from hop.vcs.git import GitProvider
from hop.vcs.provider import VersionControlProvider

# Exceptions
from hop.exceptions import (
    BranchNotFoundError,
    CheckoutFailedError,
    HookError,
    HopError,
    InvalidSelectionError,
    NoMatchError,
    NotARepositoryError,
    StoreIOError,
    VersionControlError,
)

__all__ = [
    "__version__",
    "Hop",
    "RankedBranch",
    "HopConfig",
    "RepositoryContext",
    "SwitchEvent",
    "CandidateResolver",
    "HALF_LIFE_SECONDS",
    "ScoringEngine",
    "star_rating",
    "MAX_RESULTS",
    "RankedSelector",
    "Selection",
    "SelectionKind",
    "parse_selection",
    "SwitchCoordinator",
    "SwitchOutcome",
    "SwitchStatus",
    "FileHistoryStore",
    "HistoryStore",
    "MemoryHistoryStore",
    "GitProvider",
    "VersionControlProvider",
    "BranchNotFoundError",
    "CheckoutFailedError",
    "HookError",
    "HopError",
    "InvalidSelectionError",
    "NoMatchError",
    "NotARepositoryError",
    "StoreIOError",
    "VersionControlError",
]
