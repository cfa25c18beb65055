"""Hop exception hierarchy.

All Hop-specific exceptions inherit from HopError.
"""


class HopError(Exception):
    """Base exception for all Hop errors."""


class NotARepositoryError(HopError):
    """Raised when no git repository encloses the starting directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not a git repository (or any parent up to /): {path}")


class NoMatchError(HopError):
    """Raised when candidate resolution yields nothing.

    With no pattern this means the history log has no tracked branches yet.
    """

    def __init__(self, pattern: str | None) -> None:
        self.pattern = pattern
        if pattern:
            msg = f"No branch matches '{pattern}'"
        else:
            msg = "No tracked branches yet. Switch branches with the hook installed to build history."
        super().__init__(msg)


class BranchNotFoundError(HopError):
    """Raised when the selected branch does not exist in the repository."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__(f"Branch does not exist: {branch_name}")


class CheckoutFailedError(HopError):
    """Raised when the version-control provider fails to switch branches.

    Typically uncommitted changes that would be overwritten.
    """

    def __init__(self, branch_name: str, detail: str = "") -> None:
        self.branch_name = branch_name
        self.detail = detail
        msg = f"Failed to switch to branch '{branch_name}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreIOError(HopError):
    """Raised when the history log cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write history log {path}: {reason}")


class InvalidSelectionError(HopError):
    """Raised when an interactive choice is not a valid list index."""

    def __init__(self, reply: str, count: int) -> None:
        self.reply = reply
        self.count = count
        super().__init__(
            f"Invalid selection '{reply}'. Enter a number between 1 and {count}."
        )


class VersionControlError(HopError):
    """Raised when the version-control provider cannot run."""


class HookError(HopError):
    """Raised when the post-checkout hook cannot be installed or removed."""
