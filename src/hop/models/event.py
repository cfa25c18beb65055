"""Switch event model.

A SwitchEvent is one line of the history log: the moment a branch was
checked out.  Events are immutable once appended.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SwitchEvent:
    """A single recorded branch switch.

    Attributes:
        timestamp: Seconds since the Unix epoch.
        branch: Branch name (whitespace-free).
    """

    timestamp: int
    branch: str

    def to_line(self) -> str:
        """Serialize to the on-disk record format, newline included."""
        return f"{self.timestamp} {self.branch}\n"

    @classmethod
    def from_line(cls, line: str) -> SwitchEvent:
        """Parse one log record.

        Raises:
            ValueError: If the line does not hold exactly two fields or the
                timestamp is not an integer.
        """
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected 2 fields, got {len(fields)}")
        return cls(timestamp=int(fields[0]), branch=fields[1])
