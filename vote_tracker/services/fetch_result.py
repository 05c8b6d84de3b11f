"""Outcome of a vote fetch.

A fetch either yields the full merged vote list or a single error message,
never both.
"""

from dataclasses import dataclass, field
from typing import Optional

from vote_tracker.models import Vote


@dataclass
class FetchResult:
    """Wrapper for the aggregator's output.

    Attributes:
        votes: Merged votes, newest first (empty on failure)
        error: Human-readable message if the fetch failed
        status_code: HTTP status a route should answer with
    """

    votes: list[Vote] = field(default_factory=list)
    error: Optional[str] = None
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, votes: list[Vote]) -> "FetchResult":
        """Create a result holding fetched votes."""
        return cls(votes=list(votes), error=None, status_code=200)

    @classmethod
    def failed(cls, message: str, status_code: int = 502) -> "FetchResult":
        """Create a result for an aborted fetch."""
        return cls(votes=[], error=message, status_code=status_code)

    def to_dict(self) -> dict:
        return {
            "votes": [v.to_dict() for v in self.votes],
            "count": len(self.votes),
            "error": self.error,
        }
