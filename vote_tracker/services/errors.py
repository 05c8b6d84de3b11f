"""Errors raised while fetching and normalizing votes.

Every subclass of VoteFetchError is fatal to a fetch: the aggregator stops,
drops any votes already gathered and reports ``str(exc)`` to the user.
"""

from typing import Optional

# How much of an upstream response body to quote in error messages
SNIPPET_LENGTH = 180


def snippet(text: str, length: int = SNIPPET_LENGTH) -> str:
    """Return the leading part of a response body for an error message."""
    return text[:length]


class VoteFetchError(Exception):
    """Base class for errors that abort a vote fetch."""

    # Status a route answers with when this error ends a fetch
    status_code = 502


class ChamberSelectionError(VoteFetchError):
    """Neither chamber was selected."""

    status_code = 400

    def __init__(self):
        super().__init__(
            "Please select at least one chamber (House or Senate) to fetch votes."
        )


class RelayNetworkError(VoteFetchError):
    """The relay could not be reached at all."""

    def __init__(self, label: str, cause: Exception):
        self.label = label
        super().__init__(f"{label} failed (network): {str(cause) or type(cause).__name__}")


class UpstreamHTTPError(VoteFetchError):
    """The relay answered with a non-2xx status."""

    def __init__(self, label: str, status_code: int, body: str = ""):
        self.label = label
        self.upstream_status = status_code
        super().__init__(
            f"{label} failed (HTTP {status_code}). {snippet(body)}".strip()
        )


class PayloadError(VoteFetchError):
    """The response body could not be parsed."""

    def __init__(self, message: str, label: Optional[str] = None):
        self.label = label
        super().__init__(message)

    @classmethod
    def invalid_json(cls, label: str, body: str) -> "PayloadError":
        return cls(
            f"{label} returned invalid JSON. Response text: {snippet(body)}",
            label=label,
        )

    @classmethod
    def invalid_xml(cls, label: str, detail: str) -> "PayloadError":
        return cls(f"{label} XML parse error: {detail}", label=label)
