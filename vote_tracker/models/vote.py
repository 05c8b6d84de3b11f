"""Roll-call vote value objects."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

# Formats used by the House Clerk's roll list, tried after ISO-8601
_CLERK_DATE_FORMATS = (
    "%d-%b-%YT%I:%M %p",
    "%d-%b-%YT%H:%M",
    "%d-%b-%Y",
)


class Chamber(str, Enum):
    """Legislative chamber a vote was recorded in."""

    SENATE = "Senate"
    HOUSE = "House"


def parse_vote_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a vote timestamp string.

    Accepts ISO-8601 (with or without time and offset) and the Clerk's
    ``d-Mon-YYYY`` date with an optional ``h:mm AM/PM`` time. Naive values
    are taken as UTC so every result is comparable.

    Returns:
        Timezone-aware datetime, or None if the value is empty or unparseable.
    """
    if not value:
        return None

    text = value.strip()
    parsed = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _CLERK_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Vote:
    """A single roll-call vote normalized from either chamber's feed.

    Attributes:
        chamber: Source legislature
        number: Roll-call number within the session (Senate) or year (House)
        date: Timestamp string as published, None if the feed had none
        title: Human-readable description of what was voted on
        result: Outcome label and tally, e.g. "Passed (200-150)"
        key: Stable handle unique within one fetched batch
    """

    chamber: Chamber
    number: Optional[int]
    date: Optional[str]
    title: str
    result: str
    key: str

    @property
    def timestamp(self) -> Optional[datetime]:
        return parse_vote_date(self.date)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dict."""
        return {
            "chamber": self.chamber.value,
            "number": self.number,
            "date": self.date,
            "title": self.title,
            "result": self.result,
            "key": self.key,
        }
