"""Mappers from the two chamber feeds to Vote records.

The Senate publishes a JSON vote menu per congress session and the House
Clerk publishes an XML roll list per calendar year. Each mapper is a pure
function that turns one parsed payload into an ordered list of Vote.
"""

import logging
from datetime import datetime
from typing import Any, Optional, Union

from lxml import etree

from vote_tracker.models import Chamber, Vote

logger = logging.getLogger(__name__)

# Placeholder for an outcome or tally the feed left out
MISSING_VALUE = "?"

# Sort key for votes whose date is missing or unparseable
_OLDEST = float("-inf")


def _safe_int(value: Any) -> Optional[int]:
    """Safely convert a value to int, returning None if not possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return None


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def unique_key(key: str, seen: set) -> str:
    """Return key, suffixed with -2, -3, ... if it was already used in this batch."""
    candidate = key
    suffix = 2
    while candidate in seen:
        candidate = f"{key}-{suffix}"
        suffix += 1
    seen.add(candidate)
    return candidate


def format_result(result: Any, yea: Any, nay: Any) -> str:
    """Format an outcome and tally as "<Result> (<Yea>-<Nay>)"."""
    yea_text = _clean(yea) or MISSING_VALUE
    nay_text = _clean(nay) or MISSING_VALUE
    return f"{_clean(result) or MISSING_VALUE} ({yea_text}-{nay_text})"


# =============================================================================
# Senate
# =============================================================================


def _senate_roll_calls(data: Any) -> Optional[list]:
    """Pull roll_calls.roll_call out of a vote menu, or None if absent."""
    if not isinstance(data, dict):
        return None
    roll_calls = data.get("roll_calls")
    if not isinstance(roll_calls, dict):
        return None
    records = roll_calls.get("roll_call")
    # A session with a single vote can come back as a bare object
    if isinstance(records, dict):
        return [records]
    if isinstance(records, list):
        return records
    return None


def parse_senate_menu(data: Any, congress: int, session: int) -> list[Vote]:
    """Map a Senate vote menu to votes.

    A menu without a roll_calls.roll_call list is not an error: it yields no
    votes and logs a warning.

    Args:
        data: Decoded JSON of vote_menu_<congress>_<session>.json
        congress: Congress number the menu was requested for
        session: Session number the menu was requested for

    Returns:
        Votes in menu order
    """
    records = _senate_roll_calls(data)
    if records is None:
        logger.warning(
            "Senate data format unexpected or no roll calls found for %s-%s",
            congress,
            session,
        )
        return []

    votes = []
    seen_keys: set = set()
    for index, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            logger.warning("Skipping Senate roll call that is not an object: %r", record)
            continue

        vote_number = record.get("vote_number")
        counts = record.get("counts")
        if not isinstance(counts, dict):
            counts = {}

        votes.append(
            Vote(
                chamber=Chamber.SENATE,
                number=_safe_int(vote_number),
                date=_clean(record.get("vote_date")) or None,
                title=f"{_clean(record.get('issue'))}: {_clean(record.get('question'))}",
                result=format_result(
                    record.get("result"), counts.get("Yea"), counts.get("Nay")
                ),
                key=unique_key(
                    f"s-{congress}-{session}-{_clean(vote_number) or f'#{index}'}",
                    seen_keys,
                ),
            )
        )

    return votes


# =============================================================================
# House
# =============================================================================


def parse_house_xml(content: Union[bytes, str]) -> etree._Element:
    """Parse a House roll list document.

    Entity resolution and network access are disabled; the payload comes
    from a third party.

    Raises:
        etree.XMLSyntaxError: If the document is not well-formed
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(content, parser=parser)


def _child_text(elem: etree._Element, path: str) -> Optional[str]:
    """Text of the first descendant at path, stripped; None if absent or empty."""
    steps = "/".join(f"{{*}}{step}" for step in path.split("/"))
    text = elem.findtext(f".//{steps}")
    if text is None:
        return None
    text = text.strip()
    return text or None


def house_vote_date(action_date: Optional[str], action_time: Optional[str]) -> Optional[str]:
    """Join the Clerk's separate date and time into one timestamp string.

    A vote without an action-date has no usable date. A vote without an
    action-time keeps the bare date.
    """
    if not action_date:
        return None
    if not action_time:
        return action_date
    return f"{action_date}T{action_time}"


def parse_house_rolls(root: etree._Element, year: int) -> list[Vote]:
    """Map a House Clerk roll list to votes.

    Args:
        root: Parsed ROLLS.xml document
        year: Calendar year the roll list was requested for

    Returns:
        Votes in document order
    """
    votes = []
    seen_keys: set = set()
    for index, elem in enumerate(root.iter("{*}rollcall-vote"), start=1):
        roll_number = _child_text(elem, "rollcall-num")
        votes.append(
            Vote(
                chamber=Chamber.HOUSE,
                number=_safe_int(roll_number),
                date=house_vote_date(
                    _child_text(elem, "action-date"), _child_text(elem, "action-time")
                ),
                title=_child_text(elem, "vote-question") or "N/A",
                result=format_result(
                    _child_text(elem, "vote-result"),
                    _child_text(elem, "totals-by-vote/yea-total"),
                    _child_text(elem, "totals-by-vote/nay-total"),
                ),
                key=unique_key(f"h-{year}-{roll_number or f'#{index}'}", seen_keys),
            )
        )

    return votes


# =============================================================================
# Ordering
# =============================================================================


def _sort_key(vote: Vote) -> float:
    timestamp: Optional[datetime] = vote.timestamp
    if timestamp is None:
        return _OLDEST
    return timestamp.timestamp()


def sort_votes(votes: list[Vote]) -> list[Vote]:
    """Order votes newest first.

    Votes with a missing or unparseable date go last. The sort is stable, so
    votes with equal dates keep their input order.
    """
    return sorted(votes, key=_sort_key, reverse=True)
