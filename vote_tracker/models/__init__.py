"""Domain models."""

from vote_tracker.models.vote import Chamber, Vote, parse_vote_date
from vote_tracker.models.settings import VoteSettings, year_for_congress

__all__ = [
    "Chamber",
    "Vote",
    "parse_vote_date",
    "VoteSettings",
    "year_for_congress",
]
