"""Shared fixtures: sample feed payloads and a throwaway settings store."""

import json

import pytest

from vote_tracker.config import get_settings


SENATE_MENU = {
    "roll_calls": {
        "congress": "118",
        "session": "2",
        "roll_call": [
            {
                "vote_number": 5,
                "vote_date": "2024-03-01",
                "issue": " HR1 ",
                "question": " On Passage ",
                "result": "Agreed to",
                "counts": {"Yea": 60, "Nay": 40},
            },
            {
                "vote_number": 4,
                "vote_date": "2024-02-27",
                "issue": "PN123",
                "question": "On the Nomination",
                "result": "Confirmed",
                "counts": {"Yea": 51, "Nay": 47},
            },
        ],
    }
}

HOUSE_ROLLS = """<?xml version="1.0" encoding="UTF-8"?>
<rollcall-votes>
  <rollcall-vote>
    <action-date>2024-03-02</action-date>
    <action-time>14:00</action-time>
    <rollcall-num>10</rollcall-num>
    <vote-question>On Agreeing</vote-question>
    <vote-result>Passed</vote-result>
    <totals-by-vote>
      <yea-total>200</yea-total>
      <nay-total>150</nay-total>
    </totals-by-vote>
  </rollcall-vote>
  <rollcall-vote>
    <action-date>2024-02-28</action-date>
    <action-time>10:30</action-time>
    <rollcall-num>9</rollcall-num>
    <vote-question>On Motion to Adjourn</vote-question>
    <vote-result>Failed</vote-result>
    <totals-by-vote>
      <yea-total>12</yea-total>
      <nay-total>390</nay-total>
    </totals-by-vote>
  </rollcall-vote>
</rollcall-votes>
"""


@pytest.fixture
def senate_menu() -> dict:
    """Senate vote menu with two roll calls."""
    return json.loads(json.dumps(SENATE_MENU))


@pytest.fixture
def house_rolls() -> str:
    """House roll list with two roll calls."""
    return HOUSE_ROLLS


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point the settings store at a temporary file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(get_settings(), "settings_path", str(path))
    return path
