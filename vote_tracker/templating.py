"""Jinja2 templates shared by the HTML routes."""

from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

from vote_tracker.models import parse_vote_date

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_vote_date(value: Optional[str]) -> str:
    """Readable form of a vote date, e.g. "Mar 2, 2024, 2:00 PM".

    Returns "N/A" for an empty value and the raw string if it cannot be parsed.
    """
    if not value:
        return "N/A"
    parsed = parse_vote_date(value)
    if parsed is None:
        return str(value)
    hour = parsed.strftime("%I").lstrip("0") or "12"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}, {hour}:{parsed.strftime('%M %p')}"


templates.env.filters["vote_date"] = format_vote_date
