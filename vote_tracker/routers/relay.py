"""Routes relaying the Senate and House vote feeds."""

from fastapi import APIRouter
from fastapi.responses import Response

from vote_tracker.services import relay_client

router = APIRouter(prefix="/api", tags=["relay"])


@router.get("/senate/{congress}/{session}")
async def senate_menu(congress: int, session: int) -> Response:
    """Relay vote_menu_<congress>_<session>.json from senate.gov."""
    relayed = await relay_client.get_senate_menu(congress, session)
    return Response(
        content=relayed.content,
        status_code=relayed.status_code,
        media_type=relayed.media_type,
    )


@router.get("/house/{year}")
async def house_rolls(year: int) -> Response:
    """Relay <year>/ROLLS.xml from clerk.house.gov."""
    relayed = await relay_client.get_house_rolls(year)
    return Response(
        content=relayed.content,
        status_code=relayed.status_code,
        media_type=relayed.media_type,
    )
