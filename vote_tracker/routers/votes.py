"""Routes for fetching merged votes and managing saved settings."""

from typing import Optional

import httpx
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from vote_tracker.config import get_settings
from vote_tracker.models import VoteSettings
from vote_tracker.services import VoteAggregator, load_settings, save_settings
from vote_tracker.templating import templates

router = APIRouter(tags=["votes"])


class SettingsPayload(BaseModel):
    """Settings submitted by the user."""

    model_config = ConfigDict(populate_by_name=True)

    congress: int = Field(default=118, ge=1)
    session: int = Field(default=2, ge=1, le=2)
    include_house: bool = Field(default=True, alias="includeHouse")
    include_senate: bool = Field(default=True, alias="includeSenate")

    def to_settings(self) -> VoteSettings:
        return VoteSettings(
            congress=self.congress,
            session=self.session,
            include_house=self.include_house,
            include_senate=self.include_senate,
        )


def build_aggregator(request: Request) -> VoteAggregator:
    """Aggregator pointed at the configured relay, or at this app in-process."""
    if get_settings().relay_base_url:
        return VoteAggregator()
    return VoteAggregator(transport=httpx.ASGITransport(app=request.app))


@router.get("/votes")
async def get_votes(
    request: Request,
    congress: Optional[int] = Query(default=None, ge=1, description="Congress number"),
    session: Optional[int] = Query(default=None, ge=1, le=2, description="Session (1 or 2)"),
    include_house: Optional[bool] = Query(default=None, description="Include House votes"),
    include_senate: Optional[bool] = Query(default=None, description="Include Senate votes"),
):
    """Fetch recent roll-call votes from the selected chambers.

    Parameters left out fall back to the saved settings. Returns an HTML
    partial for HTMX requests, JSON otherwise.
    """
    saved = load_settings()
    vote_settings = VoteSettings(
        congress=congress if congress is not None else saved.congress,
        session=session if session is not None else saved.session,
        include_house=include_house if include_house is not None else saved.include_house,
        include_senate=include_senate if include_senate is not None else saved.include_senate,
    )

    result = await build_aggregator(request).fetch_votes(vote_settings)

    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(
            request,
            "partials/vote_list.html",
            {"votes": result.votes, "error": result.error},
            status_code=result.status_code,
        )

    content = result.to_dict()
    content["settings"] = vote_settings.to_dict()
    return JSONResponse(content=content, status_code=result.status_code)


@router.get("/settings")
async def get_saved_settings() -> JSONResponse:
    """Return the saved settings (defaults if nothing was saved)."""
    return JSONResponse(content=load_settings().to_dict())


@router.put("/settings")
async def put_settings(payload: SettingsPayload) -> JSONResponse:
    """Save the congress, session and chamber selection."""
    vote_settings = payload.to_settings()
    save_settings(vote_settings)
    return JSONResponse(content=vote_settings.to_dict())
