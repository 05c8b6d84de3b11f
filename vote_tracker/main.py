"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from vote_tracker import __version__
from vote_tracker.config import get_settings
from vote_tracker.middleware import RequestLoggingMiddleware
from vote_tracker.routers import relay, votes
from vote_tracker.services import load_settings
from vote_tracker.templating import templates

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

app = FastAPI(
    title="Congress Vote Tracker",
    description="Recent Senate and House roll-call votes in one list",
    version=__version__,
)

# Middleware (outermost first)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(relay.router)
app.include_router(votes.router)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Homepage with the settings form and vote list."""
    return templates.TemplateResponse(
        request, "index.html", {"settings": load_settings()}
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
