"""Run the app with uvicorn: ``python -m vote_tracker``."""

import uvicorn

from vote_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "vote_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
