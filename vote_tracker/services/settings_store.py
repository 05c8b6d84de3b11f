"""Persistence for the user's congress/session/chamber selection.

Settings live as one JSON blob under a fixed namespace key inside a small
JSON file, so the file can hold other entries without clashing.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from vote_tracker.config import get_settings
from vote_tracker.models import VoteSettings

logger = logging.getLogger(__name__)

SETTINGS_NAMESPACE = "congress-vote-tracker:settings"


def _store_path(path: Optional[Union[str, Path]]) -> Path:
    return Path(path if path is not None else get_settings().settings_path)


def _read_store(path: Path) -> dict:
    """Read the whole store file, or an empty dict if unusable."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable settings store %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: Optional[Union[str, Path]] = None) -> VoteSettings:
    """Load saved settings merged over the defaults.

    A missing or corrupt store falls back to the defaults without raising.
    """
    store = _read_store(_store_path(path))
    raw = store.get(SETTINGS_NAMESPACE)

    # The blob is stored as a JSON string, like browser local storage
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            raw = None

    if not isinstance(raw, dict):
        return VoteSettings()
    return VoteSettings.from_dict(raw)


def save_settings(
    vote_settings: VoteSettings, path: Optional[Union[str, Path]] = None
) -> None:
    """Persist settings, leaving any other keys in the store untouched."""
    store_path = _store_path(path)
    store = _read_store(store_path)
    store[SETTINGS_NAMESPACE] = json.dumps(vote_settings.to_dict())

    store_path.parent.mkdir(parents=True, exist_ok=True)
    store_path.write_text(json.dumps(store, indent=2), encoding="utf-8")
    logger.info("Saved settings to %s", store_path)
