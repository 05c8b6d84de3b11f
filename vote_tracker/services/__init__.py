"""Services for relaying, parsing and aggregating roll-call votes."""

from vote_tracker.services.relay import relay_client, ProxyRelay, RelayResponse
from vote_tracker.services.aggregator import VoteAggregator
from vote_tracker.services.fetch_result import FetchResult
from vote_tracker.services.settings_store import load_settings, save_settings

__all__ = [
    "relay_client",
    "ProxyRelay",
    "RelayResponse",
    "VoteAggregator",
    "FetchResult",
    "load_settings",
    "save_settings",
]
