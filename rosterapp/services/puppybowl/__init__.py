"""
Puppy Bowl API service package: HTTP client, envelope parsers and the four
collection operations.
"""

# --- Low-level HTTP client ---
from .client import build_session, players_url, puppybowl_get, puppybowl_request, decode_json

# --- Parsers ---
from .parsers import parse_players, parse_player, parse_created

# --- Collection operations ---
from .players import fetch_players, fetch_player, add_player, remove_player

__all__ = [
    "build_session",
    "players_url",
    "puppybowl_get",
    "puppybowl_request",
    "decode_json",
    "parse_players",
    "parse_player",
    "parse_created",
    "fetch_players",
    "fetch_player",
    "add_player",
    "remove_player",
]
