from __future__ import annotations
from typing import Any, List, Optional

from pydantic import ValidationError

from rosterapp.core.errors import DecodeFailure, ServerRejection
from rosterapp.schemas.player import Player

# ---------------- Small utils ----------------
def _get(d: Any, *keys) -> Any:
    cur = d
    for k in keys:
        if isinstance(cur, dict) and k in cur:
            cur = cur[k]
        else:
            return None
    return cur

def _to_player(raw: Any, where: str) -> Player:
    if not isinstance(raw, dict):
        raise DecodeFailure(f"Expected a player object at {where}")
    try:
        return Player.model_validate(raw)
    except ValidationError as e:
        raise DecodeFailure(f"Malformed player at {where}: {e.error_count()} error(s)") from e

# ---------------- Envelopes ----------------
def parse_players(payload: dict) -> List[Player]:
    """
    {data: {players: [...]}} -> [Player, ...] in server order.
    """
    raw = _get(payload, "data", "players")
    if not isinstance(raw, list):
        raise DecodeFailure("Missing data.players in list response")
    return [_to_player(p, f"data.players[{i}]") for i, p in enumerate(raw)]

def parse_player(payload: dict) -> Player:
    """
    {data: {player: {...}}} -> Player
    """
    raw = _get(payload, "data", "player")
    if raw is None:
        raise DecodeFailure("Missing data.player in single-player response")
    return _to_player(raw, "data.player")

def _error_message(payload: dict) -> Optional[str]:
    err = payload.get("error")
    if isinstance(err, dict):
        msg = err.get("message") or err.get("name")
        return str(msg) if msg else None
    if isinstance(err, str) and err.strip():
        return err.strip()
    return None

def parse_created(payload: dict) -> Optional[Player]:
    """
    {success: true, data: {newPlayer: {...}}} -> Player (or None when the
    echo is absent). Anything but success=true is a rejection.
    """
    if payload.get("success") is not True:
        raise ServerRejection(_error_message(payload) or "Create was not acknowledged (success flag missing or false)")
    raw = _get(payload, "data", "newPlayer")
    if raw is None:
        return None
    return _to_player(raw, "data.newPlayer")
