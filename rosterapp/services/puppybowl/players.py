from __future__ import annotations

from typing import List, Optional

import requests

from rosterapp.core.errors import DecodeFailure, PuppyBowlError, ServerRejection
from rosterapp.schemas.player import NewPlayer, Player
from rosterapp.services.puppybowl.client import (
    decode_json,
    players_url,
    puppybowl_get,
    puppybowl_request,
)
from rosterapp.services.puppybowl.parsers import parse_created, parse_player, parse_players


def _stamp(err: PuppyBowlError, url: str, status_code: Optional[int] = None) -> PuppyBowlError:
    # parsers raise without request context
    if err.url is None:
        err.url = url
    if err.status_code is None:
        err.status_code = status_code
    return err


def fetch_players(session: requests.Session, base_url: str, *, timeout: Optional[float] = None) -> List[Player]:
    """GET the collection; returns players in server order."""
    url = players_url(base_url)
    payload = puppybowl_get(session, url, timeout=timeout)
    try:
        return parse_players(payload)
    except DecodeFailure as e:
        raise _stamp(e, url)


def fetch_player(
    session: requests.Session,
    base_url: str,
    player_id: int,
    *,
    timeout: Optional[float] = None,
) -> Player:
    url = players_url(base_url, player_id)
    payload = puppybowl_get(session, url, timeout=timeout)
    try:
        return parse_player(payload)
    except DecodeFailure as e:
        raise _stamp(e, url)


def add_player(
    session: requests.Session,
    base_url: str,
    new_player: NewPlayer,
    *,
    timeout: Optional[float] = None,
) -> Optional[Player]:
    """
    POST a new player. Acceptance is decided by the envelope's success flag,
    not by the status code; the hosted API echoes the row under data.newPlayer.
    """
    url = players_url(base_url)
    resp = puppybowl_request(session, "POST", url, payload=new_player.to_wire(), timeout=timeout)
    payload = decode_json(resp, url)
    try:
        return parse_created(payload)
    except (DecodeFailure, ServerRejection) as e:
        raise _stamp(e, url, resp.status_code)


def remove_player(
    session: requests.Session,
    base_url: str,
    player_id: int,
    *,
    timeout: Optional[float] = None,
) -> bool:
    """DELETE one player. Only HTTP 204 counts as removed."""
    url = players_url(base_url, player_id)
    resp = puppybowl_request(session, "DELETE", url, timeout=timeout)
    if resp.status_code != 204:
        raise ServerRejection(
            f"Delete of player #{player_id} not confirmed (expected 204)",
            status_code=resp.status_code,
            url=url,
        )
    return True
