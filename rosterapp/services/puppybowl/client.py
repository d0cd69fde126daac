from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from rosterapp.core.config import Settings, settings as default_settings
from rosterapp.core.errors import DecodeFailure, NetworkFailure, ServerRejection

_JSON_HEADERS = {"Content-Type": "application/json"}


def build_session(cfg: Settings | None = None) -> requests.Session:
    """
    Pooled HTTP session for the Puppy Bowl API. Failures are terminal for the
    user action that caused them, so the adapter never retries.
    """
    cfg = cfg or default_settings
    s = requests.Session()
    s.headers.update({"User-Agent": f"{cfg.APP_NAME}/1.0", "Accept": "application/json"})
    adapter = HTTPAdapter(pool_connections=4, pool_maxsize=8, max_retries=0)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


def players_url(base_url: str, player_id: Optional[int] = None) -> str:
    base = base_url.rstrip("/")
    if player_id is None:
        return base
    return f"{base}/{int(player_id)}"


def _body_excerpt(resp: requests.Response) -> str:
    try:
        return resp.text[:500]
    except Exception:
        return "<no-body>"


def puppybowl_request(
    session: requests.Session,
    method: str,
    url: str,
    *,
    payload: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> requests.Response:
    """
    Send one request. Transport problems surface as NetworkFailure; the
    response is returned untouched so each operation applies its own
    success gate.
    """
    kwargs: Dict[str, Any] = {"timeout": timeout}
    if payload is not None:
        kwargs["json"] = payload
        kwargs["headers"] = dict(_JSON_HEADERS)
    try:
        return session.request(method, url, **kwargs)
    except requests.RequestException as e:
        raise NetworkFailure(f"{method} failed: {e}", url=url) from e


def decode_json(resp: requests.Response, url: str) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError as e:
        raise DecodeFailure(
            f"Response was not JSON :: {_body_excerpt(resp)}",
            status_code=resp.status_code,
            url=url,
        ) from e
    if not isinstance(data, dict):
        raise DecodeFailure("Response JSON was not an object", status_code=resp.status_code, url=url)
    return data


def puppybowl_get(
    session: requests.Session,
    url: str,
    *,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """GET that requires a 2xx status and a JSON object body."""
    resp = puppybowl_request(session, "GET", url, timeout=timeout)
    if not resp.ok:
        raise ServerRejection(
            f"Puppy Bowl error :: {_body_excerpt(resp)}",
            status_code=resp.status_code,
            url=url,
        )
    return decode_json(resp, url)
