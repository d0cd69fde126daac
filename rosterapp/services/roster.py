# rosterapp/services/roster.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

import requests

from rosterapp.core.config import Settings, settings as default_settings
from rosterapp.core.errors import PuppyBowlError
from rosterapp.core.logging_config import get_logger
from rosterapp.schemas.player import NewPlayer, Player, RosterSnapshot
from rosterapp.services.puppybowl import add_player, fetch_player, fetch_players, remove_player
from rosterapp.services.store import RosterStore

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[PuppyBowlError] = None

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: PuppyBowlError) -> "Outcome":
        return cls(ok=False, error=error)


class RosterController:
    """
    Runs each user action against the Puppy Bowl API and applies the result
    to the store. Upstream failures are logged and returned as failed
    Outcomes; the store keeps its last-known-good state.

    Actions hold one re-entrant lock for their whole duration, including the
    follow-up refresh, so a slower earlier response can never land on top of
    a later action. Store reads and writes take a second, short-lived lock,
    so rendering never waits on an upstream call.
    """

    def __init__(
        self,
        session: requests.Session,
        cfg: Settings | None = None,
        store: RosterStore | None = None,
    ):
        self.cfg = cfg or default_settings
        self.session = session
        self.store = store or RosterStore()
        self._action_lock = threading.RLock()
        self._state_lock = threading.Lock()

    @property
    def base_url(self) -> str:
        return self.cfg.players_url

    @property
    def _timeout(self) -> Optional[float]:
        return self.cfg.REQUEST_TIMEOUT

    # ---------------- actions ----------------

    def refresh(self) -> Outcome[List[Player]]:
        with self._action_lock:
            try:
                players = fetch_players(self.session, self.base_url, timeout=self._timeout)
            except PuppyBowlError as e:
                logger.error("Uh oh, trouble fetching players! %s", e)
                return Outcome.failure(e)

            with self._state_lock:
                dropped = self.store.replace_players(players)
            if dropped:
                logger.info("Selected player is no longer in the lineup; selection cleared")
            logger.info("Lineup refreshed with %d player(s)", len(players))
            return Outcome.success(players)

    def select(self, player_id: int) -> Outcome[Player]:
        with self._action_lock:
            try:
                player = fetch_player(self.session, self.base_url, player_id, timeout=self._timeout)
            except PuppyBowlError as e:
                logger.error("Oh no, trouble fetching player #%s! %s", player_id, e)
                return Outcome.failure(e)

            with self._state_lock:
                self.store.select(player)
            logger.info("Selected player #%s (%s)", player.id, player.name)
            return Outcome.success(player)

    def create(self, new_player: NewPlayer) -> Outcome[Optional[Player]]:
        with self._action_lock:
            try:
                created = add_player(self.session, self.base_url, new_player, timeout=self._timeout)
            except PuppyBowlError as e:
                logger.error("Oops, something went wrong with adding that player! %s", e)
                return Outcome.failure(e)

            logger.info(
                "Invited %s%s",
                new_player.name,
                f" as #{created.id}" if created is not None else "",
            )
            self.refresh()
            return Outcome.success(created)

    def remove(self, player_id: int) -> Outcome[bool]:
        with self._action_lock:
            try:
                remove_player(self.session, self.base_url, player_id, timeout=self._timeout)
            except PuppyBowlError as e:
                logger.error("Whoops, trouble removing player #%s from the roster! %s", player_id, e)
                return Outcome.failure(e)

            with self._state_lock:
                cleared = self.store.clear_selection_if(player_id)
            if cleared:
                logger.info("Removed the selected player #%s; selection cleared", player_id)
            else:
                logger.info("Removed player #%s", player_id)
            self.refresh()
            return Outcome.success(True)

    def snapshot(self) -> RosterSnapshot:
        with self._state_lock:
            return self.store.snapshot()
