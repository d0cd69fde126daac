# rosterapp/services/store.py
from __future__ import annotations
from typing import Iterable, List, Optional

from rosterapp.schemas.player import Player, RosterSnapshot


class RosterStore:
    """
    Last-fetched lineup plus at most one selected player. Owned by a single
    RosterController; nothing else should mutate it.
    """

    def __init__(self, players: Optional[Iterable[Player]] = None, selected: Optional[Player] = None):
        self.players: List[Player] = list(players or [])
        self.selected: Optional[Player] = selected

    def replace_players(self, players: Iterable[Player]) -> bool:
        """
        Swap in a freshly fetched lineup. Returns True when the selection
        had to be dropped because the new lineup no longer contains it.
        """
        self.players = list(players)
        if self.selected is not None and all(p.id != self.selected.id for p in self.players):
            self.selected = None
            return True
        return False

    def select(self, player: Player) -> None:
        self.selected = player

    def clear_selection_if(self, player_id: int) -> bool:
        if self.selected is not None and self.selected.id == player_id:
            self.selected = None
            return True
        return False

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(players=self.players, selected=self.selected)
