# rosterapp/views/roster.py
from __future__ import annotations
from typing import List, Optional

from rosterapp.schemas.player import Player, RosterSnapshot
from rosterapp.views.nodes import Element, el, render_html

PLACEHOLDER_TEXT = "Choose your character!"
EMPTY_LINEUP_TEXT = "No players in the lineup yet."
UNASSIGNED_TEAM = "Unassigned"

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 2rem; }
#main > main { display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; }
ul.lineup { list-style: none; padding: 0; }
ul.lineup li { padding: .25rem 0; }
li.empty-state { color: #666; font-style: italic; }
section.player img { max-width: 240px; border-radius: 8px; }
#new-player-form label { display: block; margin: .5rem 0; }
"""


# ---------------- lineup ----------------

def player_list_item(player: Player) -> Element:
    return el(
        "li",
        el("a", player.name, href=f"/players/{player.id}#selected"),
        class_="player",
        data_player_id=player.id,
    )


def player_list(players: List[Player]) -> Element:
    """
    Every player gets one entry in server order. An empty lineup still
    renders the list, holding a single empty-state entry.
    """
    if not players:
        return el("ul", el("li", EMPTY_LINEUP_TEXT, class_="empty-state"), class_="lineup")
    return el("ul", [player_list_item(p) for p in players], class_="lineup")


# ---------------- details ----------------

def render_selected(selected: Optional[Player]) -> Element:
    if selected is None:
        return el("p", PLACEHOLDER_TEXT)

    return el(
        "section",
        el("h3", f"{selected.name} #{selected.id}"),
        el("figure", el("img", alt=selected.name, src=selected.image_url)),
        el("p", selected.breed, class_="breed"),
        el("p", selected.status, class_="status"),
        el("p", selected.id, class_="player-id"),
        el("p", selected.team_name or UNASSIGNED_TEAM, class_="team"),
        el(
            "form",
            el("button", "Remove player", type="submit"),
            method="post",
            action=f"/players/{selected.id}/remove",
            class_="remove-player",
        ),
        class_="player",
    )


# ---------------- invite form ----------------

_FORM_FIELDS = (
    ("breed", "Breed"),
    ("name", "Name"),
    ("description", "Description"),
    ("imageUrl", "Profile Picture"),
)


def render_form() -> Element:
    labels = [
        el("label", f"{label} ", el("input", name=field, required=True))
        for field, label in _FORM_FIELDS
    ]
    return el(
        "form",
        labels,
        el("button", "Invite New Player", type="submit"),
        id="new-player-form",
        method="post",
        action="/players",
    )


# ---------------- whole page ----------------

def render_all(snapshot: RosterSnapshot) -> Element:
    """
    Build the full #main tree from scratch. Each call returns a new tree, so
    re-rendering replaces the previous content instead of appending to it.
    """
    return el(
        "div",
        el("h1", "Puppy Bowl"),
        el(
            "main",
            el(
                "section",
                el("h2", "Lineup"),
                player_list(snapshot.players),
                el("h3", "Invite a new Player"),
                render_form(),
                class_="lineup-section",
            ),
            el(
                "section",
                el("h2", "Player Details"),
                render_selected(snapshot.selected),
                id="selected",
            ),
        ),
        id="main",
    )


def render_page(body: Element, title: str = "Puppy Bowl") -> str:
    doc = el(
        "html",
        el(
            "head",
            el("meta", charset="utf-8"),
            el("meta", name="viewport", content="width=device-width, initial-scale=1"),
            el("title", title),
            el("style", _STYLE),
        ),
        el("body", body),
        lang="en",
    )
    return "<!DOCTYPE html>\n" + render_html(doc)
