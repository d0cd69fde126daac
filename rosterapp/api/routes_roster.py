# rosterapp/api/routes_roster.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse

from rosterapp.deps import get_controller
from rosterapp.schemas.player import NewPlayer
from rosterapp.services.roster import RosterController
from rosterapp.views.roster import render_all, render_page

router = APIRouter(tags=["roster"])


def _page(controller: RosterController) -> HTMLResponse:
    return HTMLResponse(render_page(render_all(controller.snapshot())))


def _back_to_lineup() -> RedirectResponse:
    # post/redirect/get so a browser reload never resubmits the action
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def lineup_page(controller: RosterController = Depends(get_controller)):
    """
    Renders the lineup, the invite form and the details panel from the
    current store.
    """
    return _page(controller)


@router.get("/players/{player_id}", response_class=HTMLResponse)
def select_player(player_id: int, controller: RosterController = Depends(get_controller)):
    """
    Roster-entry click: fetch the player, then re-render everything. A failed
    fetch leaves the previous selection on screen.
    """
    controller.select(player_id)
    return _page(controller)


@router.post("/players")
def invite_player(
    name: str = Form(""),
    breed: str = Form(""),
    description: str = Form(""),
    imageUrl: str = Form(""),
    controller: RosterController = Depends(get_controller),
):
    """
    New-player form submit. Creating refreshes the lineup on success; either
    way the browser is sent back to the lineup page.
    """
    try:
        new_player = NewPlayer(name=name, breed=breed, description=description, imageUrl=imageUrl)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    controller.create(new_player)
    return _back_to_lineup()


@router.post("/players/{player_id}/remove")
def remove_player(player_id: int, controller: RosterController = Depends(get_controller)):
    """Remove click from the details card."""
    controller.remove(player_id)
    return _back_to_lineup()
