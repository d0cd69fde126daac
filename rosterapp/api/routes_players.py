from fastapi import APIRouter, Depends

from rosterapp.deps import get_controller
from rosterapp.schemas.player import RosterSnapshot
from rosterapp.services.roster import RosterController

router = APIRouter(prefix="/api", tags=["players"])


@router.get("/players", response_model=RosterSnapshot)
def roster_snapshot(controller: RosterController = Depends(get_controller)):
    """
    The cached lineup and current selection as JSON, using the upstream
    field names (imageUrl, teamName, ...).
    """
    return controller.snapshot()
