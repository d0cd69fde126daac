from fastapi import HTTPException, Request, status

from rosterapp.services.roster import RosterController


def get_controller(request: Request) -> RosterController:
    """
    The app-wide RosterController created during startup. Raises 503 if the
    lifespan hasn't run (e.g. the app was mounted without startup events).
    """
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Roster is not initialized yet")
    return controller
