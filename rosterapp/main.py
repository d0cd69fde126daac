# rosterapp/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from rosterapp.core.config import settings
from rosterapp.core.logging_config import get_logger, setup_logging
from rosterapp.api import routes_players, routes_roster
from rosterapp.middleware.request_log import RequestLogMiddleware
from rosterapp.services.puppybowl import build_session
from rosterapp.services.roster import RosterController

setup_logging(log_dir=settings.LOG_DIR, level=settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_at_startup()
    session = build_session(settings)
    controller = RosterController(session, settings)
    app.state.controller = controller
    logger.info("Roster bound to %s", settings.players_url)

    if settings.FETCH_ON_STARTUP:
        # failures are logged by the controller; the page then shows an empty lineup
        await run_in_threadpool(controller.refresh)

    try:
        yield
    finally:
        session.close()
        app.state.controller = None


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(RequestLogMiddleware)

# Routers
app.include_router(routes_roster.router)
app.include_router(routes_players.router)


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
