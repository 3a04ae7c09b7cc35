"""FitNest Server - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitnest.config import settings
from fitnest.database import init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed health tips on startup."""
    init_db()
    logger.info("%s %s started", settings.server_name, settings.version)
    yield


app = FastAPI(
    title="FitNest",
    description="Family fitness tracking: activities, goals, schedules and family progress",
    version=settings.version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Register API routers ---
from fitnest.api.users import router as users_router  # noqa: E402
from fitnest.api.families import router as families_router  # noqa: E402
from fitnest.api.activities import router as activities_router  # noqa: E402
from fitnest.api.goals import router as goals_router  # noqa: E402
from fitnest.api.schedule import router as schedule_router  # noqa: E402
from fitnest.api.health_tips import router as health_tips_router  # noqa: E402
from fitnest.api.progress import router as progress_router  # noqa: E402
from fitnest.api.system import router as system_router  # noqa: E402

API_PREFIX = "/api"

app.include_router(users_router, prefix=API_PREFIX)
app.include_router(families_router, prefix=API_PREFIX)
app.include_router(activities_router, prefix=API_PREFIX)
app.include_router(goals_router, prefix=API_PREFIX)
app.include_router(schedule_router, prefix=API_PREFIX)
app.include_router(health_tips_router, prefix=API_PREFIX)
app.include_router(progress_router, prefix=API_PREFIX)
app.include_router(system_router, prefix=API_PREFIX)


def run() -> None:
    import uvicorn

    uvicorn.run("fitnest.main:app", host=settings.host, port=settings.port)
