# tasktrack/main.py
from dotenv import load_dotenv

# Load .env before any module reads os.environ / Settings.
load_dotenv()

import logging  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from tasktrack.core.config import settings  # noqa: E402
from tasktrack.core.errors import InvalidCredentials, TaskTrackError  # noqa: E402
from tasktrack.core.logging_config import setup_logging  # noqa: E402
from tasktrack.db import base as _models  # noqa: E402,F401
from tasktrack.db.session import session_scope  # noqa: E402
from tasktrack.routers import auth, health, task, user  # noqa: E402
from tasktrack.services.bootstrap_admin import ensure_bootstrap_admin  # noqa: E402

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Tables come from alembic; this only seeds the first admin when configured.
    with session_scope() as db:
        ensure_bootstrap_admin(db)
    yield


app = FastAPI(
    title="TaskTrack Backend",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskTrackError)
async def tasktrack_error_handler(request: Request, exc: TaskTrackError):
    headers = None
    if isinstance(exc, InvalidCredentials):
        headers = {"WWW-Authenticate": "Bearer"}
    logger.info("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.kind)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


app.include_router(health.router)
app.include_router(auth.auth_router)
app.include_router(user.user_router)
app.include_router(task.router)
