# secrets_portal/main.py

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from secrets_portal.api.routes_pages import router as pages_router
from secrets_portal.api.v1.api import api_router
from secrets_portal.core.config import settings
from secrets_portal.core.logging_config import configure_logging
from secrets_portal.db.init_db import init_db

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_application() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- STATIC FILES ----------
    # Stylesheet used by the templates
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # ---------- ROUTERS ----------
    app.include_router(pages_router, tags=["pages"])
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
