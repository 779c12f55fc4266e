import logging
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from rental_manager.api.exception_handlers import register_exception_handlers
from rental_manager.api.v1.router import api_router
from rental_manager.core.config import settings
from rental_manager.core.logging import setup_logging
from rental_manager.db import create_db_engine, create_session_factory, run_migrations

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)

    engine = create_db_engine(settings.storage_backend, settings.database_url)
    if settings.storage_backend == "memory":
        # Nothing persists between runs, so the schema is built on every start
        run_migrations(engine)
    app.state.session_factory = create_session_factory(engine)
    logger.info("Storage backend %s ready", settings.storage_backend)

    yield

    engine.dispose()
    logger.info("Storage backend %s disposed", settings.storage_backend)


app = FastAPI(title="Rental Manager", lifespan=lifespan)

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
