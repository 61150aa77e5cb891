from contextlib import asynccontextmanager
from fastapi import FastAPI

from signoff.backend.app.api.v1.router import api_router
from signoff.backend.app.core.config import settings
from signoff.backend.app.core.deps import get_cleanup_scheduler
from signoff.backend.app.core.logging_config import configure_logging
from signoff.backend.app.exception_handlers import register_exception_handlers
from signoff.backend.app.infrastructure.db.init_db import init_db


def create_app():
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db()
        yield
        # let in-flight object deletions finish before the loop goes away
        await get_cleanup_scheduler().drain()

    app = FastAPI(title="Signoff", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app


app = create_app()
