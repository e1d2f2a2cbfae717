import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging import setup_logging
from .routers import data, tiles
from .routers.deps import get_fallback_service
from .services.fallback import FallbackDataService

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    svc = FallbackDataService()
    app.state.fallback_service = svc
    probe_task = svc.start_probe()
    log.info("%s started (env=%s)", settings.app_name, settings.app_env)
    yield
    if not probe_task.done():
        probe_task.cancel()
        with suppress(asyncio.CancelledError):
            await probe_task
    svc.cache.clear()


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tiles.router)
    app.include_router(data.router)

    @app.get("/")
    def root(svc: FallbackDataService = Depends(get_fallback_service)):
        return {"name": settings.app_name, "env": settings.app_env, "message": "OK", "status": svc.status()}

    return app


app = create_app()
