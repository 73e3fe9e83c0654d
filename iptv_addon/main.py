"""
IPTV Addon - FastAPI Backend

Live TV catalogs built from iptv-org data, grouped by genre and language.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from iptv_addon.config import Settings, get_settings
from iptv_addon.dependencies import get_cache_service, get_refresh_worker
from iptv_addon.manifest import build_manifest
from iptv_addon.routers import addon
from iptv_addon.services.addon_service import AddonService
from iptv_addon.services.cache import CacheService
from iptv_addon.services.data_sync import DataSyncService
from iptv_addon.services.refresh_worker import RefreshWorker

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    logger.info("Starting IPTV addon...")

    # Readiness does not wait for the first refresh; handlers tolerate a cold cache
    await app.state.refresh_worker.start()

    yield

    logger.info("Shutting down IPTV addon...")
    await app.state.refresh_worker.stop()


def create_app(
    settings: Optional[Settings] = None,
    sync_service: Optional[DataSyncService] = None,
) -> FastAPI:
    """Build the addon application and wire its services."""
    settings = settings or get_settings()
    sync_service = sync_service or DataSyncService(settings)
    cache = CacheService(ttl_seconds=settings.refresh_interval_seconds)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Live TV catalogs by genre and language",
        lifespan=lifespan
    )

    app.state.cache = cache
    app.state.manifest = build_manifest(settings)
    app.state.addon_service = AddonService(cache, sync_service)
    app.state.refresh_worker = RefreshWorker(
        cache,
        sync_service,
        interval_seconds=settings.refresh_interval_seconds,
        cache_streams=settings.cache_streams_on_refresh,
    )

    # Rate limiter
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[f"{settings.rate_limit_per_minute}/minute"]
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(addon.router)

    @app.get("/api/health")
    async def health_check(
        cache: CacheService = Depends(get_cache_service),
        worker: RefreshWorker = Depends(get_refresh_worker),
    ):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "cache_entries": len(cache),
            "refresh": worker.get_stats(),
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "iptv_addon.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
