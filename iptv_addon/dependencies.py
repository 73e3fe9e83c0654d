"""FastAPI dependency injection: provides services via Depends()."""
from fastapi import Request

from iptv_addon.services.addon_service import AddonService
from iptv_addon.services.cache import CacheService
from iptv_addon.services.refresh_worker import RefreshWorker


def get_cache_service(request: Request) -> CacheService:
    return request.app.state.cache


def get_addon_service(request: Request) -> AddonService:
    return request.app.state.addon_service


def get_refresh_worker(request: Request) -> RefreshWorker:
    return request.app.state.refresh_worker


def get_manifest(request: Request) -> dict:
    return request.app.state.manifest
