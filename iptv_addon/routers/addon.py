"""
Addon protocol endpoints (manifest, catalog, meta, stream).
"""
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request

from iptv_addon.dependencies import get_addon_service, get_manifest
from iptv_addon.models.addon import CatalogResponse, MetaResponse, StreamResponse
from iptv_addon.services.addon_service import AddonService

router = APIRouter(tags=["addon"])


def _catalog_extra(request: Request, extra: str = "") -> dict:
    """Merge query-string extras with the Stremio path extras (path wins)."""
    merged = dict(request.query_params)
    merged.update(parse_qsl(extra, keep_blank_values=True))
    return merged


@router.get("/manifest.json")
async def addon_manifest(manifest: dict = Depends(get_manifest)):
    """Addon manifest."""
    return manifest


@router.get("/catalog/{type_}/{catalog_id}.json")
async def catalog(
    type_: str,
    catalog_id: str,
    request: Request,
    addon: AddonService = Depends(get_addon_service),
) -> CatalogResponse:
    """
    Catalog page. Extras may be passed as query parameters:

    - **genre**: English, Bangla or Hindi (defaults to English)
    - **skip**: entries to skip (defaults to 0)
    - **limit**: page size (defaults to 15)
    """
    extra = _catalog_extra(request)
    return await addon.catalog(type_, catalog_id, extra.get("genre"), extra.get("skip"), extra.get("limit"))


@router.get("/catalog/{type_}/{catalog_id}/{extra}.json")
async def catalog_with_extra(
    type_: str,
    catalog_id: str,
    extra: str,
    request: Request,
    addon: AddonService = Depends(get_addon_service),
) -> CatalogResponse:
    """Catalog page with Stremio path extras, e.g. ``genre=Hindi&skip=15``."""
    params = _catalog_extra(request, extra)
    return await addon.catalog(type_, catalog_id, params.get("genre"), params.get("skip"), params.get("limit"))


@router.get("/meta/{type_}/{meta_id}.json")
async def meta(
    type_: str,
    meta_id: str,
    addon: AddonService = Depends(get_addon_service),
) -> MetaResponse:
    """Channel details for a catalog entry."""
    return await addon.meta(type_, meta_id)


@router.get("/stream/{type_}/{stream_id}.json")
async def stream(
    type_: str,
    stream_id: str,
    addon: AddonService = Depends(get_addon_service),
) -> StreamResponse:
    """Playable stream for a catalog entry."""
    return await addon.stream(type_, stream_id)
