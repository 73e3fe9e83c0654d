"""
Catalog, meta and stream lookups served from the derived cache.

Handlers only read the cache. A miss of any kind (wrong type, unknown id,
cold cache, page past the end) is answered with the empty response shape.
"""
import logging
from typing import Any, Optional

from iptv_addon.constants import (
    ALL_BUCKET,
    CATALOG_INDEX_KEY,
    CONTENT_TYPE,
    DEFAULT_LANGUAGE,
    DEFAULT_LIMIT,
    DEFAULT_SKIP,
    ID_PREFIX,
    LANGUAGE_MAP,
    STREAMS_KEY,
)
from iptv_addon.models.addon import CatalogResponse, MetaResponse, StreamLink, StreamResponse
from iptv_addon.models.channel import CatalogIndex, StreamDescriptor
from iptv_addon.services.cache import CacheService
from iptv_addon.services.data_sync import DataSyncService

logger = logging.getLogger(__name__)


def resolve_bucket(catalog_id: str) -> str:
    """Map a manifest catalog id to its bucket name."""
    return ALL_BUCKET if catalog_id == "All" else catalog_id.lower()


def resolve_language(genre: Optional[str]) -> str:
    """Map the genre option (a language label) to a language code."""
    return LANGUAGE_MAP.get(genre or "", DEFAULT_LANGUAGE)


def parse_count(value: Any, default: int) -> int:
    """Read a non-negative integer extra, falling back to ``default``."""
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 0 else default


class AddonService:
    """Read-only query handlers over the catalog cache."""

    def __init__(self, cache: CacheService, sync_service: DataSyncService):
        self.cache = cache
        self.sync_service = sync_service

    def _index(self) -> CatalogIndex:
        return self.cache.get(CATALOG_INDEX_KEY) or {}

    async def catalog(
        self,
        type_: str,
        catalog_id: str,
        genre: Optional[str] = None,
        skip: Any = None,
        limit: Any = None,
    ) -> CatalogResponse:
        """Page of channels for one bucket and language."""
        if type_ != CONTENT_TYPE:
            return CatalogResponse()

        bucket = self._index().get(resolve_bucket(catalog_id))
        if not bucket:
            return CatalogResponse()

        channels = bucket.get(resolve_language(genre), [])
        start = parse_count(skip, DEFAULT_SKIP)
        size = parse_count(limit, DEFAULT_LIMIT)
        return CatalogResponse(metas=channels[start:start + size])

    async def meta(self, type_: str, meta_id: str) -> MetaResponse:
        """First catalog entry across all languages with a matching id."""
        if type_ != CONTENT_TYPE:
            return MetaResponse()

        for channels in self._index().get(ALL_BUCKET, {}).values():
            for summary in channels:
                if summary.id == meta_id:
                    return MetaResponse(meta=summary)
        return MetaResponse()

    async def stream(self, type_: str, stream_id: str) -> StreamResponse:
        """Playable stream for a catalog entry."""
        if type_ != CONTENT_TYPE:
            return StreamResponse()

        channel_id = stream_id.removeprefix(ID_PREFIX)
        streams: Optional[list[StreamDescriptor]] = self.cache.get(STREAMS_KEY)
        if streams is None:
            logger.debug(f"Stream list not cached, fetching directly for {channel_id}")
            streams = await self.sync_service.fetch_streams()

        for stream in streams:
            if stream.channel == channel_id:
                return StreamResponse(streams=[StreamLink(url=stream.url)])
        return StreamResponse()
