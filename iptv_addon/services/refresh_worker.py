"""
Background Refresh Worker

Rebuilds the catalog index from a fresh iptv-org fetch once at startup and
then on a fixed interval for the lifetime of the process.

Each tick launches its cycle as an independent task and there is no
single-flight guard: a cycle slower than the interval overlaps the next one.
Both cycles end with a single cache assignment, so the later finisher wins.
"""

import asyncio
import logging
import time
from datetime import datetime
from typing import Optional

from iptv_addon.constants import ALL_BUCKET, CATALOG_INDEX_KEY, STREAMS_KEY
from iptv_addon.services.cache import CacheService
from iptv_addon.services.catalog_builder import build_index
from iptv_addon.services.data_sync import DataSyncService

logger = logging.getLogger(__name__)


class RefreshWorker:
    """Timer-driven writer of the catalog cache."""

    def __init__(
        self,
        cache: CacheService,
        sync_service: DataSyncService,
        interval_seconds: float,
        cache_streams: bool = True,
    ):
        self.cache = cache
        self.sync_service = sync_service
        self.interval_seconds = interval_seconds
        self.cache_streams = cache_streams
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._cycles: set[asyncio.Task] = set()
        self._stats = {
            "cycles_started": 0,
            "cycles_succeeded": 0,
            "cycles_failed": 0,
            "started_at": None,
            "last_success": None,
            "last_error": None,
            "indexed_channels": 0,
        }

    async def start(self):
        """Start the refresh timer; the first cycle runs immediately."""
        if self._running:
            logger.warning("Refresh worker already running")
            return

        self._running = True
        self._stats["started_at"] = time.time()
        self._task = asyncio.create_task(self._timer_loop())
        logger.info(f"Refresh worker started (interval {self.interval_seconds}s)")

    async def stop(self):
        """Stop the timer and any in-flight cycle (application shutdown only)."""
        self._running = False
        tasks = [t for t in (self._task, *self._cycles) if t is not None]
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._cycles.clear()
        logger.info("Refresh worker stopped")

    def get_stats(self) -> dict:
        """Get worker statistics."""
        return {
            **self._stats,
            "running": self._running,
            "in_flight": len(self._cycles),
            "uptime": time.time() - self._stats["started_at"] if self._stats["started_at"] else 0,
        }

    async def _timer_loop(self):
        while self._running:
            self._launch_cycle()
            await asyncio.sleep(self.interval_seconds)

    def _launch_cycle(self):
        task = asyncio.create_task(self.refresh_once())
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)

    async def refresh_once(self) -> bool:
        """Fetch, build and store one index. Returns True if a new index was stored.

        Any failure leaves the previously cached index untouched.
        """
        self._stats["cycles_started"] += 1
        try:
            channels, streams = await asyncio.gather(
                self.sync_service.fetch_channels(),
                self.sync_service.fetch_streams(),
            )
            index = build_index(channels, streams)
        except Exception as e:
            self._stats["cycles_failed"] += 1
            self._stats["last_error"] = str(e)
            logger.exception(f"Catalog refresh failed, keeping previous index: {e}")
            return False

        self.cache.set(CATALOG_INDEX_KEY, index)
        # An empty list means the stream fetch failed; leave lookups to the direct fetch
        if self.cache_streams and streams:
            self.cache.set(STREAMS_KEY, streams)

        indexed = sum(len(summaries) for summaries in index[ALL_BUCKET].values())
        self._stats["cycles_succeeded"] += 1
        self._stats["last_success"] = datetime.now().isoformat()
        self._stats["indexed_channels"] = indexed
        logger.info(
            f"Catalog refreshed: {len(channels)} channels, {len(streams)} streams, "
            f"{indexed} catalog entries"
        )
        return True
