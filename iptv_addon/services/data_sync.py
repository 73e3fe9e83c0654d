"""
Data synchronization service.
Fetches channel and stream directories from the iptv-org API.
"""
import httpx
import logging
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from iptv_addon.config import Settings, get_settings
from iptv_addon.constants import ALLOWED_LANGUAGES
from iptv_addon.models.channel import ChannelDescriptor, StreamDescriptor

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class DataSyncService:
    """Service to fetch data from iptv-org API endpoints.

    Every fetch degrades to "no data": transport and decoding failures are
    logged and reported as ``None`` by :meth:`fetch_endpoint`, which the typed
    fetchers turn into an empty list.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = self.settings.fetch_timeout_seconds
        self._transport = transport

    async def fetch_endpoint(self, url: str) -> Optional[list]:
        """Fetch a JSON array from a single API endpoint."""
        logger.info(f"Fetching data from {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error fetching {url}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Expected a JSON array from {url}, got {type(data).__name__}")
            return None

        logger.info(f"Fetched {len(data)} items from {url}")
        return data

    async def fetch_channels(self) -> list[ChannelDescriptor]:
        """Fetch channels that declare at least one allowed language."""
        data = await self.fetch_endpoint(self.settings.channels_url)
        channels = _parse_records(data or [], ChannelDescriptor, "channels")
        return [
            channel for channel in channels
            if any(lang in ALLOWED_LANGUAGES for lang in channel.languages)
        ]

    async def fetch_streams(self) -> list[StreamDescriptor]:
        """Fetch the full stream directory."""
        data = await self.fetch_endpoint(self.settings.streams_url)
        return _parse_records(data or [], StreamDescriptor, "streams")


def _parse_records(items: list, model: type[ModelT], label: str) -> list[ModelT]:
    records = []
    skipped = 0
    for item in items:
        try:
            records.append(model.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.warning(f"Skipped {skipped} malformed {label} records")
    return records
