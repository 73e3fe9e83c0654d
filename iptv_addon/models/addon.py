"""
Addon protocol response models.
"""
from pydantic import BaseModel, Field
from typing import Union

from iptv_addon.models.channel import ChannelSummary


class CatalogResponse(BaseModel):
    """Page of catalog entries."""
    metas: list[ChannelSummary] = Field(default_factory=list)


class MetaResponse(BaseModel):
    """Single channel lookup; an empty object when nothing matched."""
    meta: Union[ChannelSummary, dict] = Field(default_factory=dict)


class StreamLink(BaseModel):
    """Playable stream entry."""
    url: str


class StreamResponse(BaseModel):
    """Playable streams for one channel."""
    streams: list[StreamLink] = Field(default_factory=list)
