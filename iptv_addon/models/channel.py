"""
Channel, Stream, and catalog data models.
Maps to iptv-org API schema.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from iptv_addon.constants import CONTENT_TYPE


class ChannelDescriptor(BaseModel):
    """TV Channel model matching iptv-org channels.json schema."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    logo: Optional[str] = None
    categories: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("categories", "languages", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class StreamDescriptor(BaseModel):
    """Stream URL model matching iptv-org streams.json schema."""
    model_config = ConfigDict(frozen=True)

    channel: Optional[str] = None
    url: str
    title: Optional[str] = None


class ChannelSummary(BaseModel):
    """Catalog entry derived from one channel."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str = CONTENT_TYPE
    poster: str
    genres: list[str] = Field(default_factory=list)


# bucket -> language -> summaries in source order
CatalogIndex = dict[str, dict[str, list[ChannelSummary]]]
