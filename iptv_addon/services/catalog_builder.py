"""
Catalog index builder.

Joins the stream directory onto the channel directory and groups the
playable channels by catalog bucket and language. Pure: no I/O, no cache.
"""
from typing import Iterable

from iptv_addon.constants import (
    ALL_BUCKET,
    ALLOWED_LANGUAGES,
    CATALOG_BUCKETS,
    ID_PREFIX,
    PLACEHOLDER_POSTER,
)
from iptv_addon.models.channel import (
    CatalogIndex,
    ChannelDescriptor,
    ChannelSummary,
    StreamDescriptor,
)

GENRE_BUCKETS = frozenset(CATALOG_BUCKETS) - {ALL_BUCKET}


def empty_index() -> CatalogIndex:
    """Six buckets by three languages, all empty."""
    return {bucket: {lang: [] for lang in ALLOWED_LANGUAGES} for bucket in CATALOG_BUCKETS}


def summarize_channel(channel: ChannelDescriptor) -> ChannelSummary:
    return ChannelSummary(
        id=f"{ID_PREFIX}{channel.id}",
        name=channel.name,
        poster=channel.logo or PLACEHOLDER_POSTER,
        genres=[category.lower() for category in channel.categories],
    )


def build_index(
    channels: Iterable[ChannelDescriptor],
    streams: Iterable[StreamDescriptor],
) -> CatalogIndex:
    """Build the bucket -> language -> summaries index.

    Only channels with at least one stream are indexed; when several streams
    share a channel id the last one wins the join. Order follows ``channels``
    and nothing is sorted or de-duplicated.
    """
    stream_map = {stream.channel: stream for stream in streams}
    index = empty_index()

    for channel in channels:
        if channel.id not in stream_map:
            continue

        summary = summarize_channel(channel)
        languages = [lang for lang in channel.languages if lang in ALLOWED_LANGUAGES]

        for lang in languages:
            index[ALL_BUCKET][lang].append(summary)

        for genre in summary.genres:
            if genre not in GENRE_BUCKETS:
                continue
            for lang in languages:
                index[genre][lang].append(summary)

    return index
