"""
Pytest configuration and fixtures for IPTV addon tests.
"""
import pytest

from iptv_addon.models.channel import ChannelDescriptor, StreamDescriptor


class FakeSyncService:
    """Stands in for DataSyncService without touching the network."""

    def __init__(self, channels=None, streams=None):
        self.channels = channels or []
        self.streams = streams or []
        self.channel_calls = 0
        self.stream_calls = 0

    async def fetch_channels(self):
        self.channel_calls += 1
        return list(self.channels)

    async def fetch_streams(self):
        self.stream_calls += 1
        return list(self.streams)


@pytest.fixture
def sample_channels_json():
    """Raw channels.json records as served by iptv-org."""
    return [
        {
            "id": "CNN.us",
            "name": "CNN",
            "logo": "https://example.com/cnn.png",
            "categories": ["News"],
            "languages": ["eng"],
        },
        {
            "id": "StarSports1.in",
            "name": "Star Sports 1",
            "logo": None,
            "categories": ["Sports", "Entertainment"],
            "languages": ["eng", "hin"],
        },
        {
            "id": "SomoyTV.bd",
            "name": "Somoy TV",
            "categories": ["news"],
            "languages": ["ben"],
        },
        {
            "id": "Cartoon.in",
            "name": "Cartoon Hindi",
            "logo": "https://example.com/cartoon.png",
            "categories": ["Kids", "Animation"],
            "languages": ["hin", "tam"],
        },
        {
            "id": "NoStream.us",
            "name": "No Stream",
            "categories": ["News"],
            "languages": ["eng"],
        },
        {
            "id": "TF1.fr",
            "name": "TF1",
            "categories": ["General"],
            "languages": ["fra"],
        },
    ]


@pytest.fixture
def sample_streams_json():
    """Raw streams.json records as served by iptv-org."""
    return [
        {"channel": "CNN.us", "url": "http://example.com/cnn.m3u8", "title": "CNN"},
        {"channel": "StarSports1.in", "url": "http://example.com/star-old.m3u8"},
        {"channel": "StarSports1.in", "url": "http://example.com/star.m3u8"},
        {"channel": "SomoyTV.bd", "url": "http://example.com/somoy.m3u8"},
        {"channel": "Cartoon.in", "url": "http://example.com/cartoon.m3u8"},
        {"channel": "TF1.fr", "url": "http://example.com/tf1.m3u8"},
        {"channel": None, "url": "http://example.com/orphan.m3u8"},
    ]


@pytest.fixture
def sample_channels(sample_channels_json):
    return [ChannelDescriptor.model_validate(item) for item in sample_channels_json]


@pytest.fixture
def sample_streams(sample_streams_json):
    return [StreamDescriptor.model_validate(item) for item in sample_streams_json]


@pytest.fixture
def fake_sync(sample_channels, sample_streams):
    return FakeSyncService(sample_channels, sample_streams)


@pytest.fixture
def make_sync():
    """Factory for sync services with custom data."""
    return FakeSyncService


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
