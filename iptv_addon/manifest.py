"""
Addon manifest served at /manifest.json.
"""
from iptv_addon.config import Settings
from iptv_addon.constants import ALL_BUCKET, CATALOG_BUCKETS, CONTENT_TYPE, ID_PREFIX, LANGUAGE_MAP

ADDON_ID = "org.iptv"
ADDON_DESCRIPTION = "Watch live TV categorized by genre and language!"


def _catalog(bucket: str) -> dict:
    catalog_id = bucket.capitalize()
    return {
        "type": CONTENT_TYPE,
        "id": catalog_id,
        "name": "All Channels" if bucket == ALL_BUCKET else catalog_id,
        "extra": [
            {"name": "skip"},
            {"name": "limit"},
            {"name": "genre", "options": list(LANGUAGE_MAP)},
        ],
    }


def build_manifest(settings: Settings) -> dict:
    """Manifest advertising one catalog per bucket."""
    return {
        "id": ADDON_ID,
        "name": settings.app_name,
        "version": settings.app_version,
        "description": ADDON_DESCRIPTION,
        "resources": ["catalog", "meta", "stream"],
        "types": [CONTENT_TYPE],
        "catalogs": [_catalog(bucket) for bucket in CATALOG_BUCKETS],
        "idPrefixes": [ID_PREFIX],
    }
