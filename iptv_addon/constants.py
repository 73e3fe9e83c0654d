"""
Fixed catalog tables.
These are build-time constants, not runtime settings.
"""

# Languages the catalog is built for, in bucket order
ALLOWED_LANGUAGES = ("eng", "ben", "hin")

# Catalog buckets; everything except "all" is matched against channel categories
CATALOG_BUCKETS = ("all", "entertainment", "news", "sports", "kids", "movies")
ALL_BUCKET = "all"

# Genre option shown to the client -> language code
LANGUAGE_MAP = {
    "English": "eng",
    "Bangla": "ben",
    "Hindi": "hin",
}
DEFAULT_LANGUAGE = "eng"

ID_PREFIX = "iptv-"
CONTENT_TYPE = "tv"
PLACEHOLDER_POSTER = "generated-icon.png"

DEFAULT_SKIP = 0
DEFAULT_LIMIT = 15

# Cache keys
CATALOG_INDEX_KEY = "catalogByGenreAndLanguage"
STREAMS_KEY = "streams"
