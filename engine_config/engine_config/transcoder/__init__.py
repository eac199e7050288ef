"""Database URL transcoding."""

from engine_config.transcoder.url_transcoder import (
    FORMATTERS,
    Backend,
    DatabaseURL,
    parse_database_url,
    transcode,
)

__all__ = [
    "FORMATTERS",
    "Backend",
    "DatabaseURL",
    "parse_database_url",
    "transcode",
]
