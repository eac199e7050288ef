"""Generic database URL to backend-specific connection string.

The client runtime does not accept ordinary database URLs.  Each backend
expects its own connection-string shape, and the shape is fully determined
by the URL scheme:

=============  ==========================================================
Scheme         Connection string
=============  ==========================================================
``db2``        ``db2://user@path[?query]``
``mssql``      ``mssql://user@path``
``mysql``      ``mysql://user@host/?schema=path`` + raw query, no separator
``oci``        ``oci://user@path``
``postgresql`` ``postgresql://user@host:path`` + ``?query`` or ``/``
``sqlite3``    ``sqlite3://user@host/path``
=============  ==========================================================

``user`` is the raw user-info (``name`` or ``name:password``), ``host``
includes the port when one is given and ``path`` is the decoded URL path
without its leading ``/``.  Any other scheme transcodes to an empty string
rather than raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from urllib.parse import unquote, urlsplit

from engine_config.errors import MalformedURLError

logger = logging.getLogger(__name__)

_BAD_PERCENT_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class Backend(str, Enum):
    """Database backends with a known connection-string format."""

    DB2 = "db2"
    MSSQL = "mssql"
    MYSQL = "mysql"
    OCI = "oci"
    POSTGRESQL = "postgresql"
    SQLITE3 = "sqlite3"

    @classmethod
    def from_scheme(cls, scheme: str) -> Backend | None:
        """Return the backend for *scheme*, or ``None`` if it is not supported."""
        try:
            return cls(scheme)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class DatabaseURL:
    """The components of a parsed generic database URL."""

    scheme: str
    user: str
    host: str
    path: str
    query: str

    @property
    def path_without_leading_slash(self) -> str:
        return self.path[1:] if self.path.startswith("/") else self.path


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_database_url(database_url: str) -> DatabaseURL:
    """Split *database_url* into its components.

    Raises
    ------
    MalformedURLError
        If the URL contains control characters or surrounding spaces, has an empty scheme before
        ``:``, contains invalid percent escapes outside the query, or has an
        invalid host or port.
    """
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in database_url):
        raise MalformedURLError(database_url, "invalid control character in URL")
    # urlsplit() strips surrounding spaces on its own; they are not part of a valid URL.
    if database_url != database_url.strip(" "):
        raise MalformedURLError(database_url, "leading or trailing space in URL")
    if database_url.startswith(":"):
        raise MalformedURLError(database_url, "missing protocol scheme")

    try:
        parts = urlsplit(database_url)
        # Accessing .port validates it.
        parts.port  # noqa: B018
    except ValueError as exc:
        raise MalformedURLError(database_url, str(exc)) from exc

    if _BAD_PERCENT_ESCAPE_RE.search(parts.netloc) or _BAD_PERCENT_ESCAPE_RE.search(parts.path):
        raise MalformedURLError(database_url, "invalid URL escape")

    user, _, host = parts.netloc.rpartition("@")
    return DatabaseURL(
        scheme=parts.scheme,
        user=user,
        host=host,
        path=unquote(parts.path),
        query=parts.query,
    )


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def _format_db2(url: DatabaseURL) -> str:
    result = f"{url.scheme}://{url.user}@{url.path_without_leading_slash}"
    if url.query:
        result = f"{result}?{url.query}"
    return result


def _format_mssql(url: DatabaseURL) -> str:
    return f"{url.scheme}://{url.user}@{url.path_without_leading_slash}"


def _format_mysql(url: DatabaseURL) -> str:
    return f"{url.scheme}://{url.user}@{url.host}/?schema={url.path_without_leading_slash}{url.query}"


def _format_oci(url: DatabaseURL) -> str:
    return f"{url.scheme}://{url.user}@{url.path_without_leading_slash}"


def _format_postgresql(url: DatabaseURL) -> str:
    result = f"{url.scheme}://{url.user}@{url.host}:{url.path_without_leading_slash}"
    if url.query:
        return f"{result}?{url.query}"
    return f"{result}/"


def _format_sqlite3(url: DatabaseURL) -> str:
    return f"{url.scheme}://{url.user}@{url.host}/{url.path_without_leading_slash}"


FORMATTERS: dict[Backend, Callable[[DatabaseURL], str]] = {
    Backend.DB2: _format_db2,
    Backend.MSSQL: _format_mssql,
    Backend.MYSQL: _format_mysql,
    Backend.OCI: _format_oci,
    Backend.POSTGRESQL: _format_postgresql,
    Backend.SQLITE3: _format_sqlite3,
}

_unformatted = set(Backend) - FORMATTERS.keys()
if _unformatted:
    raise RuntimeError(f"no connection-string formatter for backend(s): {sorted(b.value for b in _unformatted)}")


def transcode(database_url: str) -> str:
    """Convert a generic database URL into the backend's connection string.

    Parameters
    ----------
    database_url:
        A URL such as ``postgresql://user:pw@host:5432/G2?sslmode=require``.

    Returns
    -------
    str
        The backend-specific connection string, or ``""`` when the scheme
        is not a known :class:`Backend`.

    Raises
    ------
    MalformedURLError
        If *database_url* cannot be parsed.
    """
    url = parse_database_url(database_url)
    backend = Backend.from_scheme(url.scheme)
    if backend is None:
        logger.warning("Unsupported database URL scheme %r; connection string left empty", url.scheme)
        return ""

    logger.debug("Transcoding %s database URL", backend.value)
    return FORMATTERS[backend](url)
