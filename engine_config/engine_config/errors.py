"""Exception hierarchy for engine configuration resolution and parsing.

Every error raised by the library derives from
:class:`EngineConfigurationError` so that callers can catch the whole family
with a single ``except`` clause.  The concrete classes also subclass the
closest built-in exception (``ValueError``, ``KeyError``) so that generic
handlers keep working.
"""

from __future__ import annotations


class EngineConfigurationError(Exception):
    """Base class for all engine configuration errors."""


class MalformedURLError(EngineConfigurationError, ValueError):
    """Raised when a database URL cannot be parsed as a URI."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"malformed database URL {url!r}: {reason}")


class MissingEnvironmentVariableError(EngineConfigurationError, KeyError):
    """Raised when a required environment variable is not set and no override was given."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(variable)

    def __str__(self) -> str:
        return f"environment variable not set: {self.variable}"


class InvalidJSONError(EngineConfigurationError, ValueError):
    """Raised when a configuration document is not syntactically valid JSON."""

    def __init__(self, text: str, detail: str = "") -> None:
        self.text = text
        self.detail = detail
        message = f"incorrect JSON syntax in {text}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SchemaError(EngineConfigurationError):
    """Raised when a configuration document does not have the expected structure.

    Covers missing keys and values of the wrong type, e.g. a ``BACKEND``
    entry that names a top-level key which does not exist.
    """
