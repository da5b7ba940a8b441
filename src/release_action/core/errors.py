"""Classification of failures raised by the release API client."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


NOT_FOUND_STATUS = 404


def _field(source: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute, or None if absent."""
    if isinstance(source, Mapping):
        return source.get(key)
    try:
        return getattr(source, key, None)
    except Exception:  # broken __getattr__, treat as absent
        return None


def _as_status(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _error_entries(source: Any) -> list[Any]:
    errors = _field(source, "errors")
    if isinstance(errors, Sequence) and not isinstance(errors, (str, bytes)):
        return list(errors)
    return []


class ErrorMessage:
    """Structured view over an arbitrary failure value.

    The client may fail with a ``GitHubError``, a transport exception, a
    plain mapping or anything else. Missing or malformed fields are
    reported as None and never raise.
    """

    def __init__(self, error: Any):
        self.error = error
        self.status: int | None = _as_status(_field(error, "status"))
        entries = _error_entries(error)
        code = _field(entries[0], "code") if entries else None
        self.code: str | None = code if isinstance(code, str) else None

    def has_error_with_code(self, code: str) -> bool:
        """Check whether any entry of the ``errors`` list carries ``code``."""
        return any(_field(entry, "code") == code for entry in _error_entries(self.error))

    def __str__(self) -> str:
        message = _field(self.error, "message")
        text = message if isinstance(message, str) and message else str(self.error)
        if self.code:
            text = f"{text} ({self.code})"
        if self.status is not None:
            text = f"HTTP {self.status}: {text}"
        return text


@dataclass(frozen=True)
class NotFound:
    """The failure means the looked-up resource does not exist."""


@dataclass(frozen=True)
class OtherFailure:
    """Any other failure; carries the original value untouched."""

    error: Any


def classify_failure(error: Any) -> NotFound | OtherFailure:
    """Classify a failure as a 404 miss or something fatal."""
    if ErrorMessage(error).status == NOT_FOUND_STATUS:
        return NotFound()
    return OtherFailure(error)
