"""Shared source-side error helpers.

Sources map transport and decoding failures into APIError so the repository
only ever sees one exception family with a readable message.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from movieflow.config import API_KEY_ENV_VAR
from movieflow.errors import APIError, _walk_exception_chain


def _auth_hint(status_code: int | None, cause_message: str) -> str | None:
    """Generate a hint for auth errors where naming the env var is useful."""
    cause_lower = cause_message.lower()
    if status_code in {401, 403} or "api key" in cause_lower or "apikey" in cause_lower:
        return f"Check the API key (try setting {API_KEY_ENV_VAR} or Config.api_key)."
    return None


def _describe(exc: BaseException) -> str:
    """One-line description of *exc*, never empty for known silent errors."""
    if isinstance(exc, ValidationError):
        # The full text spans several lines and ends with a docs URL.
        errors = exc.errors()
        first = errors[0]["msg"] if errors else exc.title
        extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        return f"{first}{extra}"
    text = str(exc)
    if text.strip():
        return text
    for e in _walk_exception_chain(exc):
        if isinstance(e, httpx.TimeoutException):
            return "request timed out"
    return ""


def wrap_source_error(
    exc: BaseException,
    *,
    source: str,
    phase: str,
    message: str | None = None,
) -> APIError:
    """Map HTTP client and decoding exceptions into APIError."""
    cause = _describe(exc)
    msg = message or f"{source} {phase} failed"
    return APIError(
        f"{msg}: {cause}" if cause else msg,
        hint=_auth_hint(None, cause),
        source=source,
        phase=phase,
    )
