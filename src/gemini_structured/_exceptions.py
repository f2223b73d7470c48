"""Exceptions for Gemini API errors."""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Raised when the Gemini API returns an HTTP error."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {_error_message(body)}")


class RateLimitError(APIError):
    """Raised on HTTP 429 — includes optional ``retry_after`` from the server."""

    def __init__(
        self,
        status_code: int,
        body: dict[str, Any] | str,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(status_code, body)
        self.retry_after = retry_after


class AuthenticationError(APIError):
    """Raised on HTTP 401/403, or before sending when no API key is configured."""


class BlockedPromptError(Exception):
    """Raised when the service returns no candidates because the prompt was blocked."""

    def __init__(self, block_reason: str, raw: dict[str, Any]) -> None:
        self.block_reason = block_reason
        self.raw = raw
        super().__init__(f"Prompt was blocked: {block_reason or 'no candidates returned'}")


def _error_message(body: dict[str, Any] | str) -> str:
    # Google APIs wrap errors as {"error": {"code", "message", "status"}}
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return str(body)
