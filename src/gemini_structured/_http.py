"""Thin HTTP helper around ``requests``."""

from __future__ import annotations

import contextlib
from typing import Any

import requests

from gemini_structured._exceptions import APIError, AuthenticationError, RateLimitError


def _parse_retry_after(raw_retry: str | None) -> float | None:
    retry_after: float | None = None
    if raw_retry is not None:
        with contextlib.suppress(ValueError, TypeError):
            retry_after = float(raw_retry)
    return retry_after


def error_for_status(
    status_code: int, body: dict[str, Any] | str, headers: Any
) -> APIError:
    """Map an HTTP error status to the matching exception."""
    if status_code == 429:
        return RateLimitError(status_code, body, _parse_retry_after(headers.get("Retry-After")))
    if status_code in (401, 403):
        return AuthenticationError(status_code, body)
    return APIError(status_code, body)


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except Exception:
            body = r.text
        raise error_for_status(r.status_code, body, r.headers)


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float = 60,
) -> dict[str, Any]:
    """POST JSON and return the parsed response, raising on HTTP errors.

    A single attempt is made; transport errors from ``requests`` propagate.
    """
    r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    _raise_for_status(r)
    return r.json()
