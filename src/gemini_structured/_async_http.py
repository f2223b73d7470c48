"""Async HTTP helper using ``httpx``."""

from __future__ import annotations

from typing import Any

import httpx

from gemini_structured._http import error_for_status


def _raise_for_status_httpx(r: httpx.Response) -> None:
    if r.is_success:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except Exception:
        body = r.text
    raise error_for_status(r.status_code, body, r.headers)


async def async_post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float = 60,
) -> dict[str, Any]:
    """POST JSON asynchronously and return the parsed response."""
    async with httpx.AsyncClient() as client:
        r = await client.post(url, headers=headers, json=payload, timeout=timeout)
        _raise_for_status_httpx(r)
        return r.json()
