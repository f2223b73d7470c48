"""Result types for the two failure domains: the service call and JSON decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol

from gemini_structured._types import GenerationRequest, GenerationResult


class ContentGenerator(Protocol):
    def generate_content(self, request: GenerationRequest) -> GenerationResult: ...


@dataclass(frozen=True, slots=True)
class ServiceCallResult:
    """Outcome of one generate_content call: a result or the error it raised."""

    result: GenerationResult | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Outcome of decoding response text as JSON."""

    value: Any = None
    error: json.JSONDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def call_service(client: ContentGenerator, request: GenerationRequest) -> ServiceCallResult:
    """Invoke the client, capturing any failure instead of raising it."""
    try:
        return ServiceCallResult(result=client.generate_content(request))
    except Exception as exc:
        return ServiceCallResult(error=exc)


def decode_payload(text: str) -> DecodeResult:
    try:
        return DecodeResult(value=json.loads(text))
    except json.JSONDecodeError as exc:
        return DecodeResult(error=exc)
