"""Client for the Google Gemini generateContent API."""

from __future__ import annotations

import logging
from typing import Any

from gemini_structured._async_http import async_post_json
from gemini_structured._exceptions import AuthenticationError, BlockedPromptError
from gemini_structured._http import post_json
from gemini_structured._types import (
    FinishReason,
    GenerationConfig,
    GenerationRequest,
    GenerationResult,
    SafetySetting,
    Usage,
)

LOGGER = logging.getLogger("gemini_structured.client")

BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def _config_to_gemini(config: GenerationConfig) -> dict[str, Any]:
    gen_config: dict[str, Any] = {"responseMimeType": config.response_mime_type}
    if config.response_schema is not None:
        gen_config["responseSchema"] = config.response_schema.to_dict()
    if config.temperature is not None:
        gen_config["temperature"] = config.temperature
    if config.max_output_tokens is not None:
        gen_config["maxOutputTokens"] = config.max_output_tokens
    return gen_config


def _safety_to_gemini(settings: tuple[SafetySetting, ...]) -> list[dict[str, str]]:
    return [{"category": s.category.value, "threshold": s.threshold.value} for s in settings]


def build_payload(request: GenerationRequest) -> dict[str, Any]:
    """Convert a GenerationRequest to the generateContent wire payload."""
    payload: dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": request.prompt}]}],
        "generationConfig": _config_to_gemini(request.generation_config),
    }
    if request.safety_settings:
        payload["safetySettings"] = _safety_to_gemini(request.safety_settings)
    if request.system_instruction:
        payload["systemInstruction"] = {
            "role": "model",
            "parts": [{"text": request.system_instruction}],
        }
    return payload


def parse_response(raw: dict[str, Any]) -> GenerationResult:
    """Convert a generateContent response body to a GenerationResult."""
    candidates = raw.get("candidates", [])
    if not candidates:
        block_reason = raw.get("promptFeedback", {}).get("blockReason", "")
        raise BlockedPromptError(block_reason, raw)

    candidate = candidates[0]
    parts = candidate.get("content", {}).get("parts", [])
    text = "".join(part["text"] for part in parts if "text" in part)

    raw_usage = raw.get("usageMetadata", {})
    usage = Usage(
        input_tokens=raw_usage.get("promptTokenCount", 0),
        output_tokens=raw_usage.get("candidatesTokenCount", 0),
        total_tokens=raw_usage.get("totalTokenCount", 0),
    )

    return GenerationResult(
        text=text,
        finish_reason=FinishReason.from_wire(candidate.get("finishReason")),
        finish_tag=candidate.get("finishReason") or "",
        usage=usage,
        raw=raw,
    )


class GeminiClient:
    """Sends GenerationRequests to one Gemini model.

    Usage::

        from gemini_structured import GeminiClient, GenerationRequest

        client = GeminiClient("gemini-1.5-pro-latest", api_key="...")
        result = client.generate_content(GenerationRequest(prompt="Hello!"))
        print(result.text)
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        *,
        timeout: float = 60,
        base_url: str = BASE_URL,
    ) -> None:
        self._model = model
        self._api_key = api_key
        self._timeout = timeout
        self._url = f"{base_url.rstrip('/')}/{model}:generateContent"
        self._headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }

    @property
    def model(self) -> str:
        return self._model

    def _check_key(self) -> None:
        if not self._api_key:
            raise AuthenticationError(
                401, "No API key provided. Set the GEMINI_API_KEY environment variable."
            )

    def generate_content(self, request: GenerationRequest) -> GenerationResult:
        """Send one request and return the parsed result."""
        self._check_key()
        payload = build_payload(request)
        LOGGER.debug("POST %s (%d safety settings)", self._url, len(request.safety_settings))
        try:
            raw = post_json(self._url, self._headers, payload, timeout=self._timeout)
        except Exception as exc:
            LOGGER.warning("generateContent failed for %s: %s", self._model, exc)
            raise
        return parse_response(raw)

    async def agenerate_content(self, request: GenerationRequest) -> GenerationResult:
        """Async variant of :meth:`generate_content`."""
        self._check_key()
        payload = build_payload(request)
        LOGGER.debug("POST %s (async)", self._url)
        try:
            raw = await async_post_json(self._url, self._headers, payload, timeout=self._timeout)
        except Exception as exc:
            LOGGER.warning("generateContent failed for %s: %s", self._model, exc)
            raise
        return parse_response(raw)
