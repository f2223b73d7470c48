"""Structured JSON generation against the Gemini generateContent API."""

from gemini_structured._client import GeminiClient, build_payload, parse_response
from gemini_structured._config import Settings
from gemini_structured._driver import RunOutcome, main, report, run
from gemini_structured._exceptions import (
    APIError,
    AuthenticationError,
    BlockedPromptError,
    RateLimitError,
)
from gemini_structured._logging import setup_logging
from gemini_structured._results import DecodeResult, ServiceCallResult, call_service, decode_payload
from gemini_structured._types import (
    FinishReason,
    GenerationConfig,
    GenerationRequest,
    GenerationResult,
    HarmBlockThreshold,
    HarmCategory,
    SafetySetting,
    Schema,
    SchemaType,
    Usage,
)
from gemini_structured.recipes import build_request

__all__ = [
    "APIError",
    "AuthenticationError",
    "BlockedPromptError",
    "DecodeResult",
    "FinishReason",
    "GeminiClient",
    "GenerationConfig",
    "GenerationRequest",
    "GenerationResult",
    "HarmBlockThreshold",
    "HarmCategory",
    "RateLimitError",
    "RunOutcome",
    "SafetySetting",
    "Schema",
    "SchemaType",
    "ServiceCallResult",
    "Settings",
    "Usage",
    "build_payload",
    "build_request",
    "call_service",
    "decode_payload",
    "main",
    "parse_response",
    "report",
    "run",
    "setup_logging",
]
