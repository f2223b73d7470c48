"""Driver: send the meal-plan request, then report the raw text, decoded JSON and usage."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from gemini_structured._client import GeminiClient
from gemini_structured._config import Settings
from gemini_structured._logging import setup_logging
from gemini_structured._results import (
    ContentGenerator,
    DecodeResult,
    ServiceCallResult,
    call_service,
    decode_payload,
)
from gemini_structured._types import GenerationRequest, GenerationResult
from gemini_structured.recipes import build_request

LOGGER = logging.getLogger("gemini_structured.driver")


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """What happened in one run. ``decode`` is None when the service call failed."""

    service: ServiceCallResult
    decode: DecodeResult | None = None


def report(
    result: GenerationResult,
    decoded: DecodeResult,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Write the raw text, decoded value, finish reason and token usage."""
    out = out or sys.stdout
    err = err or sys.stderr

    print("----------- Raw JSON Response -----------", file=out)
    print(result.text, file=out)

    if decoded.ok:
        print("\n----------- Parsed JSON Object -----------", file=out)
        print(json.dumps(decoded.value, indent=2, ensure_ascii=False), file=out)
    else:
        print(f"Error parsing JSON: {decoded.error}", file=err)

    print(f"\nFinish Reason: {result.finish_label}", file=out)
    print(f"Input Tokens Billed: {result.usage.input_tokens}", file=out)
    print(f"Output Tokens Billed: {result.usage.output_tokens}", file=out)
    print(f"Total Tokens Billed: {result.usage.total_tokens}", file=out)


def run(
    client: ContentGenerator,
    request: GenerationRequest,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> RunOutcome:
    """Call the service once, decode the reply, and report both.

    A service failure ends the run without decoding; a decode failure is
    reported and the finish reason and usage are still written.
    """
    service = call_service(client, request)
    result = service.result
    if service.error is not None or result is None:
        LOGGER.debug("service call failed", exc_info=service.error)
        print(f"Error calling Gemini API: {service.error}", file=err or sys.stderr)
        return RunOutcome(service=service)

    decoded = decode_payload(result.text)
    report(result, decoded, out=out, err=err)
    return RunOutcome(service=service, decode=decoded)


def main() -> None:
    """Entry point: read settings, build the meal-plan request, run it once."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    LOGGER.info("Using model %s", settings.model)
    client = GeminiClient(settings.model, settings.api_key, timeout=settings.timeout)
    run(client, build_request())
