"""Settings read from the process environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from gemini_structured.recipes import MODEL_ID

LOGGER = logging.getLogger("gemini_structured.config")

DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True, slots=True)
class Settings:
    api_key: str = ""
    model: str = MODEL_ID
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> Settings:
        """Build settings from ``GEMINI_*`` variables, loading ``.env`` first if present.

        Values already in the environment take precedence over ``.env``.
        A missing API key is not an error here; the client call reports it.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        timeout = os.environ.get("GEMINI_TIMEOUT", "")
        try:
            timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            LOGGER.warning("Ignoring non-numeric GEMINI_TIMEOUT=%r", timeout)
            timeout_value = DEFAULT_TIMEOUT
        if not timeout_value > 0:
            LOGGER.warning("Ignoring non-positive GEMINI_TIMEOUT=%r", timeout)
            timeout_value = DEFAULT_TIMEOUT
        return cls(
            api_key=os.environ.get("GEMINI_API_KEY", ""),
            model=os.environ.get("GEMINI_MODEL") or MODEL_ID,
            timeout=timeout_value,
            log_level=os.environ.get("GEMINI_LOG_LEVEL") or "WARNING",
        )
