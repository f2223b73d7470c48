"""Request and response types for Gemini structured generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

# --- Enumerated option sets (values are the service's wire names) ---


class SchemaType(StrEnum):
    STRING = "STRING"
    NUMBER = "NUMBER"
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"


class HarmCategory(StrEnum):
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    HARASSMENT = "HARM_CATEGORY_HARASSMENT"


class HarmBlockThreshold(StrEnum):
    UNSPECIFIED = "HARM_BLOCK_THRESHOLD_UNSPECIFIED"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"


class FinishReason(StrEnum):
    """Why the service stopped generating."""

    UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    OTHER = "OTHER"

    @classmethod
    def from_wire(cls, value: str | None) -> FinishReason:
        if not value:
            return cls.UNSPECIFIED
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


# --- Response schema ---


@dataclass(frozen=True, slots=True)
class Schema:
    """A node of the response schema tree.

    The tree is passed to the service as-is; nothing on the client side
    validates responses against it.
    """

    type: SchemaType
    description: str = ""
    enum: tuple[str, ...] = ()
    items: Schema | None = None
    properties: Mapping[str, Schema] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    nullable: bool = False

    def __post_init__(self) -> None:
        # properties is stored read-only
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        if self.enum and self.type is not SchemaType.STRING:
            raise ValueError(f"enum is only allowed on STRING nodes, not {self.type}")
        if self.items is not None and self.type is not SchemaType.ARRAY:
            raise ValueError(f"items is only allowed on ARRAY nodes, not {self.type}")
        if self.properties and self.type is not SchemaType.OBJECT:
            raise ValueError(f"properties are only allowed on OBJECT nodes, not {self.type}")
        missing = [name for name in self.required if name not in self.properties]
        if missing:
            raise ValueError(f"required names missing from properties: {missing}")

    def __hash__(self) -> int:
        return hash(
            (
                self.type,
                self.description,
                self.enum,
                self.items,
                tuple(self.properties.items()),
                self.required,
                self.nullable,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase wire form."""
        out: dict[str, Any] = {"type": self.type.value}
        if self.description:
            out["description"] = self.description
        if self.nullable:
            out["nullable"] = True
        if self.enum:
            out["enum"] = list(self.enum)
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.properties:
            out["properties"] = {name: node.to_dict() for name, node in self.properties.items()}
        if self.required:
            out["required"] = list(self.required)
        return out


# --- Request ---


@dataclass(frozen=True, slots=True)
class SafetySetting:
    """Block threshold for one harm category."""

    category: HarmCategory
    threshold: HarmBlockThreshold


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Sampling and response-format options."""

    response_mime_type: str = "application/json"
    response_schema: Schema | None = None
    temperature: float | None = None
    max_output_tokens: int | None = None


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """A single structured generation request."""

    prompt: str
    system_instruction: str | None = None
    generation_config: GenerationConfig = field(default_factory=GenerationConfig)
    safety_settings: tuple[SafetySetting, ...] = ()

    def __post_init__(self) -> None:
        categories = [s.category for s in self.safety_settings]
        if len(categories) != len(set(categories)):
            raise ValueError("safety_settings must not repeat a harm category")


# --- Response ---


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """What the service returned for one request."""

    text: str = ""
    finish_reason: FinishReason = FinishReason.UNSPECIFIED
    usage: Usage = field(default_factory=Usage)
    raw: dict[str, object] = field(default_factory=dict)
    finish_tag: str = ""

    @property
    def finish_label(self) -> str:
        """The service's own finish tag, falling back to the enum value."""
        return self.finish_tag or self.finish_reason.value
