"""Tests for _types.py dataclasses and enums."""

import dataclasses

import pytest

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


def test_schema_leaf_to_dict() -> None:
    assert Schema(type=SchemaType.NUMBER).to_dict() == {"type": "NUMBER"}


def test_schema_enum_to_dict() -> None:
    node = Schema(type=SchemaType.STRING, enum=("a", "b"))
    assert node.to_dict() == {"type": "STRING", "enum": ["a", "b"]}


def test_schema_nested_to_dict() -> None:
    node = Schema(
        type=SchemaType.ARRAY,
        items=Schema(
            type=SchemaType.OBJECT,
            description="An item",
            properties={"name": Schema(type=SchemaType.STRING)},
            required=("name",),
        ),
    )
    assert node.to_dict() == {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "description": "An item",
            "properties": {"name": {"type": "STRING"}},
            "required": ["name"],
        },
    }


def test_schema_nullable() -> None:
    assert Schema(type=SchemaType.STRING, nullable=True).to_dict() == {
        "type": "STRING",
        "nullable": True,
    }


def test_schema_rejects_enum_on_non_string() -> None:
    with pytest.raises(ValueError, match="enum is only allowed"):
        Schema(type=SchemaType.NUMBER, enum=("1",))


def test_schema_rejects_items_on_object() -> None:
    with pytest.raises(ValueError, match="items is only allowed"):
        Schema(type=SchemaType.OBJECT, items=Schema(type=SchemaType.STRING))


def test_schema_rejects_properties_on_array() -> None:
    with pytest.raises(ValueError, match="properties are only allowed"):
        Schema(type=SchemaType.ARRAY, properties={"a": Schema(type=SchemaType.STRING)})


def test_schema_rejects_unknown_required() -> None:
    with pytest.raises(ValueError, match="required names missing"):
        Schema(
            type=SchemaType.OBJECT,
            properties={"a": Schema(type=SchemaType.STRING)},
            required=("a", "b"),
        )


def test_request_is_frozen() -> None:
    req = GenerationRequest(prompt="hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.prompt = "bye"  # type: ignore[misc]


def test_request_defaults() -> None:
    req = GenerationRequest(prompt="hi")
    assert req.system_instruction is None
    assert req.generation_config == GenerationConfig()
    assert req.generation_config.response_mime_type == "application/json"
    assert req.safety_settings == ()


def test_request_rejects_duplicate_category() -> None:
    settings = (
        SafetySetting(HarmCategory.HARASSMENT, HarmBlockThreshold.BLOCK_NONE),
        SafetySetting(HarmCategory.HARASSMENT, HarmBlockThreshold.BLOCK_ONLY_HIGH),
    )
    with pytest.raises(ValueError, match="must not repeat"):
        GenerationRequest(prompt="hi", safety_settings=settings)


@pytest.mark.parametrize(
    ("wire", "expected"),
    [
        ("STOP", FinishReason.STOP),
        ("MAX_TOKENS", FinishReason.MAX_TOKENS),
        ("SAFETY", FinishReason.SAFETY),
        ("BLOCKLIST", FinishReason.OTHER),
        ("", FinishReason.UNSPECIFIED),
        (None, FinishReason.UNSPECIFIED),
    ],
)
def test_finish_reason_from_wire(wire: str | None, expected: FinishReason) -> None:
    assert FinishReason.from_wire(wire) is expected


def test_enum_values_are_wire_names() -> None:
    assert HarmCategory.HATE_SPEECH == "HARM_CATEGORY_HATE_SPEECH"
    assert HarmBlockThreshold.BLOCK_NONE == "BLOCK_NONE"
    assert f"{FinishReason.STOP}" == "STOP"


def test_result_defaults() -> None:
    result = GenerationResult()
    assert result.text == ""
    assert result.finish_reason is FinishReason.UNSPECIFIED
    assert result.usage == Usage()
    assert result.raw == {}


def test_schema_properties_are_read_only() -> None:
    node = build_request().generation_config.response_schema
    assert node is not None and node.items is not None
    with pytest.raises(TypeError):
        node.items.properties["extra"] = Schema(type=SchemaType.STRING)  # type: ignore[index]
    fresh = build_request().generation_config.response_schema
    assert fresh is not None and fresh.items is not None
    assert "extra" not in fresh.items.properties


def test_schema_copies_caller_mapping() -> None:
    props = {"name": Schema(type=SchemaType.STRING)}
    node = Schema(type=SchemaType.OBJECT, properties=props)
    props["other"] = Schema(type=SchemaType.NUMBER)
    assert list(node.properties) == ["name"]


def test_request_is_hashable() -> None:
    assert hash(build_request()) == hash(build_request())
    assert build_request() == build_request()
    assert len({build_request(), build_request()}) == 1


def test_result_finish_label_prefers_service_tag() -> None:
    result = GenerationResult(finish_reason=FinishReason.OTHER, finish_tag="PROHIBITED_CONTENT")
    assert result.finish_label == "PROHIBITED_CONTENT"
    assert GenerationResult(finish_reason=FinishReason.STOP).finish_label == "STOP"
