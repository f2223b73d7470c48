"""Meal-plan request: schema, prompts and safety thresholds."""

from __future__ import annotations

from gemini_structured._types import (
    GenerationConfig,
    GenerationRequest,
    HarmBlockThreshold,
    HarmCategory,
    SafetySetting,
    Schema,
    SchemaType,
)

MODEL_ID = "gemini-1.5-pro-latest"

COURSES = ("appetizer", "salad", "soup", "main", "dessert")
UNITS = ("count", "cup", "tablespoon", "teaspoon", "pound", "ounce")

USER_PROMPT = (
    "Some friends are visiting, and I need a simple 3-course meal plan. "
    "Can you propose something straightforward to cook?"
)
SYSTEM_PROMPT = (
    "You are a helpful culinary assistant. "
    "Return strictly valid JSON that matches the given schema."
)
TEMPERATURE = 0.7

# Array of courses; each has a name, ingredients and steps.
RECIPE_SCHEMA = Schema(
    type=SchemaType.ARRAY,
    items=Schema(
        type=SchemaType.OBJECT,
        description="Data about a particular meal course",
        properties={
            "course": Schema(type=SchemaType.STRING, enum=COURSES),
            "name": Schema(type=SchemaType.STRING),
            "ingredients": Schema(
                type=SchemaType.ARRAY,
                items=Schema(
                    type=SchemaType.OBJECT,
                    properties={
                        "unit": Schema(type=SchemaType.STRING, enum=UNITS),
                        "amount": Schema(type=SchemaType.NUMBER),
                        "name": Schema(type=SchemaType.STRING),
                    },
                    required=("name",),
                ),
            ),
            "steps": Schema(type=SchemaType.ARRAY, items=Schema(type=SchemaType.STRING)),
        },
        required=("course", "name"),
    ),
)

SAFETY_SETTINGS = tuple(
    SafetySetting(category, HarmBlockThreshold.BLOCK_NONE)
    for category in (
        HarmCategory.HATE_SPEECH,
        HarmCategory.SEXUALLY_EXPLICIT,
        HarmCategory.DANGEROUS_CONTENT,
        HarmCategory.HARASSMENT,
    )
)


def build_request(
    prompt: str = USER_PROMPT,
    *,
    system_instruction: str | None = SYSTEM_PROMPT,
    schema: Schema = RECIPE_SCHEMA,
    temperature: float = TEMPERATURE,
    safety_settings: tuple[SafetySetting, ...] = SAFETY_SETTINGS,
) -> GenerationRequest:
    """Build the meal-plan GenerationRequest with JSON output enforced."""
    return GenerationRequest(
        prompt=prompt,
        system_instruction=system_instruction,
        generation_config=GenerationConfig(
            response_mime_type="application/json",
            response_schema=schema,
            temperature=temperature,
        ),
        safety_settings=safety_settings,
    )
