"""Instruction text and response schema sent with every analysis call.

The schema is the same for every language; only the instruction varies.
Each object lists all of its properties as required and forbids extra keys,
which is what strict structured-output modes (OpenAI ``json_schema``,
Anthropic tool input) expect.
"""
from typing import Any

from image_analyzer.constants import SENTINEL_UNAVAILABLE, SENTINEL_UNCERTAIN


def _string(description: str | None = None) -> dict[str, Any]:
    match description:
        case None:
            return {"type": "string"}
        case text:
            return {"type": "string", "description": text}


def _boolean() -> dict[str, Any]:
    return {"type": "boolean"}


def _array(items: dict[str, Any]) -> dict[str, Any]:
    return {"type": "array", "items": items}


def _object(properties: dict[str, dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


RESPONSE_SCHEMA: dict[str, Any] = _object({
    "summary": _string("A brief, one-sentence summary of the image."),
    "detailed_description": _string(
        "A comprehensive, paragraph-long description of the image content and context."
    ),
    "objects_detected": _array(_object({
        "name": _string(),
        "attributes": _array(_string()),
        "estimated_role": _string(),
        "location": _string(),
    })),
    "environment_context": _object({
        "setting_type": _string("e.g., 'indoors', 'outdoors', 'urban', 'natural'"),
        "time_context": _string("e.g., 'daytime', 'night', 'golden hour'"),
        "mood_or_tone": _string("e.g., 'joyful', 'somber', 'energetic', 'peaceful'"),
        "activity_type": _string(
            "The main activity depicted, e.g., 'celebration', 'work', 'leisure'"
        ),
    }),
    "visual_quality_analysis": _object({
        "focus_and_sharpness": _string(),
        "lighting": _string(),
        "framing_and_composition": _string(),
        "aesthetic_notes": _string(),
    }),
    "text_in_image": _object({
        "has_text": _boolean(),
        "transcribed_text": _string(),
        "meaning_or_purpose": _string(),
    }),
    "potential_use_cases": _array(_string()),
    "safety_and_sensitive_content": _object({
        "is_sensitive": _boolean(),
        "notes": _string(),
    }),
    "next_action_suggestion": _string(
        "A suggested next step for a user, like 'Enhance lighting' or 'Identify main subject'."
    ),
})


def build_system_instruction(language: str) -> str:
    """Instruction conditioning the model; every string value comes back in `language`."""
    return (
        "You are a professional image analysis service. Analyze the provided image deeply "
        "and return your findings strictly in the specified JSON format. "
        f"The entire JSON response, including all string values, must be in {language}. "
        "Be detailed, visual, and factual in your descriptions. "
        f'If any piece of information is uncertain, use the string "{SENTINEL_UNCERTAIN}". '
        f'If no image is provided, fill all string fields with "{SENTINEL_UNAVAILABLE}". '
        "You are not a chat assistant; do not provide any text or prose outside of the "
        "JSON structure."
    )
