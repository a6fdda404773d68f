"""Request builder: instruction text, fixed schema, payload encoding."""
import base64

import pytest

from image_analyzer.analysis.models import (
    AnalysisResult,
    EnvironmentContext,
    DetectedObject,
    SafetyAndSensitiveContent,
    TextInImage,
    VisualQualityAnalysis,
)
from image_analyzer.analysis.request import AnalysisRequest, ImageUpload, build_request
from image_analyzer.analysis.schema import RESPONSE_SCHEMA, build_system_instruction
from image_analyzer.constants import ANALYZE_PROMPT


@pytest.mark.parametrize("language", ["English", "Armenian", "Klingon", "Português"])
def test_instruction_names_language_and_sentinels(language):
    instruction = build_system_instruction(language)

    assert language in instruction
    assert '"uncertain"' in instruction
    assert '"unavailable"' in instruction


def test_instruction_forbids_prose_outside_json():
    instruction = build_system_instruction("English")

    assert "JSON" in instruction
    assert "outside of the JSON" in instruction


def test_only_language_varies_between_instructions():
    english = build_system_instruction("English")
    armenian = build_system_instruction("Armenian")

    assert english.replace("English", "Armenian") == armenian


def test_build_request_carries_instruction_schema_and_prompt():
    request = build_request(b"\x89PNG", "image/png", "Armenian")

    assert request.image == ImageUpload(data=b"\x89PNG", mime_type="image/png")
    assert request.language == "Armenian"
    assert request.instruction == build_system_instruction("Armenian")
    assert request.prompt == ANALYZE_PROMPT
    assert request.schema is RESPONSE_SCHEMA


def test_schema_does_not_depend_on_language():
    assert build_request(b"x", "image/jpeg", "English").schema == build_request(
        b"x", "image/jpeg", "Armenian"
    ).schema


def test_request_encodes_image_as_base64():
    request = build_request(b"raw-bytes", "image/webp", "English")

    assert base64.b64decode(request.image_base64) == b"raw-bytes"
    assert request.data_url == f"data:image/webp;base64,{request.image_base64}"


def test_request_is_immutable():
    request = build_request(b"x", "image/jpeg", "English")

    with pytest.raises(Exception):
        request.language = "Armenian"


def test_image_bytes_not_in_repr():
    request = build_request(b"secret-bytes", "image/jpeg", "English")

    assert "secret-bytes" not in repr(request)
    assert isinstance(request, AnalysisRequest)


# ── schema shape ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "path, model",
    [
        ((), AnalysisResult),
        (("objects_detected", "items"), DetectedObject),
        (("environment_context",), EnvironmentContext),
        (("visual_quality_analysis",), VisualQualityAnalysis),
        (("text_in_image",), TextInImage),
        (("safety_and_sensitive_content",), SafetyAndSensitiveContent),
    ],
)
def test_schema_requires_every_model_field(path, model):
    node = RESPONSE_SCHEMA
    for key in path:
        node = node["properties"][key] if key != "items" else node["items"]

    assert node["type"] == "object"
    assert node["additionalProperties"] is False
    assert set(node["required"]) == set(model.model_fields)
    assert set(node["properties"]) == set(model.model_fields)


def test_schema_field_types():
    props = RESPONSE_SCHEMA["properties"]

    assert props["summary"]["type"] == "string"
    assert props["potential_use_cases"] == {"type": "array", "items": {"type": "string"}}
    assert props["text_in_image"]["properties"]["has_text"] == {"type": "boolean"}
    assert props["safety_and_sensitive_content"]["properties"]["is_sensitive"] == {"type": "boolean"}
    assert props["objects_detected"]["items"]["properties"]["attributes"]["type"] == "array"
