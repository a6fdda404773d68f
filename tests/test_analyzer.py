"""ImageAnalyzer: builder → vision call → interpreter, with the error taxonomy."""
import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from image_analyzer.analysis.request import AnalysisRequest, ImageUpload
from image_analyzer.analyzer import ImageAnalyzer
from image_analyzer.errors import (
    AnalysisFailedError,
    InvalidAnalysisResponseError,
    MissingImageError,
)
from image_analyzer.vision.client import VisionClient


def make_vision(reply=None, error: Exception | None = None) -> MagicMock:
    vision = MagicMock(spec=VisionClient)
    vision.model = "test-model"
    vision.analyze = AsyncMock(return_value=reply, side_effect=error)
    return vision


IMAGE = ImageUpload(data=b"jpeg-bytes", mime_type="image/jpeg")


async def test_analyze_returns_typed_result(park_payload):
    vision = make_vision(json.dumps(park_payload))

    result = await ImageAnalyzer(vision).analyze(IMAGE, "English")

    assert result.summary == "A park scene."
    vision.analyze.assert_awaited_once()


async def test_analyze_builds_request_for_language(park_payload):
    vision = make_vision(json.dumps(park_payload))

    await ImageAnalyzer(vision).analyze(IMAGE, "Armenian")

    (request,) = vision.analyze.call_args.args
    assert isinstance(request, AnalysisRequest)
    assert request.image == IMAGE
    assert request.language == "Armenian"
    assert "Armenian" in request.instruction


@pytest.mark.parametrize("image", [None, ImageUpload(data=b"", mime_type="image/png")])
async def test_no_image_never_calls_vision(image):
    vision = make_vision("{}")

    with pytest.raises(MissingImageError) as info:
        await ImageAnalyzer(vision).analyze(image, "English")

    assert info.value.user_message == "Please upload an image first."
    vision.analyze.assert_not_called()


async def test_provider_error_becomes_analysis_failed():
    vision = make_vision(error=RuntimeError("429 quota exceeded"))

    with pytest.raises(AnalysisFailedError) as info:
        await ImageAnalyzer(vision).analyze(IMAGE, "English")

    assert isinstance(info.value.__cause__, RuntimeError)
    vision.analyze.assert_awaited_once()


async def test_invalid_reply_becomes_response_shape_error():
    vision = make_vision('{"summary": "only this"}')

    with pytest.raises(InvalidAnalysisResponseError):
        await ImageAnalyzer(vision).analyze(IMAGE, "English")


def test_model_comes_from_vision_client():
    assert ImageAnalyzer(make_vision()).model == "test-model"
