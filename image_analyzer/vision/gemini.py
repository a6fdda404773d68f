"""GeminiVisionClient — Google Gemini structured-output backend."""
from google.genai import Client, types

from image_analyzer.analysis.models import AnalysisResult
from image_analyzer.analysis.request import AnalysisRequest
from image_analyzer.constants import GEMINI_VISION_MODEL, JSON_MIME_TYPE
from image_analyzer.vision.client import VisionClient


class GeminiVisionClient(VisionClient):

    def __init__(self, api_key: str, model: str = GEMINI_VISION_MODEL) -> None:
        super().__init__(api_key, model)

    async def analyze(self, request: AnalysisRequest) -> str:
        client = Client(api_key=self._api_key)
        image_part = types.Part.from_bytes(
            data=request.image.data,
            mime_type=request.image.mime_type,
        )
        # Gemini takes the schema as the pydantic model; it mirrors request.schema.
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=[image_part, request.prompt],
            config=types.GenerateContentConfig(
                system_instruction=request.instruction,
                response_mime_type=JSON_MIME_TYPE,
                response_schema=AnalysisResult,
            ),
        )
        return (response.text or "").strip()
