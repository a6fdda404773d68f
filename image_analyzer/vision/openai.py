"""OpenAIVisionClient — OpenAI backend using a strict json_schema response format."""
from openai import AsyncOpenAI

from image_analyzer.analysis.request import AnalysisRequest
from image_analyzer.constants import OPENAI_SCHEMA_NAME, OPENAI_VISION_MODEL
from image_analyzer.vision.client import VisionClient


class OpenAIVisionClient(VisionClient):

    def __init__(self, api_key: str, model: str = OPENAI_VISION_MODEL) -> None:
        super().__init__(api_key, model)

    async def analyze(self, request: AnalysisRequest) -> str:
        client = AsyncOpenAI(api_key=self._api_key)
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": request.instruction},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": request.data_url},
                        },
                        {"type": "text", "text": request.prompt},
                    ],
                },
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": OPENAI_SCHEMA_NAME,
                    "strict": True,
                    "schema": request.schema,
                },
            },
        )
        content = response.choices[0].message.content
        return content.strip() if content else ""
