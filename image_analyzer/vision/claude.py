"""ClaudeVisionClient — Anthropic Claude backend; the schema rides on a forced tool call."""
import json

from anthropic import AsyncAnthropic

from image_analyzer.analysis.request import AnalysisRequest
from image_analyzer.constants import (
    CLAUDE_MAX_TOKENS,
    CLAUDE_TOOL_DESCRIPTION,
    CLAUDE_TOOL_NAME,
    CLAUDE_VISION_MODEL,
)
from image_analyzer.vision.client import VisionClient


class ClaudeVisionClient(VisionClient):

    def __init__(self, api_key: str, model: str = CLAUDE_VISION_MODEL) -> None:
        super().__init__(api_key, model)

    async def analyze(self, request: AnalysisRequest) -> str:
        client = AsyncAnthropic(api_key=self._api_key)
        message = await client.messages.create(
            model=self._model,
            max_tokens=CLAUDE_MAX_TOKENS,
            system=request.instruction,
            tools=[
                {
                    "name": CLAUDE_TOOL_NAME,
                    "description": CLAUDE_TOOL_DESCRIPTION,
                    "input_schema": request.schema,
                }
            ],
            tool_choice={"type": "tool", "name": CLAUDE_TOOL_NAME},
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": request.image.mime_type,
                                "data": request.image_base64,
                            },
                        },
                        {"type": "text", "text": request.prompt},
                    ],
                }
            ],
        )
        tool_inputs = [b.input for b in message.content if b.type == "tool_use"]
        match tool_inputs:
            case [payload, *_]:
                return json.dumps(payload, ensure_ascii=False)
            case _:
                return "".join(b.text for b in message.content if b.type == "text").strip()
