"""Request builder — turns an uploaded image and a language into a call payload."""
import base64
from dataclasses import dataclass, field
from typing import Any

from image_analyzer.analysis.schema import RESPONSE_SCHEMA, build_system_instruction
from image_analyzer.constants import ANALYZE_PROMPT


@dataclass(frozen=True)
class ImageUpload:
    data: bytes = field(repr=False)
    mime_type: str


@dataclass(frozen=True)
class AnalysisRequest:
    image: ImageUpload
    language: str
    instruction: str
    prompt: str
    schema: dict[str, Any] = field(repr=False)

    @property
    def image_base64(self) -> str:
        return base64.standard_b64encode(self.image.data).decode()

    @property
    def data_url(self) -> str:
        return f"data:{self.image.mime_type};base64,{self.image_base64}"


def build_request(image_bytes: bytes, mime_type: str, language: str) -> AnalysisRequest:
    return AnalysisRequest(
        image=ImageUpload(data=image_bytes, mime_type=mime_type),
        language=language,
        instruction=build_system_instruction(language),
        prompt=ANALYZE_PROMPT,
        schema=RESPONSE_SCHEMA,
    )
