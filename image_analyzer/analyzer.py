"""ImageAnalyzer — encode image → one vision call → parse. Raises AnalysisError subclasses."""
import logging

from image_analyzer.analysis.interpreter import parse_analysis
from image_analyzer.analysis.models import AnalysisResult
from image_analyzer.analysis.request import ImageUpload, build_request
from image_analyzer.constants import MSG_CALLING_PROVIDER
from image_analyzer.errors import AnalysisFailedError, MissingImageError
from image_analyzer.vision.client import VisionClient

logger = logging.getLogger(__name__)


class ImageAnalyzer:

    def __init__(self, vision_client: VisionClient) -> None:
        self._vision_client = vision_client

    @property
    def model(self) -> str:
        return self._vision_client.model

    async def analyze(self, image: ImageUpload | None, language: str) -> AnalysisResult:
        match image:
            case None:
                raise MissingImageError("no image selected")
            case ImageUpload(data=b""):
                raise MissingImageError("selected image is empty")
            case _:
                pass

        request = build_request(image.data, image.mime_type, language)
        logger.info(MSG_CALLING_PROVIDER, type(self._vision_client).__name__, language)
        try:
            raw = await self._vision_client.analyze(request)
        except Exception as exc:
            logger.exception("Vision call failed")
            raise AnalysisFailedError(str(exc)) from exc
        return parse_analysis(raw)
