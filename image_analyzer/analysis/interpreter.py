"""Response interpreter — raw model text in, typed AnalysisResult out."""
import logging

from pydantic import ValidationError

from image_analyzer.analysis.models import AnalysisResult
from image_analyzer.errors import InvalidAnalysisResponseError

logger = logging.getLogger(__name__)


def parse_analysis(raw: str) -> AnalysisResult:
    """Parse the model reply all-or-nothing. Raises InvalidAnalysisResponseError."""
    text = (raw or "").strip()
    match text:
        case "":
            raise InvalidAnalysisResponseError("empty analysis response")
        case _:
            pass
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Rejected analysis response: %s", exc)
        raise InvalidAnalysisResponseError(
            f"invalid analysis response ({exc.error_count()} error(s))"
        ) from exc
