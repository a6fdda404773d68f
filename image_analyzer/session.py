"""Per-chat analysis session: the selected image plus one explicit state variant."""
import logging
from dataclasses import dataclass

from image_analyzer.analysis.models import AnalysisResult
from image_analyzer.analysis.request import ImageUpload
from image_analyzer.analyzer import ImageAnalyzer
from image_analyzer.constants import MSG_ANALYSIS_FAILED
from image_analyzer.errors import (
    AnalysisError,
    AnalysisInProgressError,
    InvalidAnalysisResponseError,
    MissingImageError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Succeeded:
    result: AnalysisResult


@dataclass(frozen=True)
class Failed:
    message: str


AnalysisState = Idle | Loading | Succeeded | Failed


class AnalysisSession:

    def __init__(self) -> None:
        self._image: ImageUpload | None = None
        self._state: AnalysisState = Idle()

    @property
    def image(self) -> ImageUpload | None:
        return self._image

    @property
    def state(self) -> AnalysisState:
        return self._state

    def select_image(self, image: ImageUpload) -> None:
        """Replace the selected image; a shown result or error no longer applies."""
        self._image = image
        match self._state:
            case Loading():
                pass
            case _:
                self._state = Idle()

    async def run(self, analyzer: ImageAnalyzer, language: str) -> AnalysisState:
        match self._state:
            case Loading():
                raise AnalysisInProgressError()
            case _:
                pass

        self._state = Loading()
        try:
            result = await analyzer.analyze(self._image, language)
        except (MissingImageError, InvalidAnalysisResponseError) as exc:
            logger.warning("Analysis rejected: %s", exc)
            self._state = Failed(exc.user_message)
        except AnalysisError as exc:
            self._state = Failed(exc.user_message)
        except Exception:
            logger.exception("Unexpected analysis failure")
            self._state = Failed(MSG_ANALYSIS_FAILED)
        else:
            self._state = Succeeded(result)
        return self._state


class SessionStore:
    """In-memory sessions keyed by chat id; nothing here is persisted."""

    def __init__(self) -> None:
        self._sessions: dict[str, AnalysisSession] = {}

    def get(self, sender: str) -> AnalysisSession:
        return self._sessions.setdefault(sender, AnalysisSession())
