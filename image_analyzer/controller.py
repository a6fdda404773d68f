"""AnalysisController — chat command logic, transport-agnostic."""
import logging
import time
from pathlib import Path

from image_analyzer.analysis.request import ImageUpload
from image_analyzer.analyzer import ImageAnalyzer
from image_analyzer.config import Config
from image_analyzer.constants import (
    MSG_ANALYSIS_ERROR,
    MSG_ANALYSIS_OK,
    MSG_HELP,
    MSG_IMAGE_RECEIVED,
    MSG_LANGUAGE_CURRENT,
    MSG_LANGUAGE_SET,
    MSG_STATUS,
    SUPPORTED_LANGUAGES,
)
from image_analyzer.errors import AnalysisInProgressError
from image_analyzer.language_store import LanguageStore
from image_analyzer.presentation import describe_state, render_state
from image_analyzer.session import Failed, SessionStore, Succeeded

logger = logging.getLogger(__name__)


class AnalysisController:
    """Owns per-chat sessions and language choices; returns reply text for each command."""

    def __init__(
        self,
        config: Config,
        analyzer: ImageAnalyzer,
        language_store: LanguageStore | None = None,
    ) -> None:
        self._config = config
        self._analyzer = analyzer
        self._languages = language_store or LanguageStore(
            path=Path(config.language_store_path),
            default=config.default_language,
        )
        self._sessions = SessionStore()

    def get_language(self, sender: str) -> str:
        return self._languages.get(sender)

    def handle_image(self, sender: str, image: ImageUpload) -> str:
        self._sessions.get(sender).select_image(image)
        return MSG_IMAGE_RECEIVED % self.get_language(sender)

    async def handle_analyze(self, sender: str) -> str:
        session = self._sessions.get(sender)
        start = time.time()
        try:
            state = await session.run(self._analyzer, self.get_language(sender))
        except AnalysisInProgressError as exc:
            return exc.user_message

        elapsed = time.time() - start
        match state:
            case Succeeded():
                logger.info(MSG_ANALYSIS_OK, elapsed)
            case Failed():
                logger.error(MSG_ANALYSIS_ERROR, elapsed)
            case _:
                pass
        return render_state(state)

    def handle_language_command(self, sender: str, args: str) -> str:
        match args.strip():
            case "":
                return MSG_LANGUAGE_CURRENT % (
                    self.get_language(sender),
                    ", ".join(SUPPORTED_LANGUAGES),
                )
            case name:
                return MSG_LANGUAGE_SET % self._languages.set(sender, name)

    def handle_status_command(self, sender: str) -> str:
        session = self._sessions.get(sender)
        match session.image:
            case None:
                image = "none"
            case ImageUpload(data=data, mime_type=mime_type):
                image = f"{mime_type}, {len(data)} bytes"
        return MSG_STATUS % (
            self._config.vision_provider,
            self._analyzer.model,
            self.get_language(sender),
            image,
            describe_state(session.state),
        )

    def handle_help_command(self) -> str:
        return MSG_HELP
