"""Entry point — wires Config → VisionClient → ImageAnalyzer → AnalysisController → TelegramClient."""
import logging

from rich.logging import RichHandler

from image_analyzer.analyzer import ImageAnalyzer
from image_analyzer.config import Config
from image_analyzer.constants import (
    MSG_BOT_STARTING,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
)
from image_analyzer.controller import AnalysisController
from image_analyzer.telegram.client import TelegramClient
from image_analyzer.vision.claude import ClaudeVisionClient
from image_analyzer.vision.client import VisionClient
from image_analyzer.vision.gemini import GeminiVisionClient
from image_analyzer.vision.openai import OpenAIVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))
    # httpx logs every Telegram long-poll request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def make_vision_client(config: Config) -> VisionClient:
    match config.vision_provider:
        case p if p == PROVIDER_GEMINI:
            return GeminiVisionClient(config.vision_api_key, config.vision_model)
        case p if p == PROVIDER_CLAUDE:
            return ClaudeVisionClient(config.vision_api_key, config.vision_model)
        case p if p == PROVIDER_OPENAI:
            return OpenAIVisionClient(config.vision_api_key, config.vision_model)
        case p:
            raise ValueError(f"Unknown vision provider: {p}")


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    analyzer = ImageAnalyzer(make_vision_client(config))
    controller = AnalysisController(config, analyzer)
    TelegramClient(config, controller).run()


if __name__ == "__main__":
    main()
