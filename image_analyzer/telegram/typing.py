"""Telegram typing indicator — shown while an analysis call is in flight."""
import asyncio
import logging

from telegram import Bot
from telegram.constants import ChatAction

from image_analyzer.constants import TELEGRAM_TYPING_INTERVAL

logger = logging.getLogger(__name__)


async def _keep_typing(bot: Bot, chat_id: str, stop: asyncio.Event) -> None:
    while not stop.is_set():
        try:
            await bot.send_chat_action(chat_id=int(chat_id), action=ChatAction.TYPING)
        except Exception as exc:
            logger.debug("Typing action failed: %s", exc)
        try:
            await asyncio.wait_for(stop.wait(), timeout=TELEGRAM_TYPING_INTERVAL)
        except asyncio.TimeoutError:
            pass


class TelegramTypingIndicator:
    """Async context manager: `async with TelegramTypingIndicator(bot, chat_id): ...`."""

    def __init__(self, bot: Bot, chat_id: str) -> None:
        self._bot = bot
        self._chat_id = chat_id
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task | None = None

    async def __aenter__(self) -> "TelegramTypingIndicator":
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(
            _keep_typing(self._bot, self._chat_id, self._stop_event)
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        match self._stop_event:
            case None:
                pass
            case event:
                event.set()

        match self._task:
            case None:
                pass
            case task:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
                self._task = None

        self._stop_event = None
