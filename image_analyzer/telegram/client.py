"""TelegramClient — event-driven transport via python-telegram-bot."""
import logging
from typing import Any, Awaitable, Callable, Optional

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from image_analyzer.analysis.request import ImageUpload
from image_analyzer.config import Config
from image_analyzer.constants import (
    CMD_ANALYZE,
    CMD_HELP,
    CMD_LANGUAGE,
    CMD_START,
    CMD_STATUS,
    MSG_BLOCKED_CHAT,
    MSG_IMAGE_DOWNLOAD_FAILED,
    MSG_SEND_FAIL,
    TELEGRAM_PHOTO_MIME_TYPE,
)
from image_analyzer.controller import AnalysisController
from image_analyzer.language_store import normalize_chat_id
from image_analyzer.presentation import split_message
from image_analyzer.telegram.typing import TelegramTypingIndicator

logger = logging.getLogger(__name__)

Handler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]
# (sender, update, context) -> None, called only for the allowed chat
SenderHandler = Callable[[str, Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


class TelegramClient:

    def __init__(self, config: Config, controller: AnalysisController) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._controller = controller
        self._app: Optional[Application] = None

    def run(self) -> None:
        # Updates run concurrently; each chat session refuses a second in-flight analysis.
        self._app = Application.builder().token(self._token).concurrent_updates(True).build()
        self._app.add_handler(
            TGMessageHandler(filters.PHOTO | filters.Document.IMAGE, self._guarded(self._on_image))
        )
        self._app.add_handler(CommandHandler(CMD_ANALYZE, self._guarded(self._on_analyze)))
        self._app.add_handler(CommandHandler(CMD_LANGUAGE, self._guarded(self._on_language)))
        self._app.add_handler(CommandHandler(CMD_STATUS, self._guarded(self._on_status)))
        self._app.add_handler(
            CommandHandler([CMD_HELP, CMD_START], self._guarded(self._on_help))
        )
        self._app.add_handler(
            TGMessageHandler(filters.TEXT & ~filters.COMMAND, self._guarded(self._on_help))
        )
        self._app.run_polling()

    async def send_message(self, to: str, text: str) -> bool:
        match self._app:
            case None:
                logger.error("send_message called before run()")
                return False
            case app:
                try:
                    for chunk in split_message(text):
                        await app.bot.send_message(chat_id=int(to), text=chunk)
                    return True
                except Exception as exc:
                    logger.error("Telegram send_message failed: %s", exc)
                    return False

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        incoming = normalize_chat_id(str(update.effective_chat.id))
        allowed = normalize_chat_id(self._allowed_chat_id)
        return incoming == allowed

    @staticmethod
    def _image_source(update: Update) -> tuple[Any, str] | None:
        """Return (downloadable attachment, MIME type) for a photo or image document."""
        msg = update.message
        match msg:
            case None:
                return None
            case _:
                pass
        match (msg.photo, msg.document):
            case ([*_, largest], _):
                return (largest, TELEGRAM_PHOTO_MIME_TYPE)
            case (_, doc) if doc is not None and (doc.mime_type or "").startswith("image/"):
                return (doc, doc.mime_type)
            case _:
                return None

    # ── handlers ─────────────────────────────────────────────────────────────

    def _guarded(self, handler: SenderHandler) -> Handler:
        """Drop updates from chats other than the allowed one, then dispatch with the sender id."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass
            await handler(str(update.effective_chat.id), update, context)

        return _handler

    async def _reply(self, sender: str, text: str) -> None:
        match await self.send_message(sender, text):
            case True:
                pass
            case False:
                logger.error(MSG_SEND_FAIL)

    async def _on_image(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        match self._image_source(update):
            case None:
                return
            case (attachment, mime_type):
                try:
                    tg_file = await attachment.get_file()
                    data = bytes(await tg_file.download_as_bytearray())
                except Exception:
                    logger.exception("Image download failed")
                    await self._reply(sender, MSG_IMAGE_DOWNLOAD_FAILED)
                    return
                image = ImageUpload(data=data, mime_type=mime_type)
                await self._reply(sender, self._controller.handle_image(sender, image))

    async def _on_analyze(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        async with TelegramTypingIndicator(context.bot, sender):
            reply = await self._controller.handle_analyze(sender)
        await self._reply(sender, reply)

    async def _on_language(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        args = " ".join(context.args or [])
        await self._reply(sender, self._controller.handle_language_command(sender, args))

    async def _on_status(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        await self._reply(sender, self._controller.handle_status_command(sender))

    async def _on_help(
        self, sender: str, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        await self._reply(sender, self._controller.handle_help_command())
