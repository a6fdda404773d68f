from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from image_analyzer.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_LANGUAGE_STORE_PATH,
    DEFAULT_VISION_MODELS,
    DEFAULT_VISION_PROVIDER,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_KEY_VARS,
    PROVIDER_OPENAI,
    VISION_PROVIDERS,
)


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    vision_provider: str
    vision_model: str
    default_language: str
    language_store_path: str
    gemini_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]

    @property
    def vision_api_key(self) -> Optional[str]:
        return {
            PROVIDER_GEMINI: self.gemini_api_key,
            PROVIDER_CLAUDE: self.anthropic_api_key,
            PROVIDER_OPENAI: self.openai_api_key,
        }.get(self.vision_provider)

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("ALLOWED_CHAT_ID")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        provider = (os.getenv("VISION_PROVIDER") or DEFAULT_VISION_PROVIDER).strip().lower()
        model = os.getenv("VISION_MODEL") or None
        language = (os.getenv("DEFAULT_LANGUAGE") or DEFAULT_LANGUAGE).strip()
        store_path = os.getenv("LANGUAGE_STORE_PATH") or DEFAULT_LANGUAGE_STORE_PATH

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            vision_provider=provider,
            vision_model=model,
            default_language=language,
            language_store_path=store_path,
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        vision_provider: str,
        vision_model: Optional[str],
        default_language: str,
        language_store_path: str,
        gemini_api_key: Optional[str],
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match vision_provider:
            case p if p in VISION_PROVIDERS:
                pass
            case p:
                raise ValueError(
                    f"VISION_PROVIDER must be one of {', '.join(VISION_PROVIDERS)}, got {p!r}"
                )

        keys = {
            PROVIDER_GEMINI: gemini_api_key,
            PROVIDER_CLAUDE: anthropic_api_key,
            PROVIDER_OPENAI: openai_api_key,
        }
        match keys[vision_provider]:
            case None | "":
                raise ValueError(f"{PROVIDER_KEY_VARS[vision_provider]} must be set in .env")
            case _:
                pass

        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            vision_provider=vision_provider,
            vision_model=vision_model or DEFAULT_VISION_MODELS[vision_provider],
            default_language=default_language or DEFAULT_LANGUAGE,
            language_store_path=language_store_path,
            gemini_api_key=gemini_api_key,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
        )
