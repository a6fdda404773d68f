import json
import logging
from pathlib import Path

from image_analyzer.constants import DEFAULT_LANGUAGE, DEFAULT_LANGUAGE_STORE_PATH

logger = logging.getLogger(__name__)


def normalize_chat_id(s: str) -> str:
    """Keep digits and a leading minus (group chat ids are negative)."""
    digits = "".join(c for c in s if c.isdigit())
    match (s.strip().startswith("-"), digits):
        case (_, ""):
            return ""
        case (True, d):
            return f"-{d}"
        case (False, d):
            return d


class LanguageStore:
    """Per-chat output language, persisted as a small JSON map."""

    def __init__(
        self,
        path: Path = Path(DEFAULT_LANGUAGE_STORE_PATH),
        default: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._path = path
        self._default = default
        self._store: dict[str, str] = {}
        self._load()

    @property
    def default(self) -> str:
        return self._default

    def _load(self) -> None:
        match self._path.exists():
            case True:
                try:
                    with open(self._path, encoding="utf-8") as f:
                        raw = json.load(f)
                    self._store = {
                        normalize_chat_id(k) or k: v
                        for k, v in raw.items()
                        if isinstance(v, str) and v.strip()
                    }
                except Exception as e:
                    logger.warning(f"Language store load failed: {e}, starting fresh")
            case False:
                pass

    def _save(self) -> None:
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._store, f, indent=2, ensure_ascii=False)
        except Exception as e:
            logger.warning(f"Language store save failed: {e}")

    def get(self, sender: str) -> str:
        return self._store.get(normalize_chat_id(sender) or sender, self._default)

    def set(self, sender: str, language: str) -> str:
        """Store a trimmed language name and return it."""
        value = language.strip()
        self._store[normalize_chat_id(sender) or sender] = value
        self._save()
        return value

