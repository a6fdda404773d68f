import json
from pathlib import Path

from image_analyzer.language_store import LanguageStore, normalize_chat_id


def _make_store(tmp_path: Path, data: dict | None = None, default: str = "English") -> LanguageStore:
    p = tmp_path / "languages.json"
    if data is not None:
        p.write_text(json.dumps(data))
    return LanguageStore(path=p, default=default)


# --- chat id normalization ---

def test_normalize_keeps_digits():
    assert normalize_chat_id("123 456-789") == "123456789"


def test_normalize_keeps_group_sign():
    assert normalize_chat_id("-100123") == "-100123"


def test_normalize_no_digits_is_empty():
    assert normalize_chat_id("abc") == ""


# --- get / set ---

def test_unknown_chat_gets_default(tmp_path):
    store = _make_store(tmp_path, default="Armenian")
    assert store.get("123") == "Armenian"


def test_set_then_get(tmp_path):
    store = _make_store(tmp_path)
    assert store.set("123", "  Armenian ") == "Armenian"
    assert store.get("123") == "Armenian"
    assert store.get("456") == "English"


def test_language_survives_reload(tmp_path):
    _make_store(tmp_path).set("123", "Հայերեն")
    reloaded = _make_store(tmp_path)
    assert reloaded.get("123") == "Հայերեն"


def test_saved_file_is_readable_json(tmp_path):
    _make_store(tmp_path).set("-100123", "Armenian")
    data = json.loads((tmp_path / "languages.json").read_text(encoding="utf-8"))
    assert data == {"-100123": "Armenian"}


def test_load_normalizes_keys(tmp_path):
    store = _make_store(tmp_path, {" 123 ": "Armenian"})
    assert store.get("123") == "Armenian"


def test_load_skips_blank_values(tmp_path):
    store = _make_store(tmp_path, {"123": "  ", "456": 7})
    assert store.get("123") == "English"
    assert store.get("456") == "English"


def test_corrupt_file_starts_fresh(tmp_path):
    p = tmp_path / "languages.json"
    p.write_text("{not json")
    store = LanguageStore(path=p)
    assert store.get("123") == "English"
