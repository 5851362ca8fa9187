"""Display language helpers."""
from __future__ import annotations

from seedcrawl.core.types import LANGUAGES, Language

_LABEL_KEYS = {
    "en": "ui.settings.lang_en",
    "zh-CN": "ui.settings.lang_zh_cn",
    "zh-TW": "ui.settings.lang_zh_tw",
    "ja": "ui.settings.lang_ja",
    "ko": "ui.settings.lang_ko",
}


def language_from_locale_tag(tag: str | None) -> Language:
    """Map a locale tag such as `zh_HK.UTF-8` to a supported language by prefix."""
    normalized = (tag or "").strip().lower().replace("_", "-")
    if normalized.startswith(("zh-tw", "zh-hk", "zh-hant")):
        return "zh-TW"
    if normalized.startswith("zh"):
        return "zh-CN"
    if normalized.startswith("ja"):
        return "ja"
    if normalized.startswith("ko"):
        return "ko"
    return "en"


def language_label_key(language: Language) -> str:
    return _LABEL_KEYS[language]


def language_index(language: Language) -> int:
    return LANGUAGES.index(language)
