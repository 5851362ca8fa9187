"""Catalog lookup with per-call language selection."""
from __future__ import annotations

import logging
import string
from typing import Dict, Mapping

from seedcrawl.core.types import Language
from seedcrawl.data.text_catalog import CATALOGS
from seedcrawl.domain.messages import Message

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE: Language = "en"


class _LenientParams(dict):
    """Leaves unknown `{placeholders}` in place instead of raising."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class TranslationService:
    """Resolves catalog keys for an explicitly passed language."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._catalogs: Dict[str, Mapping[str, str]] = dict(catalogs or CATALOGS)

    def register_catalog(self, language: Language, entries: Mapping[str, str]) -> None:
        self._catalogs[language] = entries

    def has_key(self, key: str, language: Language = FALLBACK_LANGUAGE) -> bool:
        return self._lookup(key, language) is not None

    def translate(self, key: str, language: Language = FALLBACK_LANGUAGE, **params: object) -> str:
        """Return display text for `key`; unknown keys render verbatim."""
        template = self._lookup(key, language)
        if template is None:
            return key
        if not params:
            return template
        resolved = _LenientParams(
            (name, self.render(value, language) if isinstance(value, Message) else value)
            for name, value in params.items()
        )
        try:
            return string.Formatter().vformat(template, (), resolved)
        except (ValueError, IndexError) as exc:
            logger.debug("Malformed template for %s: %s", key, exc)
            return template

    def render(self, message: Message, language: Language = FALLBACK_LANGUAGE) -> str:
        return self.translate(message.key, language, **message.params)

    def _lookup(self, key: str, language: Language) -> str | None:
        catalog = self._catalogs.get(language)
        if catalog is not None and key in catalog:
            return catalog[key]
        fallback = self._catalogs.get(FALLBACK_LANGUAGE, {})
        return fallback.get(key)
