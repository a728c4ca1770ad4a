from __future__ import annotations

import re

from articlebot.constants import DEFAULT_LANGUAGE, EMPTY_WORD_MESSAGE
from articlebot.domain.models import ArticleRequest
from articlebot.errors import EmptyWordError

_LANGUAGE_SEPARATORS_RE = re.compile(r"[-;]")


def normalize_language(language: str | None) -> str:
    """Reduce an Accept-Language style value to its primary subtag."""
    text = (language or "").strip()
    if not text:
        return DEFAULT_LANGUAGE
    first = text.split(",", 1)[0]
    primary = _LANGUAGE_SEPARATORS_RE.split(first, maxsplit=1)[0].strip().lower()
    return primary or DEFAULT_LANGUAGE


def normalize_request(word: str | None, language: str | None = None) -> ArticleRequest:
    cleaned = (word or "").strip()
    if not cleaned:
        raise EmptyWordError(EMPTY_WORD_MESSAGE)
    return ArticleRequest(word=cleaned, language=normalize_language(language))
