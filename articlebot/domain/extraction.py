"""Recover the structured article payload from free-form model output.

Models wrap JSON in prose or Markdown fences and sometimes leave trailing
commas behind, so each candidate is cleaned before a strict parse. The first
candidate that parses wins; the rest are ignored.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

from articlebot.constants import ARTICLE_ORDER, CASE_ORDER, NUMBER_ORDER
from articlebot.domain.models import (
    ArticleInfo,
    Candidate,
    CaseExample,
    ExampleInfo,
    ExamplesInfo,
    ParsedPayload,
    TranslationsInfo,
)
from articlebot.errors import ExtractionError

logger = logging.getLogger(__name__)

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


class PayloadFormatError(ValueError):
    """Raised when decoded JSON does not have the expected shape."""


def locate_json_object(text: str) -> str:
    """Return the span from the leftmost ``{`` to the rightmost ``}``, trimmed."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return ""
    return text[start : end + 1].strip()


def repair_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def parse_payload(text: str) -> ParsedPayload:
    """Strictly decode a cleaned candidate into a ``ParsedPayload``."""
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise PayloadFormatError("top-level JSON value must be an object")

    error = _lookup(raw, "error")
    if error is None:
        error = False
    if not isinstance(error, bool):
        raise PayloadFormatError("'error' must be a boolean")

    data_raw = _lookup(raw, "data")
    if data_raw is None:
        data_raw = []
    if not isinstance(data_raw, list):
        raise PayloadFormatError("'data' must be an array")

    return ParsedPayload(
        error=error,
        error_message=_optional_str(raw, "errorMessage"),
        data=tuple(_parse_article_info(item) for item in data_raw),
    )


def extract(candidates: Iterable[Candidate]) -> ParsedPayload:
    seen = 0
    for index, candidate in enumerate(candidates):
        seen += 1
        text = candidate.text
        if not text:
            logger.warning("Candidate %d has no text content", index)
            continue

        cleaned = repair_trailing_commas(locate_json_object(text))
        try:
            return parse_payload(cleaned)
        except (ValueError, TypeError, RecursionError) as exc:
            # json.JSONDecodeError and PayloadFormatError are both ValueErrors;
            # deeply nested input exhausts the decoder stack.
            logger.error(
                "Failed to parse JSON response from candidate %d: %s; response=%r",
                index,
                exc,
                text,
            )
            continue

    if seen == 0:
        raise ExtractionError("no candidates", candidates_seen=0)
    raise ExtractionError("no parsable candidate", candidates_seen=seen)


def _lookup(payload: dict[str, Any], key: str) -> Any:
    """Exact key first, then the first case-insensitive match."""
    if key in payload:
        return payload[key]
    folded = key.casefold()
    for name, value in payload.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def _optional_str(payload: dict[str, Any], key: str) -> str:
    value = _lookup(payload, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadFormatError(f"'{key}' must be a string")
    return value


def _optional_object(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = _lookup(payload, key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadFormatError(f"'{key}' must be an object")
    return value


def _parse_article_info(item: object) -> ArticleInfo:
    if not isinstance(item, dict):
        raise PayloadFormatError("'data' entries must be objects")
    example = _optional_object(item, "example")
    numbers = {
        name: _parse_example_info(_optional_object(example, name))
        for name in NUMBER_ORDER
    }
    return ArticleInfo(
        word_with_article=_optional_str(item, "wordWithArticle"),
        translation=_optional_str(item, "translation"),
        example=ExamplesInfo(**numbers),
    )


def _parse_example_info(payload: dict[str, Any]) -> ExampleInfo:
    articles = {
        name: _parse_translations(_optional_object(payload, name))
        for name in ARTICLE_ORDER
    }
    return ExampleInfo(**articles)


def _parse_translations(payload: dict[str, Any]) -> TranslationsInfo:
    return TranslationsInfo(
        {
            name: CaseExample(
                example=_optional_str(payload, f"{name}Example"),
                translation=_optional_str(payload, f"{name}Translation"),
            )
            for name in CASE_ORDER
        }
    )
