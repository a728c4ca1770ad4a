from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from articlebot.constants import (
    CASE_ORDER,
    DEFAULT_LANGUAGE,
    NUMBER_ORDER,
    GrammaticalCase,
    GrammaticalNumber,
)


@dataclass(frozen=True, slots=True)
class ArticleRequest:
    word: str
    language: str = DEFAULT_LANGUAGE


@dataclass(frozen=True, slots=True)
class CaseExample:
    example: str = ""
    translation: str = ""

    @property
    def is_present(self) -> bool:
        """Both halves are required; a lone example or translation is not shown."""
        return bool(self.example) and bool(self.translation)

    @property
    def is_empty(self) -> bool:
        return not self.example and not self.translation


_EMPTY_CASE = CaseExample()


@dataclass(frozen=True, slots=True)
class TranslationsInfo:
    """Non-empty cases as (case, pair) tuples in fixed case order.

    Built from a mapping or an iterable of pairs.
    """

    cases: tuple[tuple[GrammaticalCase, CaseExample], ...] = ()

    def __post_init__(self) -> None:
        given = self.cases if isinstance(self.cases, Mapping) else dict(self.cases)
        ordered = tuple(
            (name, given[name])
            for name in CASE_ORDER
            if name in given and not given[name].is_empty
        )
        object.__setattr__(self, "cases", ordered)

    def case(self, name: GrammaticalCase) -> CaseExample:
        for case_name, pair in self.cases:
            if case_name == name:
                return pair
        return _EMPTY_CASE

    def is_empty(self) -> bool:
        return not self.cases

    def to_dict(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        for name in CASE_ORDER:
            pair = self.case(name)
            if pair.example:
                payload[f"{name}Example"] = pair.example
            if pair.translation:
                payload[f"{name}Translation"] = pair.translation
        return payload


@dataclass(frozen=True, slots=True)
class ExampleInfo:
    definite: TranslationsInfo = field(default_factory=TranslationsInfo)
    indefinite: TranslationsInfo = field(default_factory=TranslationsInfo)

    def is_empty(self) -> bool:
        return self.definite.is_empty() and self.indefinite.is_empty()

    def has_present_case(self) -> bool:
        return any(
            translations.case(name).is_present
            for translations in (self.definite, self.indefinite)
            for name in CASE_ORDER
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if not self.definite.is_empty():
            payload["definite"] = self.definite.to_dict()
        if not self.indefinite.is_empty():
            payload["indefinite"] = self.indefinite.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class ExamplesInfo:
    singular: ExampleInfo = field(default_factory=ExampleInfo)
    plural: ExampleInfo = field(default_factory=ExampleInfo)

    def number(self, name: GrammaticalNumber) -> ExampleInfo:
        return self.singular if name == "singular" else self.plural

    def is_empty(self) -> bool:
        return self.singular.is_empty() and self.plural.is_empty()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for name in NUMBER_ORDER:
            info = self.number(name)
            if not info.is_empty():
                payload[name] = info.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class ArticleInfo:
    word_with_article: str
    translation: str
    example: ExamplesInfo = field(default_factory=ExamplesInfo)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "wordWithArticle": self.word_with_article,
            "translation": self.translation,
        }
        if not self.example.is_empty():
            payload["example"] = self.example.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class ArticleResponse:
    """Outcome of one lookup: either ``data`` (success) or ``error`` (failure)."""

    success: bool
    error: str = ""
    data: tuple[ArticleInfo, ...] = ()

    def __post_init__(self) -> None:
        if self.success and self.error:
            raise ValueError("Successful response cannot carry an error message")
        if not self.success and self.data:
            raise ValueError("Failed response cannot carry data")
        if not self.success and not self.error.strip():
            raise ValueError("Failed response needs an error message")

    @classmethod
    def succeeded(cls, data: Iterable[ArticleInfo]) -> ArticleResponse:
        return cls(success=True, data=tuple(data))

    @classmethod
    def failed(cls, message: str) -> ArticleResponse:
        return cls(success=False, error=message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success}
        if self.error:
            payload["error"] = self.error
        if self.data:
            payload["data"] = [info.to_dict() for info in self.data]
        return payload


@dataclass(frozen=True, slots=True)
class ParsedPayload:
    error: bool
    error_message: str = ""
    data: tuple[ArticleInfo, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.error_message:
            payload["errorMessage"] = self.error_message
        payload["data"] = [info.to_dict() for info in self.data]
        return payload


@dataclass(frozen=True, slots=True)
class Candidate:
    """One alternative completion returned by the model."""

    text_parts: tuple[str, ...] = ()
    filtered: bool = False

    @classmethod
    def from_text(cls, text: str) -> Candidate:
        return cls(text_parts=(text,))

    @property
    def text(self) -> str:
        if self.filtered:
            return ""
        return "".join(part for part in self.text_parts if part)
