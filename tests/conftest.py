"""Shared fixtures: sample model payloads and a scripted generator."""

from __future__ import annotations

import json

import pytest

from articlebot.domain.models import Candidate
from articlebot.errors import GenerationError
from articlebot.services.article_service import ArticleService


def _cases(prefix: str, translation_prefix: str) -> dict[str, str]:
    return {
        "nominativeExample": f"{prefix} ist groß.",
        "nominativeTranslation": f"{translation_prefix} is big.",
        "accusativeExample": f"Ich sehe {prefix.lower()}.",
        "accusativeTranslation": f"I see {translation_prefix.lower()}.",
        "dativeExample": f"Ich wohne in {prefix.lower()}.",
        "dativeTranslation": f"I live in {translation_prefix.lower()}.",
        "genitiveExample": f"Die Tür {prefix.lower()}.",
        "genitiveTranslation": f"The door of {translation_prefix.lower()}.",
    }


class ScriptedGenerator:
    """Returns canned candidates (or raises) and records every prompt it sees."""

    def __init__(self, candidates: tuple[Candidate, ...] = (), error: Exception | None = None) -> None:
        self.candidates = candidates
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> tuple[Candidate, ...]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.candidates


@pytest.fixture
def haus_payload() -> dict:
    return {
        "error": False,
        "data": [
            {
                "wordWithArticle": "das Haus",
                "translation": "the house",
                "example": {
                    "singular": {
                        "definite": _cases("Das Haus", "The house"),
                        "indefinite": _cases("Ein Haus", "A house"),
                    },
                    "plural": {
                        "definite": _cases("Die Häuser", "The houses"),
                        "indefinite": _cases("Häuser", "Houses"),
                    },
                },
            }
        ],
    }


@pytest.fixture
def haus_text(haus_payload: dict) -> str:
    return json.dumps(haus_payload, ensure_ascii=False)


@pytest.fixture
def make_service():
    def factory(*texts: str, error: Exception | None = None) -> tuple[ArticleService, ScriptedGenerator]:
        generator = ScriptedGenerator(
            candidates=tuple(Candidate.from_text(text) for text in texts),
            error=error,
        )
        return ArticleService(generator=generator), generator

    return factory


@pytest.fixture
def failing_service(make_service):
    service, _ = make_service(error=GenerationError("OpenAI HTTP error 503"))
    return service
