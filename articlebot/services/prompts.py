"""Instruction text sent to the model for a single lookup."""

from __future__ import annotations

import json

from articlebot.constants import (
    ARTICLE_ORDER,
    CASE_ORDER,
    LANGUAGE_NAMES,
    NUMBER_ORDER,
)
from articlebot.domain.models import ArticleRequest


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code.strip().lower(), code)


def _translations_schema(word: str, language: str, number: str, article: str) -> dict[str, str]:
    slots: dict[str, str] = {}
    for case in CASE_ORDER:
        slots[f"{case}Example"] = (
            f'simple example using the word "{word}" in {number} {case} {article} case'
        )
        slots[f"{case}Translation"] = (
            f"translation of the {number} {case} {article} example in {language}"
        )
    return slots


def build_schema(word: str, language: str) -> dict[str, object]:
    example = {
        number: {
            article: _translations_schema(word, language, number, article)
            for article in ARTICLE_ORDER
        }
        for number in NUMBER_ORDER
    }
    return {
        "error": "false/true",
        "errorMessage": (
            f"Only if there's an error, explain what's wrong in {language} language"
        ),
        "data": [
            {
                "wordWithArticle": "article + word in German",
                "translation": f"translation in {language}",
                "example": example,
            }
        ],
    }


def compile_prompt(request: ArticleRequest) -> str:
    language = language_name(request.language)
    schema = json.dumps(build_schema(request.word, language), ensure_ascii=False, indent=2)
    return (
        "You are a German language assistant. I will provide you with a German noun (Nomen), "
        "and you need to determine the correct article (der, die, das).\n\n"
        f'The word is: "{request.word}"\n'
        f"Target language for translations and error messages: {language}\n"
        "Respond ONLY with a JSON object in EXACTLY this structure, without markdown:\n"
        f"{schema}\n\n"
        "If the input is not a German noun or contains multiple words that aren't a compound noun, "
        f'set "error" to true and provide an appropriate error message in {language}.\n'
        "If there are multiple possible interpretations, include each as a separate object "
        "in the data array.\n"
        "Ensure ALL field values are properly escaped for JSON."
    )
