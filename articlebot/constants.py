from __future__ import annotations

from typing import Literal

GrammaticalCase = Literal["nominative", "accusative", "dative", "genitive"]
GrammaticalNumber = Literal["singular", "plural"]
ArticleKind = Literal["definite", "indefinite"]

CASE_ORDER: tuple[GrammaticalCase, ...] = (
    "nominative",
    "accusative",
    "dative",
    "genitive",
)
NUMBER_ORDER: tuple[GrammaticalNumber, ...] = ("singular", "plural")
ARTICLE_ORDER: tuple[ArticleKind, ...] = ("definite", "indefinite")

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "ru": "Russian",
    "uk": "Ukrainian",
    "be": "Belarusian",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "pl": "Polish",
    "nl": "Dutch",
    "tr": "Turkish",
    "ar": "Arabic",
    "fa": "Persian",
    "hy": "Armenian",
    "ka": "Georgian",
    "kk": "Kazakh",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}

EMPTY_WORD_MESSAGE = "Word cannot be empty"
NO_RESPONSE_MESSAGE = "No response from AI service"
UNPARSABLE_RESPONSE_MESSAGE = "Failed to parse AI response"
NOT_A_NOUN_MESSAGE = "The input is not a valid German noun"
NO_INFORMATION_MESSAGE = "❌ No information found for this word."
CHAT_DIVIDER = "─" * 10
