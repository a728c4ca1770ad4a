import json

from articlebot.domain.extraction import extract
from articlebot.domain.models import (
    ArticleInfo,
    ArticleResponse,
    Candidate,
    CaseExample,
    ExampleInfo,
    ExamplesInfo,
    TranslationsInfo,
)
from articlebot.utils.formatting import format_chat, format_json


def _haus() -> ArticleInfo:
    return ArticleInfo(
        word_with_article="das Haus",
        translation="the house",
        example=ExamplesInfo(
            singular=ExampleInfo(
                definite=TranslationsInfo(
                    {
                        "nominative": CaseExample("Das Haus ist groß.", "The house is big."),
                        "accusative": CaseExample("Ich sehe das Haus.", ""),
                        "dative": CaseExample("Im Haus.", "In the house."),
                    }
                ),
                indefinite=TranslationsInfo(
                    {"nominative": CaseExample("Ein Haus ist groß.", "A house is big.")}
                ),
            ),
        ),
    )


def test_format_chat_error() -> None:
    assert format_chat(ArticleResponse.failed("Not a German noun")) == (
        "❌ <b>Error:</b> Not a German noun"
    )


def test_format_chat_no_information() -> None:
    assert format_chat(ArticleResponse.succeeded([])) == "❌ No information found for this word."


def test_format_chat_renders_present_cases_in_order() -> None:
    text = format_chat(ArticleResponse.succeeded([_haus()]))
    assert text == (
        "🇩🇪 <b>das Haus</b>\n"
        "📖 <i>the house</i>\n"
        "\n"
        "📝 <b>Singular Examples:</b>\n"
        "• <b>Nominative Definite:</b> Das Haus ist groß. / <i>The house is big.</i>\n"
        "• <b>Nominative Indefinite:</b> Ein Haus ist groß. / <i>A house is big.</i>\n"
        "\n"
        "• <b>Dative Definite:</b> Im Haus. / <i>In the house.</i>"
    )
    assert "Accusative" not in text
    assert "Plural" not in text


def test_format_chat_separates_interpretations() -> None:
    see = ArticleInfo("die See", "the sea")
    lake = ArticleInfo("der See", "the lake")
    text = format_chat(ArticleResponse.succeeded([lake, see]))
    assert text == (
        "🇩🇪 <b>der See</b>\n📖 <i>the lake</i>"
        "\n\n──────────\n\n"
        "🇩🇪 <b>die See</b>\n📖 <i>the sea</i>"
    )


def test_format_chat_renders_plural_block_after_singular(haus_text: str) -> None:
    payload = extract([Candidate.from_text(haus_text)])
    text = format_chat(ArticleResponse.succeeded(payload.data))
    singular_at = text.index("📝 <b>Singular Examples:</b>")
    plural_at = text.index("📝 <b>Plural Examples:</b>")
    assert singular_at < plural_at
    assert text[plural_at - 2 : plural_at] == "\n\n"
    assert text.count("Genitive Indefinite") == 2
    assert text == text.strip()


def test_format_chat_escapes_model_text() -> None:
    info = ArticleInfo("der <Test>", "a & b")
    text = format_chat(ArticleResponse.succeeded([info]))
    assert "der &lt;Test&gt;" in text
    assert "a &amp; b" in text


def test_format_json_compact_and_pretty() -> None:
    response = ArticleResponse.failed("Kein Nomen: ä")
    assert format_json(response) == '{"success":false,"error":"Kein Nomen: ä"}'
    pretty = format_json(response, pretty=True)
    assert pretty.startswith("{\n  ")
    assert json.loads(pretty) == {"success": False, "error": "Kein Nomen: ä"}
