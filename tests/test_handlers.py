import asyncio
from unittest.mock import AsyncMock, MagicMock

from telegram.constants import ParseMode

from articlebot.handlers.basic import (
    EMPTY_WORD_TEXT,
    SERVICE_UNAVAILABLE_TEXT,
    WELCOME_TEXT,
    start_command,
    word_message,
)
from articlebot.handlers.console import process_request
from articlebot.runtime_keys import ARTICLE_SERVICE_KEY


def _update(text: str, language_code: str | None = "de") -> MagicMock:
    update = MagicMock()
    update.effective_message.text = text
    update.effective_message.reply_text = AsyncMock()
    update.effective_user.language_code = language_code
    return update


def _context(service) -> MagicMock:
    context = MagicMock()
    context.application.bot_data = {ARTICLE_SERVICE_KEY: service}
    return context


def test_start_command_sends_welcome() -> None:
    update = _update("/start")
    asyncio.run(start_command(update, _context(None)))
    update.effective_message.reply_text.assert_awaited_once_with(WELCOME_TEXT)


def test_word_message_replies_with_html(make_service, haus_text: str) -> None:
    service, generator = make_service(haus_text)
    update = _update("  Haus ", language_code="en-GB")
    asyncio.run(word_message(update, _context(service)))

    args, kwargs = update.effective_message.reply_text.await_args
    assert kwargs["parse_mode"] == ParseMode.HTML
    assert args[0].startswith("🇩🇪 <b>das Haus</b>")
    assert "translation in English" in generator.prompts[0]


def test_word_message_uses_default_language(make_service) -> None:
    service, generator = make_service('{"error":false,"data":[]}')
    update = _update("Haus", language_code=None)
    asyncio.run(word_message(update, _context(service)))
    assert "translation in English" in generator.prompts[0]
    args, _ = update.effective_message.reply_text.await_args
    assert args[0] == "❌ No information found for this word."


def test_word_message_rejects_blank_text(make_service) -> None:
    service, generator = make_service("{}")
    update = _update("   ")
    asyncio.run(word_message(update, _context(service)))
    update.effective_message.reply_text.assert_awaited_once_with(EMPTY_WORD_TEXT)
    assert generator.prompts == []


def test_word_message_apologises_on_upstream_failure(failing_service) -> None:
    update = _update("Haus")
    asyncio.run(word_message(update, _context(failing_service)))
    update.effective_message.reply_text.assert_awaited_once_with(SERVICE_UNAVAILABLE_TEXT)


def test_console_prints_indented_json(make_service) -> None:
    service, _ = make_service('{"error":true,"errorMessage":"Kein Nomen"}')
    output = asyncio.run(process_request(service, "laufen", "de"))
    assert output == '{\n  "success": false,\n  "error": "Kein Nomen"\n}'


def test_console_empty_word(make_service) -> None:
    service, _ = make_service("{}")
    output = asyncio.run(process_request(service, " ", "en"))
    assert '"error": "Word cannot be empty"' in output
