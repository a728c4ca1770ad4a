from __future__ import annotations

import logging

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from articlebot.constants import DEFAULT_LANGUAGE
from articlebot.errors import GenerationError
from articlebot.handlers.common import article_service
from articlebot.utils.formatting import format_chat

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "🇩🇪 Willkommen! Welcome! Добро пожаловать!\n\n"
    "I'm your German Article Bot! Send me any German noun, and I'll help you "
    "determine the correct article (der, die, das) along with usage examples.\n\n"
    "Just type a German word and I'll provide:\n"
    "• The correct article\n"
    "• Translation\n"
    "• Examples in different grammatical cases\n\n"
    'Try sending me a word like "Haus" or "Katze"!'
)
HELP_TEXT = (
    "Send a single German noun, e.g. \"Haus\".\n"
    "Translations use the language of your Telegram app.\n\n"
    "/start - welcome message\n"
    "/help - this help"
)
EMPTY_WORD_TEXT = "Please send me a German word to analyze."
SERVICE_UNAVAILABLE_TEXT = (
    "Sorry, I encountered an error while processing your request. Please try again."
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if message is None:
        return
    await message.reply_text(WELCOME_TEXT)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if message is None:
        return
    await message.reply_text(HELP_TEXT)


def user_language(update: Update) -> str:
    user = update.effective_user
    if user is not None and user.language_code:
        return user.language_code
    return DEFAULT_LANGUAGE


async def word_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if message is None:
        return
    word = (message.text or "").strip()
    if not word:
        await message.reply_text(EMPTY_WORD_TEXT)
        return

    try:
        response = await article_service(context).lookup(word, user_language(update))
    except GenerationError:
        logger.exception("Article lookup failed for chat %s", message.chat_id)
        await message.reply_text(SERVICE_UNAVAILABLE_TEXT)
        return

    await message.reply_text(format_chat(response), parse_mode=ParseMode.HTML)
