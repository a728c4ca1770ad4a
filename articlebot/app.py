from __future__ import annotations

import logging

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from articlebot.config import Settings
from articlebot.handlers.basic import help_command, start_command, word_message
from articlebot.runtime_keys import ARTICLE_SERVICE_KEY
from articlebot.services.article_service import ArticleService
from articlebot.services.content_generation import OpenAIArticleGenerator

logger = logging.getLogger(__name__)


def create_article_service(settings: Settings) -> ArticleService:
    generator = OpenAIArticleGenerator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        fallback_models=settings.openai_fallback_models,
        timeout_seconds=settings.openai_timeout_seconds,
        candidate_count=settings.openai_candidates,
    )
    # Fallback models may each use the full HTTP timeout.
    attempts = 1 + len(settings.openai_fallback_models)
    return ArticleService(
        generator=generator,
        timeout_seconds=float(settings.openai_timeout_seconds * attempts + 5),
    )


def create_application(
    settings: Settings,
    service: ArticleService | None = None,
    *,
    webhook: bool = False,
) -> Application:
    builder = (
        Application.builder()
        .token(settings.require_telegram_token())
        .post_init(_post_init)
        .concurrent_updates(True)
    )
    if webhook:
        builder = builder.updater(None)
    app = builder.build()

    app.bot_data[ARTICLE_SERVICE_KEY] = service or create_article_service(settings)

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, word_message))
    app.add_error_handler(_error_handler)
    return app


async def _post_init(app: Application) -> None:
    await app.bot.set_my_commands(
        [
            BotCommand("start", "Welcome message"),
            BotCommand("help", "How to use the bot"),
        ]
    )
    logger.info("Telegram command menu registered.")


async def _error_handler(
    update: object, context: ContextTypes.DEFAULT_TYPE
) -> None:  # pragma: no cover - framework callback
    logger.exception("Unhandled telegram error", exc_info=context.error)
    if isinstance(update, Update) and update.effective_message is not None:
        await update.effective_message.reply_text(
            "Sorry, something went wrong. Please try again later."
        )
