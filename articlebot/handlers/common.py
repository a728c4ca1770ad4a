from __future__ import annotations

from telegram.ext import ContextTypes

from articlebot.runtime_keys import ARTICLE_SERVICE_KEY
from articlebot.services.article_service import ArticleService


def article_service(context: ContextTypes.DEFAULT_TYPE) -> ArticleService:
    return context.application.bot_data[ARTICLE_SERVICE_KEY]
