from __future__ import annotations

import logging

from articlebot.services.article_service import ArticleService
from articlebot.utils.formatting import format_json

logger = logging.getLogger(__name__)


async def process_request(service: ArticleService, word: str, language: str | None) -> str:
    """Run one lookup and return it as indented JSON.

    ``GenerationError`` is left to the caller, which decides the exit status.
    """
    logger.info("Processing console request: word=%r language=%r", word, language)
    response = await service.lookup(word, language)
    return format_json(response, pretty=True)
