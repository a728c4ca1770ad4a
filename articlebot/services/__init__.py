"""Service layer exports."""

from articlebot.services.article_service import ArticleGenerator, ArticleService
from articlebot.services.content_generation import OpenAIArticleGenerator

__all__ = ["ArticleGenerator", "ArticleService", "OpenAIArticleGenerator"]
