from __future__ import annotations

ARTICLE_SERVICE_KEY = "article_service"
