from __future__ import annotations

from articlebot.constants import NOT_A_NOUN_MESSAGE
from articlebot.domain.models import ArticleResponse, ParsedPayload


def classify(payload: ParsedPayload) -> ArticleResponse:
    if payload.error:
        # The model may flag an error without explaining it.
        return ArticleResponse.failed(payload.error_message.strip() or NOT_A_NOUN_MESSAGE)
    return ArticleResponse.succeeded(payload.data)
