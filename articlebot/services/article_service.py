from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from articlebot.constants import NO_RESPONSE_MESSAGE, UNPARSABLE_RESPONSE_MESSAGE
from articlebot.domain.classification import classify
from articlebot.domain.extraction import extract
from articlebot.domain.models import ArticleRequest, ArticleResponse, Candidate
from articlebot.domain.normalization import normalize_request
from articlebot.errors import EmptyWordError, ExtractionError, GenerationError
from articlebot.services.prompts import compile_prompt

logger = logging.getLogger(__name__)


class ArticleGenerator(Protocol):
    async def generate(self, prompt: str) -> tuple[Candidate, ...]: ...


@dataclass(frozen=True, slots=True)
class ArticleService:
    """Runs one lookup end to end: prompt, model call, extraction, classification.

    Input, model-content and extraction problems come back as a failed
    ``ArticleResponse``. Only ``GenerationError`` escapes, so that transports
    can tell an unavailable model apart from an answer they should show.
    """

    generator: ArticleGenerator
    timeout_seconds: float | None = None

    async def lookup(self, word: str | None, language: str | None = None) -> ArticleResponse:
        try:
            request = normalize_request(word, language)
        except EmptyWordError as exc:
            logger.warning("Invalid article request: word=%r language=%r", word, language)
            return ArticleResponse.failed(str(exc))
        return await self.determine(request)

    async def determine(self, request: ArticleRequest) -> ArticleResponse:
        logger.info(
            "Processing article request: word=%r language=%s",
            request.word,
            request.language,
        )
        candidates = await self._generate(compile_prompt(request), request)

        try:
            payload = extract(candidates)
        except ExtractionError as exc:
            logger.warning(
                "Extraction failed for word=%r language=%s: %s; candidates=%r",
                request.word,
                request.language,
                exc,
                [candidate.text for candidate in candidates],
            )
            if exc.candidates_seen == 0:
                return ArticleResponse.failed(NO_RESPONSE_MESSAGE)
            return ArticleResponse.failed(UNPARSABLE_RESPONSE_MESSAGE)

        response = classify(payload)
        logger.info(
            "Article request completed: word=%r language=%s success=%s interpretations=%d",
            request.word,
            request.language,
            response.success,
            len(response.data),
        )
        return response

    async def _generate(self, prompt: str, request: ArticleRequest) -> tuple[Candidate, ...]:
        try:
            if self.timeout_seconds is None:
                return await self.generator.generate(prompt)
            return await asyncio.wait_for(
                self.generator.generate(prompt), timeout=self.timeout_seconds
            )
        except GenerationError:
            logger.error(
                "Model call failed for word=%r language=%s",
                request.word,
                request.language,
            )
            raise
        except asyncio.TimeoutError as exc:
            logger.error(
                "Model call timed out after %ss for word=%r language=%s",
                self.timeout_seconds,
                request.word,
                request.language,
            )
            raise GenerationError("Model call timed out") from exc
