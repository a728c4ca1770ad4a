from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib import error, request

from articlebot.domain.models import Candidate
from articlebot.errors import GenerationError

logger = logging.getLogger(__name__)

_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


@dataclass(frozen=True, slots=True)
class OpenAIArticleGenerator:
    api_key: str
    model: str = "gpt-4o-mini"
    fallback_models: tuple[str, ...] = ("gpt-4o",)
    timeout_seconds: int = 60
    candidate_count: int = 1
    url: str = _CHAT_COMPLETIONS_URL

    async def generate(self, prompt: str) -> tuple[Candidate, ...]:
        return await asyncio.to_thread(self._generate_sync, prompt)

    def _generate_sync(self, prompt: str) -> tuple[Candidate, ...]:
        payload = {
            "temperature": 0.2,
            "n": max(1, self.candidate_count),
            "response_format": {"type": "json_object"},
            "messages": [
                {
                    "role": "system",
                    "content": (
                        "You are a German grammar assistant. "
                        "Return strict JSON only without markdown."
                    ),
                },
                {"role": "user", "content": prompt},
            ],
        }
        data = self._chat_completion_with_fallback(payload)
        return _parse_candidates(data)

    def _chat_completion_with_fallback(self, payload: dict) -> dict:
        models: list[str] = []
        for candidate in (self.model, *self.fallback_models):
            name = candidate.strip()
            if name and name not in models:
                models.append(name)
        if not models:
            raise GenerationError("No OpenAI model configured")

        last_error: GenerationError | None = None
        for index, model_name in enumerate(models):
            request_payload = dict(payload)
            request_payload["model"] = model_name
            try:
                data = self._chat_completion_sync(request_payload)
            except GenerationError as exc:
                last_error = exc
                if _is_model_access_error(str(exc)) and index < (len(models) - 1):
                    logger.warning(
                        "OpenAI model '%s' unavailable, trying fallback model '%s'",
                        model_name,
                        models[index + 1],
                    )
                    continue
                raise
            if index > 0:
                logger.warning("OpenAI fallback model '%s' is being used", model_name)
            return data

        raise last_error or GenerationError("OpenAI request failed")

    def _chat_completion_sync(self, payload: dict) -> dict:
        body = json.dumps(payload).encode("utf-8")
        req = request.Request(
            url=self.url,
            method="POST",
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            data=body,
        )
        try:
            with request.urlopen(req, timeout=self.timeout_seconds) as response:
                raw = response.read().decode("utf-8")
        except error.HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="replace")
            logger.error("OpenAI HTTP error: %s", exc.code)
            raise GenerationError(f"OpenAI HTTP error {exc.code}: {detail}") from exc
        except Exception as exc:
            logger.exception("OpenAI request failed")
            raise GenerationError("OpenAI request failed") from exc

        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            logger.exception("OpenAI returned a non-JSON envelope")
            raise GenerationError("OpenAI response parsing failed") from exc
        if not isinstance(parsed, dict):
            raise GenerationError("OpenAI response parsing failed")
        return parsed


def _parse_candidates(payload: dict[str, Any]) -> tuple[Candidate, ...]:
    """Turn chat-completion choices into candidates, keeping filtered ones as empty."""
    choices = payload.get("choices")
    if not isinstance(choices, list):
        raise GenerationError("OpenAI response has no choices")

    candidates: list[Candidate] = []
    for choice in choices:
        if not isinstance(choice, dict):
            continue
        if choice.get("finish_reason") == "content_filter":
            candidates.append(Candidate(filtered=True))
            continue
        message = choice.get("message")
        content = message.get("content") if isinstance(message, dict) else None
        candidates.append(Candidate(text_parts=_content_parts(content)))
    return tuple(candidates)


def _content_parts(content: object) -> tuple[str, ...]:
    if isinstance(content, str):
        return (content,)
    if not isinstance(content, list):
        return ()
    parts: list[str] = []
    for item in content:
        if isinstance(item, dict):
            text = item.get("text")
            if isinstance(text, str) and text:
                parts.append(text)
    return tuple(parts)


def _is_model_access_error(message: str) -> bool:
    text = message.lower()
    return (
        "model_not_found" in text
        or "does not have access to model" in text
        or "unknown model" in text
        or "not a chat model" in text
    )
