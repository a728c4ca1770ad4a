"""HTTP entry point: article lookups, Telegram webhook updates and a health check."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from telegram import Update
from telegram.ext import Application

from articlebot.app import create_application, create_article_service
from articlebot.config import Settings
from articlebot.domain.models import ArticleResponse
from articlebot.errors import GenerationError
from articlebot.services.article_service import ArticleService
from articlebot.utils.formatting import format_json

logger = logging.getLogger(__name__)

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _json_response(response: ArticleResponse, status_code: int = 200) -> Response:
    return Response(
        content=format_json(response),
        status_code=status_code,
        media_type="application/json",
    )


def _error_response(message: str, status_code: int) -> Response:
    return _json_response(ArticleResponse.failed(message), status_code)


def create_api(
    service: ArticleService,
    telegram_app: Application | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if telegram_app is not None:
            await telegram_app.initialize()
            await telegram_app.start()
            logger.info("Telegram webhook dispatcher started.")
        try:
            yield
        finally:
            if telegram_app is not None:
                await telegram_app.stop()
                await telegram_app.shutdown()
                logger.info("Telegram webhook dispatcher stopped.")

    api = FastAPI(title="German Article Bot", lifespan=lifespan)
    api.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept-Language", "Authorization"],
        max_age=86400,
    )

    @api.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    @api.api_route("/", methods=_ALL_METHODS)
    @api.api_route("/article", methods=_ALL_METHODS)
    async def article(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200)

        accept_language = request.headers.get("accept-language", "")
        if not accept_language:
            logger.warning("No language specified, defaulting to 'en'")

        if request.method == "GET":
            word = request.query_params.get("word", "")
        elif request.method == "POST":
            try:
                payload = json.loads(await request.body())
            except ValueError as exc:
                logger.error("Failed to decode JSON body: %s", exc)
                return _error_response("Invalid JSON format", 400)

            if (
                request.url.path == "/"
                and isinstance(payload, dict)
                and "update_id" in payload
                and telegram_app is not None
            ):
                await telegram_app.process_update(Update.de_json(payload, telegram_app.bot))
                return Response(status_code=200)

            word = payload.get("word") if isinstance(payload, dict) else None
            if word is not None and not isinstance(word, str):
                return _error_response("Invalid JSON format", 400)
            word = word or ""
        else:
            return _error_response("Method not allowed", 405)

        if not word:
            return _error_response("Word parameter is required", 400)

        try:
            response = await service.lookup(word, accept_language)
        except GenerationError as exc:
            logger.error("Article lookup failed for word=%r: %s", word, exc)
            return _error_response("Internal server error", 500)
        return _json_response(response)

    return api


def build_api(settings: Settings) -> FastAPI:
    service = create_article_service(settings)
    telegram_app = None
    if settings.telegram_bot_token:
        telegram_app = create_application(settings, service, webhook=True)
    return create_api(service, telegram_app)
