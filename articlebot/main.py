from __future__ import annotations

import argparse
import asyncio
import logging

import uvicorn
from telegram import Update

from articlebot.api import build_api
from articlebot.app import create_application, create_article_service
from articlebot.config import ConfigError, load_settings
from articlebot.errors import GenerationError
from articlebot.handlers.console import process_request
from articlebot.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="German article bot")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("bot", help="Run the Telegram bot with long polling.")
    commands.add_parser("serve", help="Run the HTTP API (and Telegram webhook).")

    lookup = commands.add_parser("lookup", help="Look up one word and print JSON.")
    lookup.add_argument("word", help="German noun, e.g. Haus")
    lookup.add_argument("language", nargs="?", default="en", help="Translation language code.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    configure_logging(
        settings.log_level,
        secrets=(settings.openai_api_key, settings.telegram_bot_token),
    )
    logger.info("Loaded configuration: %s", settings.safe_log_values())

    if args.command == "lookup":
        service = create_article_service(settings)
        try:
            output = asyncio.run(process_request(service, args.word, args.language))
        except GenerationError as exc:
            raise SystemExit(f"Failed to process request: {exc}") from exc
        print(output)
        return

    if args.command == "serve":
        uvicorn.run(
            build_api(settings),
            host=settings.http_host,
            port=settings.http_port,
            log_config=None,
        )
        return

    try:
        application = create_application(settings)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
