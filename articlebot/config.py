from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(ValueError):
    """Raised when required environment configuration is missing."""


def _mask_secret(value: str) -> str:
    return "[redacted]" if value else ""


@dataclass(frozen=True)
class Settings:
    openai_api_key: str
    telegram_bot_token: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_fallback_models: tuple[str, ...] = ("gpt-4o",)
    openai_timeout_seconds: int = 60
    openai_candidates: int = 1
    log_level: str = "INFO"
    http_host: str = "0.0.0.0"
    http_port: int = 8080

    def require_telegram_token(self) -> str:
        if not self.telegram_bot_token:
            raise ConfigError("Missing required environment variable: TELEGRAM_BOT_TOKEN")
        return self.telegram_bot_token

    def safe_log_values(self) -> dict[str, str]:
        return {
            "openai_api_key": _mask_secret(self.openai_api_key),
            "telegram_bot_token": _mask_secret(self.telegram_bot_token),
            "openai_model": self.openai_model,
            "openai_fallback_models": ",".join(self.openai_fallback_models),
            "openai_timeout_seconds": str(self.openai_timeout_seconds),
            "openai_candidates": str(self.openai_candidates),
            "log_level": self.log_level,
            "http_host": self.http_host,
            "http_port": str(self.http_port),
        }


def _require(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigError(f"Missing required environment variable: {name}")
    return value


def _parse_fallback_models(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _parse_int(name: str, default: int, *, minimum: int, maximum: int | None = None) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def load_settings() -> Settings:
    load_dotenv(override=False)
    return Settings(
        openai_api_key=_require("OPENAI_API_KEY"),
        telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "").strip(),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini").strip() or "gpt-4o-mini",
        openai_fallback_models=_parse_fallback_models(
            os.getenv("OPENAI_FALLBACK_MODELS", "gpt-4o")
        ),
        openai_timeout_seconds=_parse_int("OPENAI_TIMEOUT_SECONDS", 60, minimum=10),
        openai_candidates=_parse_int("OPENAI_CANDIDATES", 1, minimum=1, maximum=8),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        http_host=os.getenv("HTTP_HOST", "0.0.0.0").strip() or "0.0.0.0",
        http_port=_parse_int("HTTP_PORT", 8080, minimum=1, maximum=65535),
    )
