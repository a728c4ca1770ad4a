from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterable

_REDACTED = "***REDACTED***"
# Telegram puts the bot token in request URLs; OpenAI keys travel as bearer tokens.
_TOKEN_PATTERNS = (
    re.compile(r"(api\.telegram\.org/(?:file/)?bot)([^/\s]+)"),
    re.compile(r"(Bearer\s+)(\S+)"),
)
_QUIET_LOGGERS = ("httpx", "httpcore", "telegram.ext.Updater", "uvicorn.access")


class SecretRedactingFilter(logging.Filter):
    """Masks the configured secrets and token-shaped fragments in log messages."""

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self._secrets = tuple(sorted({s for s in secrets if s}, key=len, reverse=True))

    def redact(self, message: str) -> str:
        for secret in self._secrets:
            message = message.replace(secret, _REDACTED)
        for pattern in _TOKEN_PATTERNS:
            message = pattern.sub(rf"\1{_REDACTED}", message)
        return message

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def configure_logging(log_level: str, *, secrets: Iterable[str] = ()) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    redacting = SecretRedactingFilter(secrets)
    for handler in logging.getLogger().handlers:
        handler.addFilter(redacting)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
