from __future__ import annotations


class ArticleBotError(RuntimeError):
    """Base class for pipeline errors."""


class EmptyWordError(ArticleBotError, ValueError):
    """Raised when the requested word is empty after trimming."""


class ExtractionError(ArticleBotError):
    """Raised when no model candidate contains a parsable answer."""

    def __init__(self, message: str, *, candidates_seen: int = 0) -> None:
        super().__init__(message)
        self.candidates_seen = candidates_seen


class GenerationError(ArticleBotError):
    """Raised when the generative model call itself fails."""
