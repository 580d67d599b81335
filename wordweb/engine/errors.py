"""Exceptions raised while building word web puzzles."""

from typing import Optional


class WordWebError(Exception):
    """Base exception for puzzle generation failures."""


class CorpusError(WordWebError):
    """Raised when the word corpus is missing or too small for the request."""


class PlacementError(WordWebError):
    """
    Raised when a single word cannot be placed during one build attempt.

    Recoverable: the orchestrator discards the attempt and retries with
    the next attempt salt.
    """

    def __init__(self, word: str, size: int, stage: str):
        self.word = word
        self.size = size
        self.stage = stage
        super().__init__(f"Could not place '{word}' on a {size}x{size} grid during {stage}")


class BuildError(WordWebError):
    """Raised when every build attempt failed."""

    def __init__(
        self,
        message: str,
        word: Optional[str] = None,
        size: Optional[int] = None,
        attempts: int = 0,
        seed: Optional[str] = None,
    ):
        self.word = word
        self.size = size
        self.attempts = attempts
        self.seed = seed
        super().__init__(message)
