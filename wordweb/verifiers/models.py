"""Data models for puzzle validation."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..engine.models import Puzzle


class ValidationError(BaseModel):
    """A single validation finding."""
    code: str
    message: str
    word: Optional[str] = None
    row: Optional[int] = None


class ValidationResult(BaseModel):
    """Result of validating or repairing a puzzle artifact."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
    puzzle: Optional[Puzzle] = None

    @property
    def repaired(self) -> bool:
        """True if the artifact needed any repair."""
        return bool(self.warnings)
