"""Puzzle artifact validation for word web."""

from .verify import verify_puzzle, validate_grid, validate_path
from .repair import MAX_SIZE, repair_puzzle, load_puzzle, normalize_row, infer_size, parse_path
from .models import ValidationError, ValidationResult

__all__ = [
    # Strict verification
    "verify_puzzle",
    "validate_grid",
    "validate_path",
    # Tolerant repair
    "repair_puzzle",
    "load_puzzle",
    "normalize_row",
    "infer_size",
    "parse_path",
    "MAX_SIZE",
    # Models
    "ValidationError",
    "ValidationResult",
]
