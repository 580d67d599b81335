"""
Strict verification of a built puzzle.

Checks:
1. Grid shape (size rows of size letters, A-Z only)
2. Answer paths (in bounds, 8-adjacent steps, no revisits)
3. Spelling (grid letters along each path spell the answer)
4. Non-overlap (no two answers share a cell), when required
"""

from typing import Dict, List

from ..engine.models import Answer, Coordinate, Puzzle
from .models import ValidationError, ValidationResult


def validate_grid(puzzle: Puzzle) -> List[ValidationError]:
    """Check that the grid is exactly size x size uppercase letters."""
    errors: List[ValidationError] = []
    n = puzzle.size

    if len(puzzle.grid) != n:
        errors.append(ValidationError(
            code="GRID_SHAPE",
            message=f"Grid has {len(puzzle.grid)} rows, expected {n}"
        ))

    for y, row in enumerate(puzzle.grid):
        if len(row) != n:
            errors.append(ValidationError(
                code="GRID_SHAPE",
                message=f"Row {y} has {len(row)} letters, expected {n}",
                row=y
            ))
        if not (row.isascii() and row.isalpha() and row.isupper()):
            errors.append(ValidationError(
                code="GRID_ALPHABET",
                message=f"Row {y} contains characters outside A-Z: '{row}'",
                row=y
            ))

    return errors


def validate_path(puzzle: Puzzle, answer: Answer) -> List[ValidationError]:
    """Check one answer's path against the grid."""
    errors: List[ValidationError] = []
    path = answer.path or []
    word = answer.text

    if len(path) != len(word):
        errors.append(ValidationError(
            code="PATH_MISMATCH",
            message=f"Path for '{word}' has {len(path)} cells for {len(word)} letters",
            word=word
        ))
        return errors

    outside = [(x, y) for x, y in path if not (0 <= x < puzzle.size and 0 <= y < puzzle.size)]
    if outside:
        errors.append(ValidationError(
            code="PATH_OUT_OF_BOUNDS",
            message=f"Path for '{word}' leaves the grid at {outside[0]}",
            word=word
        ))
        return errors

    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        if max(abs(x1 - x0), abs(y1 - y0)) != 1:
            errors.append(ValidationError(
                code="PATH_NOT_ADJACENT",
                message=f"Path for '{word}' jumps from {(x0, y0)} to {(x1, y1)}",
                word=word
            ))
            break

    if len(set(path)) != len(path):
        errors.append(ValidationError(
            code="PATH_REVISIT",
            message=f"Path for '{word}' visits a cell twice",
            word=word
        ))

    spelled = "".join(
        puzzle.grid[y][x] if y < len(puzzle.grid) and x < len(puzzle.grid[y]) else "?"
        for x, y in path
    )
    if spelled != word:
        errors.append(ValidationError(
            code="PATH_MISMATCH",
            message=f"Path for '{word}' spells '{spelled}'",
            word=word
        ))

    return errors


def verify_puzzle(puzzle: Puzzle, require_disjoint: bool = True) -> ValidationResult:
    """
    Verify a puzzle's grid and answer paths.

    Args:
        puzzle: The puzzle to check
        require_disjoint: Report answers that share a cell (straight-line builds)

    Returns:
        ValidationResult; answers without paths only produce warnings
    """
    errors = validate_grid(puzzle)
    warnings: List[ValidationError] = []
    owners: Dict[Coordinate, str] = {}

    for answer in puzzle.answers:
        if answer.path is None:
            warnings.append(ValidationError(
                code="PATH_MISSING",
                message=f"Answer '{answer.text}' has no path",
                word=answer.text
            ))
            continue

        errors.extend(validate_path(puzzle, answer))

        if not require_disjoint:
            continue
        for cell in answer.path:
            owner = owners.setdefault(cell, answer.text)
            if owner != answer.text:
                errors.append(ValidationError(
                    code="PATH_OVERLAP",
                    message=f"'{answer.text}' and '{owner}' share cell {cell}",
                    word=answer.text
                ))
                break

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        puzzle=puzzle,
    )
