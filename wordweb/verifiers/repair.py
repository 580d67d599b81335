"""
Tolerant repair of puzzle artifacts.

Puzzle JSON may come from different producers (the batch builder, the
on-demand builder, older hand-edited files). Readers run it through
`repair_puzzle`, which normalizes letters and forces the grid square
instead of rejecting near-misses. Only a missing grid, an oversized grid or
an empty answer list makes an artifact invalid. Nothing here raises on bad
input.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List, Optional, Tuple

from ..engine.corpus import normalize_word
from ..engine.models import Answer, Coordinate, Puzzle
from ..engine.rng import SeededRandom
from .models import ValidationError, ValidationResult


DEFAULT_THEME = "Untitled"

# Largest grid the repairer will square up; anything bigger is rejected
MAX_SIZE = 64


def normalize_row(row: Any) -> str:
    """Uppercase a grid row and keep only A-Z."""
    return normalize_word(row if isinstance(row, str) else "")


def infer_size(declared: Any, rows: List[str]) -> Tuple[int, bool]:
    """
    Grid size from the declared `size`, else from the rows themselves.

    Returns:
        (size, inferred) where `inferred` is True when `declared` was unusable
    """
    if isinstance(declared, int) and not isinstance(declared, bool) and declared > 0:
        return declared, False
    longest = max((len(r) for r in rows), default=0)
    return max(len(rows), longest), True


def parse_path(raw: Any, size: int) -> Optional[List[Coordinate]]:
    """Coordinates from `[[x, y], ...]`, or None if malformed or out of bounds."""
    if not isinstance(raw, list) or not raw:
        return None

    path: List[Coordinate] = []
    for point in raw:
        if not isinstance(point, (list, tuple)) or len(point) != 2:
            return None
        x, y = point
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            return None
        if not (0 <= x < size and 0 <= y < size):
            return None
        path.append((x, y))
    return path


def _invalid(code: str, message: str) -> ValidationResult:
    return ValidationResult(valid=False, errors=[ValidationError(code=code, message=message)])


def repair_puzzle(data: Any) -> ValidationResult:
    """
    Normalize and square up a puzzle artifact.

    Repairs, each reported as a warning:
    - rows shorter than the size are padded with random letters
    - rows longer than the size are truncated
    - missing rows are appended as random-letter rows, extra rows dropped
    - answer paths that are malformed or out of bounds are dropped

    Repair letters are drawn from a stream seeded by the normalized rows,
    so the same artifact always repairs the same way.

    Returns:
        ValidationResult with the repaired puzzle, or valid=False with
        GRID_MISSING / SIZE_TOO_LARGE / NO_ANSWERS / INVALID_ARTIFACT errors
    """
    if not isinstance(data, Mapping):
        return _invalid("INVALID_ARTIFACT", f"Puzzle artifact is not an object ({type(data).__name__})")

    raw_grid = data.get("grid")
    if not isinstance(raw_grid, list) or not raw_grid:
        return _invalid("GRID_MISSING", "Grid is missing or empty")

    rows = [normalize_row(r) for r in raw_grid]
    if not any(rows):
        return _invalid("GRID_MISSING", "Grid has no letters")

    size, inferred = infer_size(data.get("size"), rows)
    if size > MAX_SIZE:
        return _invalid(
            "SIZE_TOO_LARGE",
            f"Grid size {size} exceeds the maximum of {MAX_SIZE}"
        )

    warnings: List[ValidationError] = []
    if inferred:
        warnings.append(ValidationError(
            code="SIZE_INFERRED",
            message=f"Size missing or invalid ({data.get('size')!r}); using {size}"
        ))

    rng = SeededRandom("|".join(rows))
    grid: List[str] = []
    for y, row in enumerate(rows[:size]):
        if len(row) < size:
            warnings.append(ValidationError(
                code="ROW_PADDED",
                message=f"Row {y} has {len(row)} letters; padded to {size}",
                row=y
            ))
            row += "".join(rng.letter() for _ in range(size - len(row)))
        elif len(row) > size:
            warnings.append(ValidationError(
                code="ROW_TRUNCATED",
                message=f"Row {y} has {len(row)} letters; truncated to {size}",
                row=y
            ))
            row = row[:size]
        grid.append(row)

    if len(rows) > size:
        warnings.append(ValidationError(
            code="ROWS_TRUNCATED",
            message=f"Grid has {len(rows)} rows; dropped {len(rows) - size}"
        ))

    while len(grid) < size:
        warnings.append(ValidationError(
            code="ROW_APPENDED",
            message=f"Row {len(grid)} missing; filled with random letters",
            row=len(grid)
        ))
        grid.append("".join(rng.letter() for _ in range(size)))

    raw_answers = data.get("answers")
    if not isinstance(raw_answers, list):
        raw_answers = []

    answers: List[Answer] = []
    seen = set()
    for raw in raw_answers:
        raw_path = None
        if isinstance(raw, Mapping):
            text = normalize_row(raw.get("text"))
            raw_path = raw.get("path")
        else:
            text = normalize_row(raw)

        if not text or text in seen:
            continue
        seen.add(text)

        path = parse_path(raw_path, size) if raw_path is not None else None
        if raw_path is not None and (path is None or len(path) != len(text)):
            warnings.append(ValidationError(
                code="PATH_DROPPED",
                message=f"Path for '{text}' is malformed or out of bounds; dropped",
                word=text
            ))
            path = None
        answers.append(Answer(text=text, path=path))

    if not answers:
        return _invalid("NO_ANSWERS", "No answers remain after normalization")

    theme = data.get("theme")
    theme = theme.strip() if isinstance(theme, str) and theme.strip() else DEFAULT_THEME

    return ValidationResult(
        valid=True,
        warnings=warnings,
        puzzle=Puzzle(theme=theme, size=size, grid=grid, answers=answers),
    )


def load_puzzle(path: str | Path) -> ValidationResult:
    """Read a puzzle JSON file and repair it."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        return _invalid("FILE_ERROR", f"Cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        return _invalid("INVALID_JSON", f"Invalid JSON in {path}: {e}")

    return repair_puzzle(data)
