"""Themed word lists for batch builds."""

import logging
from pathlib import Path
from typing import List, Optional

from .builder import PuzzleBuilder
from .corpus import normalize_words
from .errors import CorpusError
from .models import BuildConfig, BuildResult, ThemeRow


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "theme", "words")


def parse_themes(text: str) -> List[ThemeRow]:
    """
    Parse a themes TSV.

    The header names the `date`, `theme` and `words` columns in any order;
    words within a row are separated by `|`.

    Raises:
        CorpusError: If the header is missing a required column
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").strip().split("\n")
    if not lines or not lines[0].strip():
        return []

    header = [h.strip().lower() for h in lines[0].split("\t")]
    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise CorpusError(f"Themes file is missing column(s): {', '.join(missing)}")
    idx = {name: header.index(name) for name in REQUIRED_COLUMNS}

    rows: List[ThemeRow] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        cells = line.split("\t")

        def cell(name: str) -> str:
            i = idx[name]
            return cells[i].strip() if i < len(cells) else ""

        words = [w.strip() for w in cell("words").split("|") if w.strip()]
        rows.append(ThemeRow(date=cell("date"), theme=cell("theme"), words=words))

    return rows


def read_themes(path: str | Path) -> List[ThemeRow]:
    """Read a themes TSV file."""
    path = Path(path)
    if not path.exists():
        raise CorpusError(f"Themes file not found: {path}")
    rows = parse_themes(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d theme rows from %s", len(rows), path)
    return rows


def build_themed(row: ThemeRow, config: Optional[BuildConfig] = None) -> BuildResult:
    """
    Build a puzzle that hides every word of a theme row.

    The row's date is the base seed. Words are normalized but not
    length-filtered; a word that cannot fit surfaces as a BuildError.

    Raises:
        CorpusError: If the row has no usable words
    """
    if config is None:
        config = BuildConfig.for_themes()

    words = normalize_words(row.words)
    if not words:
        raise CorpusError(f"Theme '{row.theme}' for {row.date} has no usable words")

    themed = config.model_copy(update={
        "theme": row.theme,
        "word_count": len(words),
        "min_len": 1,
        "max_len": max(len(w) for w in words),
    })
    return PuzzleBuilder(config=themed, words=words).build(row.date or row.theme)
