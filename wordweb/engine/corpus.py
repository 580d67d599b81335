"""Word corpus loading, normalization and seeded word selection."""

import logging
import re
from pathlib import Path
from typing import Iterable, List

from .errors import CorpusError
from .rng import RandomSource, shuffled


logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r'\r?\n|\t|,')
_NON_LETTERS = re.compile(r'[^A-Z]')


def normalize_word(word: str) -> str:
    """Uppercase `word` and strip everything outside A-Z."""
    return _NON_LETTERS.sub('', str(word or '').upper())


def normalize_words(words: Iterable[str], min_len: int = 1, max_len: int = 10_000) -> List[str]:
    """Normalize, length-filter and deduplicate, keeping first occurrences."""
    seen = set()
    result: List[str] = []
    for raw in words:
        word = normalize_word(raw)
        if not word or not (min_len <= len(word) <= max_len):
            continue
        if word in seen:
            continue
        seen.add(word)
        result.append(word)
    return result


def parse_corpus(text: str, min_len: int = 4, max_len: int = 12) -> List[str]:
    """Split raw corpus text on newlines, tabs and commas into eligible words."""
    return normalize_words(_SEPARATORS.split(text), min_len=min_len, max_len=max_len)


def load_corpus(path: str | Path, min_len: int = 4, max_len: int = 12) -> List[str]:
    """
    Load a corpus file.

    Raises:
        CorpusError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise CorpusError(f"Corpus file not found: {path}")

    words = parse_corpus(path.read_text(encoding="utf-8"), min_len=min_len, max_len=max_len)
    logger.info("Loaded %d eligible words from %s", len(words), path)
    return words


def select_words(words: List[str], count: int, rng: RandomSource) -> List[str]:
    """
    Shuffle the corpus and pick the first `count` unique words.

    Raises:
        CorpusError: If fewer than `count` unique words are available
    """
    unique = len(set(words))
    if unique < count:
        raise CorpusError(f"Not enough eligible words (need >= {count}). Found: {unique}.")

    picked: List[str] = []
    for word in shuffled(rng, words):
        if word not in picked:
            picked.append(word)
        if len(picked) == count:
            break
    return picked
