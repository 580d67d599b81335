"""Deterministic word web puzzle engine."""

from .models import (
    DirectionClass,
    Coordinate,
    AttemptStage,
    PlacementStrategy,
    BuildConfig,
    Placement,
    Answer,
    Puzzle,
    BuildResult,
    ThemeRow,
)
from .errors import WordWebError, CorpusError, PlacementError, BuildError
from .rng import RandomSource, SeededRandom, hash_seed
from .corpus import normalize_word, normalize_words, parse_corpus, load_corpus, select_words
from .grid import LetterGrid
from .placement import DIRECTIONS, Direction, place_straight, place_bent, count_turns
from .builder import PuzzleBuilder, attempt_seed, build_puzzle, save_puzzle
from .daily import central_date_str, daily_seed, build_daily
from .themes import parse_themes, read_themes, build_themed

__all__ = [
    # Models
    "DirectionClass",
    "Coordinate",
    "AttemptStage",
    "PlacementStrategy",
    "BuildConfig",
    "Placement",
    "Answer",
    "Puzzle",
    "BuildResult",
    "ThemeRow",
    # Errors
    "WordWebError",
    "CorpusError",
    "PlacementError",
    "BuildError",
    # Randomness
    "RandomSource",
    "SeededRandom",
    "hash_seed",
    # Corpus
    "normalize_word",
    "normalize_words",
    "parse_corpus",
    "load_corpus",
    "select_words",
    # Placement
    "LetterGrid",
    "DIRECTIONS",
    "Direction",
    "place_straight",
    "place_bent",
    "count_turns",
    # Building
    "PuzzleBuilder",
    "attempt_seed",
    "build_puzzle",
    "save_puzzle",
    "central_date_str",
    "daily_seed",
    "build_daily",
    "parse_themes",
    "read_themes",
    "build_themed",
]
