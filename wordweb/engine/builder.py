"""Retry orchestration that turns a word corpus into a finished puzzle."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from .corpus import normalize_words, select_words
from .errors import BuildError, CorpusError, PlacementError
from .grid import LetterGrid
from .models import (
    Answer,
    AttemptStage,
    BuildConfig,
    BuildResult,
    DirectionClass,
    Placement,
    Puzzle,
)
from .placement import place_bent, place_straight
from .rng import RandomSource, SeededRandom


logger = logging.getLogger(__name__)


def attempt_seed(seed: str, salt: int) -> str:
    """Seed for one build attempt."""
    return f"{seed}|{salt}"


class PuzzleBuilder(BaseModel):
    """
    Builds puzzles from a word corpus, retrying on placement failure.

    Each attempt derives its own seed from the base seed and an attempt
    salt, selects words, places them and fills the rest of the grid. A
    failed attempt is thrown away whole; the first complete one is returned.

    Attributes:
        config: Build configuration
        words: Normalized, deduplicated corpus
    """

    config: BuildConfig = Field(default_factory=BuildConfig)
    words: List[str] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        words: List[str],
        config: Optional[BuildConfig] = None,
        **config_kwargs: Any
    ) -> "PuzzleBuilder":
        """
        Factory method that normalizes the corpus for the configured lengths.

        Args:
            words: Raw corpus words
            config: Optional BuildConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured PuzzleBuilder instance
        """
        if config is None:
            config = BuildConfig(**config_kwargs)

        corpus = normalize_words(words, min_len=config.min_len, max_len=config.max_len)
        return cls(config=config, words=corpus)

    @property
    def corpus_size(self) -> int:
        return len(self.words)

    def check_corpus(self) -> None:
        """Raise CorpusError if the corpus cannot supply enough words."""
        unique = len(set(self.words))
        if unique < self.config.word_count:
            raise CorpusError(
                f"Not enough eligible words (need >= {self.config.word_count}). Found: {unique}."
            )

    def build(self, seed: str) -> BuildResult:
        """
        Build a puzzle, trying up to `max_attempts` attempt salts.

        Raises:
            CorpusError: If the corpus is too small (never retried)
            BuildError: If every attempt failed
        """
        self.check_corpus()

        last_failure: Optional[PlacementError] = None
        for salt in range(self.config.max_attempts):
            try:
                puzzle, placements = self.attempt(seed, salt)
            except PlacementError as e:
                last_failure = e
                logger.debug("Attempt %d for seed %r failed at %s: %s", salt, seed, e.stage, e)
                continue

            logger.info("Built puzzle for seed %r in %d attempt(s)", seed, salt + 1)
            return BuildResult(
                puzzle=puzzle,
                seed=seed,
                attempt_seed=attempt_seed(seed, salt),
                attempts=salt + 1,
                placements=placements,
            )

        size = self.config.size
        word = last_failure.word if last_failure else None
        raise BuildError(
            f"Unable to place {self.config.word_count} words after {self.config.max_attempts} attempts "
            f"(corpus of {self.corpus_size} words, {size}x{size} grid); "
            f"last failure: '{word}' ({len(word or '')} letters). "
            f"Check for very long words or reduce density.",
            word=word,
            size=size,
            attempts=self.config.max_attempts,
            seed=seed,
        )

    def attempt(self, seed: str, salt: int) -> Tuple[Puzzle, List[Placement]]:
        """
        Run one complete build attempt.

        Raises:
            PlacementError: If any selected word cannot be placed
        """
        rng = SeededRandom(attempt_seed(seed, salt))
        strategy = self.config.strategy

        picked = select_words(self.words, self.config.word_count, rng)
        order = sorted(picked, key=len, reverse=True) if strategy.longest_first else picked

        grid = LetterGrid(self.config.size)
        placements: Dict[str, Placement] = {}
        for index, word in enumerate(order):
            stage: AttemptStage = "PLACE_REMAINING"
            required: Optional[DirectionClass] = None
            if index < len(strategy.required_classes):
                stage = "PLACE_REQUIRED_CLASSES"
                required = strategy.required_classes[index]

            placement = self.place_word(grid, word, rng, required)
            if placement is None:
                raise PlacementError(word, grid.size, stage)
            placements[word] = placement

        grid.fill(rng)

        puzzle = Puzzle(
            theme=self.config.theme,
            size=grid.size,
            grid=grid.rows(),
            answers=[Answer(text=word, path=placements[word].path) for word in picked],
        )
        return puzzle, [placements[word] for word in order]

    def place_word(
        self,
        grid: LetterGrid,
        word: str,
        rng: RandomSource,
        required: Optional[DirectionClass] = None,
    ) -> Optional[Placement]:
        """
        Place one word according to the strategy.

        Straight placement is tried first (restricted to `required`, then
        unrestricted). Bent placement follows when allowed, or goes first
        for words too long for a straight line or at least
        `bent_primary_length` letters.
        """
        strategy = self.config.strategy
        too_long = len(word) > grid.size
        bent_primary = strategy.bent_primary_length is not None and len(word) >= strategy.bent_primary_length

        if not (too_long or (strategy.allow_bent and bent_primary)):
            placement = None
            if required is not None:
                placement = place_straight(grid, word, rng, required, strategy.max_tries)
            if placement is None:
                placement = place_straight(grid, word, rng, None, strategy.max_tries)
            if placement is not None:
                return placement

        if not strategy.allow_bent:
            return None
        return self.place_bent(grid, word, rng)

    def place_bent(self, grid: LetterGrid, word: str, rng: RandomSource) -> Optional[Placement]:
        """Bent placement at the turn budget, then once more at budget + 1."""
        strategy = self.config.strategy
        budgets = [strategy.max_turns]
        if strategy.lax_turn_retry:
            budgets.append(strategy.max_turns + 1)

        for budget in budgets:
            placement = place_bent(grid, word, rng, max_turns=budget)
            if placement is not None:
                return placement
        return None


def build_puzzle(words: List[str], seed: str, config: Optional[BuildConfig] = None) -> BuildResult:
    """Build one puzzle from a raw corpus."""
    return PuzzleBuilder.create(words, config).build(seed)


def save_puzzle(puzzle: Puzzle, path: str | Path, include_paths: bool = True) -> None:
    """
    Write a puzzle artifact as JSON.

    Args:
        puzzle: Puzzle to save
        path: Destination file (parent directories are created)
        include_paths: Whether answers carry their paths
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding="utf-8") as f:
        json.dump(puzzle.to_artifact(include_paths=include_paths), f, indent=2)
