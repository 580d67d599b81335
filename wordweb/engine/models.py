"""
Pydantic models for the puzzle engine.

This module contains the data models (configuration, placements, puzzles,
build results) shared by the engine and the verifiers. The placement and
orchestration logic lives in its own modules.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


# Type aliases
DirectionClass = Literal["H", "V", "D"]
Coordinate = Tuple[int, int]
AttemptStage = Literal[
    "SELECT_WORDS",
    "PLACE_REQUIRED_CLASSES",
    "PLACE_REMAINING",
    "FILL_RANDOM",
    "DONE",
]


class PlacementStrategy(BaseModel):
    """How words are laid out on the grid."""
    allow_bent: bool = False
    max_turns: int = Field(default=2, ge=0)
    lax_turn_retry: bool = True  # retry bent placement once at max_turns + 1
    required_classes: List[Optional[DirectionClass]] = Field(
        default_factory=lambda: ["H", "V", "D"]
    )
    max_tries: int = Field(default=800, ge=1)
    bent_primary_length: Optional[int] = Field(default=None, ge=1)
    longest_first: bool = False


class BuildConfig(BaseModel):
    """Configuration for building one puzzle."""
    theme: str = "Wodehouse Sampler"
    size: int = Field(default=12, ge=2)
    word_count: int = Field(default=6, ge=1)
    min_len: int = Field(default=4, ge=1)
    max_len: int = Field(default=12, ge=1)
    max_attempts: int = Field(default=50, ge=1)
    include_paths: bool = True
    strategy: PlacementStrategy = Field(default_factory=PlacementStrategy)

    @model_validator(mode="after")
    def _check_lengths(self) -> "BuildConfig":
        if self.min_len > self.max_len:
            raise ValueError(f"min_len ({self.min_len}) is greater than max_len ({self.max_len})")
        return self

    @classmethod
    def for_themes(cls, **overrides: Any) -> "BuildConfig":
        """Preset for curated theme lists: larger grid, bent paths, long words first."""
        data: Dict[str, Any] = {
            "size": 14,
            "strategy": PlacementStrategy(allow_bent=True, longest_first=True),
        }
        data.update(overrides)
        return cls(**data)


class Placement(BaseModel):
    """One word committed to the grid."""
    word: str
    path: List[Coordinate]
    direction_class: Optional[DirectionClass] = None  # None for bent paths
    turns: int = 0


class Answer(BaseModel):
    """A target word, optionally with the cells that spell it."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    path: Optional[List[Coordinate]] = None


class Puzzle(BaseModel):
    """
    A finished word web puzzle.

    Attributes:
        theme: Title shown above the grid
        size: Grid side length N
        grid: N rows of N uppercase letters
        answers: Target words, with paths when known
    """

    model_config = ConfigDict(frozen=True)

    theme: str
    size: int = Field(..., ge=1)
    grid: List[str]
    answers: List[Answer]

    @property
    def words(self) -> List[str]:
        """Answer texts in order."""
        return [a.text for a in self.answers]

    def letter_at(self, x: int, y: int) -> str:
        """Letter at column x, row y."""
        return self.grid[y][x]

    def to_artifact(self, include_paths: bool = True) -> Dict[str, Any]:
        """
        Serialize to the published JSON shape.

        Answers become `{"text", "path"}` objects when paths are included
        and known, plain strings otherwise.
        """
        answers: List[Union[str, Dict[str, Any]]] = []
        for answer in self.answers:
            if include_paths and answer.path is not None:
                answers.append({"text": answer.text, "path": [list(p) for p in answer.path]})
            else:
                answers.append(answer.text)

        return {
            "theme": self.theme,
            "size": self.size,
            "grid": list(self.grid),
            "answers": answers,
        }


class BuildResult(BaseModel):
    """Result of a successful build, with its provenance."""
    puzzle: Puzzle
    seed: str
    attempt_seed: str
    attempts: int
    placements: List[Placement] = Field(default_factory=list)


class ThemeRow(BaseModel):
    """One row of a themes file: a dated, titled word list."""
    date: str
    theme: str
    words: List[str] = Field(default_factory=list)
