"""
Test suite for strict puzzle verification.

Covers:
- Grid errors (GRID_SHAPE, GRID_ALPHABET)
- Path errors (PATH_MISMATCH, PATH_OUT_OF_BOUNDS, PATH_NOT_ADJACENT, PATH_REVISIT)
- Shared cells (PATH_OVERLAP) when disjoint answers are required
- Answers without paths (PATH_MISSING warning)
"""

import pytest

from wordweb.engine import Answer, Puzzle, build_puzzle
from wordweb.verifiers import validate_grid, validate_path, verify_puzzle


GRID = ["CATX", "OXXX", "WXXX", "XXXX"]


def make_puzzle(*answers, grid=GRID, size=4):
    return Puzzle(theme="Test", size=size, grid=grid, answers=list(answers))


def codes(items):
    return [item.code for item in items]


class TestValidPuzzles:
    """Puzzles that should pass."""

    def test_straight_answers(self):
        """Horizontal and vertical answers from a shared-free grid."""
        puzzle = make_puzzle(
            Answer(text="CAT", path=[(0, 0), (1, 0), (2, 0)]),
            Answer(text="OW", path=[(0, 1), (0, 2)]),
        )
        result = verify_puzzle(puzzle)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_reversed_path(self):
        """Paths may run right to left."""
        puzzle = make_puzzle(Answer(text="TAC", path=[(2, 0), (1, 0), (0, 0)]))
        assert verify_puzzle(puzzle).valid

    def test_bent_path(self):
        """Bent paths are fine as long as each step is adjacent."""
        puzzle = make_puzzle(Answer(text="WOCA", path=[(0, 2), (0, 1), (0, 0), (1, 0)]))
        assert verify_puzzle(puzzle).valid

    def test_built_puzzle(self):
        """A freshly built puzzle verifies."""
        words = ["WOOSTER", "JEEVES", "BLANDINGS", "WHISKY", "AGATHA", "PSMITH"]
        result = verify_puzzle(build_puzzle(words, "verify").puzzle)
        assert result.valid, [e.message for e in result.errors]


class TestGridErrors:
    """Test grid shape and alphabet checks."""

    def test_missing_row(self):
        """Too few rows is a shape error."""
        puzzle = make_puzzle(Answer(text="CAT"), grid=GRID[:3])
        assert "GRID_SHAPE" in codes(validate_grid(puzzle))

    def test_short_row(self):
        """A row of the wrong length is a shape error naming the row."""
        puzzle = make_puzzle(Answer(text="CAT"), grid=["CATX", "OXX", "WXXX", "XXXX"])
        errors = validate_grid(puzzle)
        assert codes(errors) == ["GRID_SHAPE"]
        assert errors[0].row == 1

    @pytest.mark.parametrize("row", ["catx", "CA1X", "CA X", "CAÉX"])
    def test_alphabet(self, row):
        """Only uppercase A-Z is allowed."""
        puzzle = make_puzzle(Answer(text="CAT"), grid=[row, "OXXX", "WXXX", "XXXX"])
        assert "GRID_ALPHABET" in codes(validate_grid(puzzle))


class TestPathErrors:
    """Test individual answer paths."""

    def test_wrong_letters(self):
        """A path spelling another word is a mismatch."""
        puzzle = make_puzzle()
        errors = validate_path(puzzle, Answer(text="COT", path=[(0, 0), (1, 0), (2, 0)]))
        assert codes(errors) == ["PATH_MISMATCH"]
        assert errors[0].word == "COT"

    def test_wrong_length(self):
        """A path with too few cells is a mismatch."""
        puzzle = make_puzzle()
        errors = validate_path(puzzle, Answer(text="CAT", path=[(0, 0), (1, 0)]))
        assert codes(errors) == ["PATH_MISMATCH"]

    def test_out_of_bounds(self):
        """Cells outside the grid are rejected."""
        puzzle = make_puzzle()
        errors = validate_path(puzzle, Answer(text="TXX", path=[(2, 0), (3, 0), (4, 0)]))
        assert codes(errors) == ["PATH_OUT_OF_BOUNDS"]

    def test_not_adjacent(self):
        """Steps must move to one of the eight neighbours."""
        puzzle = make_puzzle()
        errors = validate_path(puzzle, Answer(text="CT", path=[(0, 0), (2, 0)]))
        assert codes(errors) == ["PATH_NOT_ADJACENT"]

    def test_revisit(self):
        """A path may not use the same cell twice."""
        puzzle = make_puzzle()
        errors = validate_path(puzzle, Answer(text="CAC", path=[(0, 0), (1, 0), (0, 0)]))
        assert codes(errors) == ["PATH_REVISIT"]


class TestOverlap:
    """Test shared cells between answers."""

    ANSWERS = (
        Answer(text="CAT", path=[(0, 0), (1, 0), (2, 0)]),
        Answer(text="AT", path=[(1, 0), (2, 0)]),
    )

    def test_overlap_rejected(self):
        """Disjoint answers are required by default."""
        result = verify_puzzle(make_puzzle(*self.ANSWERS))
        assert result.valid is False
        assert codes(result.errors) == ["PATH_OVERLAP"]
        assert result.errors[0].word == "AT"

    def test_overlap_allowed(self):
        """Bent builds may share matching cells."""
        result = verify_puzzle(make_puzzle(*self.ANSWERS), require_disjoint=False)
        assert result.valid is True


class TestMissingPaths:
    """Answers without paths cannot be checked."""

    def test_warning_only(self):
        """A pathless answer is a warning, not an error."""
        result = verify_puzzle(make_puzzle(Answer(text="CAT")))
        assert result.valid is True
        assert codes(result.warnings) == ["PATH_MISSING"]
        assert result.warnings[0].word == "CAT"
