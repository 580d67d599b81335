"""Mutable letter grid used while a puzzle is being built."""

from typing import Iterable, List, Optional

from .models import Coordinate
from .rng import RandomSource, random_letter


class LetterGrid:
    """
    Square grid of letters, with None marking empty cells.

    Cells are addressed as (x, y): x is the column, y the row.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Optional[str]:
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[y][x] is None

    def accepts(self, x: int, y: int, letter: str) -> bool:
        """True if the cell is empty or already holds `letter`."""
        current = self.cells[y][x]
        return current is None or current == letter

    def write(self, word: str, path: Iterable[Coordinate]) -> None:
        """Write `word` along `path`, one letter per cell."""
        for letter, (x, y) in zip(word, path):
            self.cells[y][x] = letter

    @property
    def empty_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is None)

    def fill(self, rng: RandomSource) -> None:
        """Fill every empty cell with a random letter, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                if self.cells[y][x] is None:
                    self.cells[y][x] = random_letter(rng)

    def rows(self, blank: str = ".") -> List[str]:
        """Rows as strings, with `blank` standing in for empty cells."""
        return ["".join(cell if cell is not None else blank for cell in row) for row in self.cells]
