"""
Word placement on a letter grid.

Two engines share the same grid and random source:

1. Straight placement: random direction and start cell, strict non-overlap
2. Bent placement: depth-first search over neighbouring cells with a
   bounded number of direction changes, allowed to cross matching letters
"""

from typing import List, NamedTuple, Optional, Set

from .grid import LetterGrid
from .models import Coordinate, DirectionClass, Placement
from .rng import RandomSource, randbelow, shuffled


class Direction(NamedTuple):
    """Unit step on the grid and the class it belongs to."""
    dx: int
    dy: int
    direction_class: DirectionClass


DIRECTIONS: List[Direction] = [
    Direction(1, 0, "H"),
    Direction(-1, 0, "H"),
    Direction(0, 1, "V"),
    Direction(0, -1, "V"),
    Direction(1, 1, "D"),
    Direction(-1, -1, "D"),
    Direction(1, -1, "D"),
    Direction(-1, 1, "D"),
]


def directions_for(direction_class: Optional[DirectionClass] = None) -> List[Direction]:
    """All directions, or only those of `direction_class`."""
    if direction_class is None:
        return list(DIRECTIONS)
    return [d for d in DIRECTIONS if d.direction_class == direction_class]


def classify_step(dx: int, dy: int) -> Optional[DirectionClass]:
    """Direction class of a single step, or None if it is not a unit step."""
    for direction in DIRECTIONS:
        if (direction.dx, direction.dy) == (dx, dy):
            return direction.direction_class
    return None


def straight_path(x: int, y: int, direction: Direction, length: int) -> List[Coordinate]:
    """Cells covered by a straight run of `length` from (x, y)."""
    return [(x + direction.dx * i, y + direction.dy * i) for i in range(length)]


def can_place_straight(grid: LetterGrid, path: List[Coordinate]) -> bool:
    """Every cell in bounds and unoccupied."""
    return all(grid.in_bounds(x, y) and grid.is_empty(x, y) for x, y in path)


def place_straight(
    grid: LetterGrid,
    word: str,
    rng: RandomSource,
    direction_class: Optional[DirectionClass] = None,
    max_tries: int = 800,
) -> Optional[Placement]:
    """
    Place `word` in a straight line.

    Each try draws a direction, a start column and a start row, in that
    order. The first fitting position is written to the grid.

    Args:
        grid: Grid to write into
        word: Normalized word to place
        rng: Random source for the draws
        direction_class: Restrict directions to this class
        max_tries: Number of random positions to try

    Returns:
        The placement, or None if no try fitted
    """
    directions = directions_for(direction_class)
    if not word or not directions:
        return None

    for _ in range(max_tries):
        direction = directions[randbelow(rng, len(directions))]
        x = randbelow(rng, grid.size)
        y = randbelow(rng, grid.size)

        path = straight_path(x, y, direction, len(word))
        if not can_place_straight(grid, path):
            continue

        grid.write(word, path)
        return Placement(word=word, path=path, direction_class=direction.direction_class)

    return None


def count_turns(path: List[Coordinate]) -> int:
    """Number of direction changes along a path."""
    turns = 0
    previous = None
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        step = (x1 - x0, y1 - y0)
        if previous is not None and step != previous:
            turns += 1
        previous = step
    return turns


def place_bent(
    grid: LetterGrid,
    word: str,
    rng: RandomSource,
    max_turns: int = 2,
) -> Optional[Placement]:
    """
    Place `word` along a path that may change direction up to `max_turns` times.

    Start cells are tried in shuffled order. From each start a depth-first
    search extends the path one neighbour at a time, shuffling the eight
    directions at every step. A cell may be entered when it is empty or
    already holds the needed letter, and never twice within the same word.

    Returns:
        The placement, or None if no path exists within the turn budget
    """
    size = grid.size
    if not word or len(word) > size * size:
        return None

    starts = shuffled(rng, [(k % size, k // size) for k in range(size * size)])

    for x, y in starts:
        if not grid.accepts(x, y, word[0]):
            continue

        path: List[Coordinate] = [(x, y)]
        visited: Set[Coordinate] = {(x, y)}
        turns = _extend(grid, word, rng, path, visited, None, 0, max_turns)
        if turns is None:
            continue

        grid.write(word, path)
        direction_class = None
        if turns == 0 and len(path) > 1:
            direction_class = classify_step(path[1][0] - path[0][0], path[1][1] - path[0][1])
        return Placement(word=word, path=path, direction_class=direction_class, turns=turns)

    return None


def _extend(
    grid: LetterGrid,
    word: str,
    rng: RandomSource,
    path: List[Coordinate],
    visited: Set[Coordinate],
    previous: Optional[Direction],
    turns: int,
    max_turns: int,
) -> Optional[int]:
    """Grow `path` in place until it spells `word`; return the turn count."""
    if len(path) == len(word):
        return turns

    x, y = path[-1]
    letter = word[len(path)]

    for direction in shuffled(rng, DIRECTIONS):
        turned = previous is not None and direction != previous
        if turned and turns >= max_turns:
            continue

        nx, ny = x + direction.dx, y + direction.dy
        if not grid.in_bounds(nx, ny) or (nx, ny) in visited:
            continue
        if not grid.accepts(nx, ny, letter):
            continue

        path.append((nx, ny))
        visited.add((nx, ny))
        result = _extend(grid, word, rng, path, visited, direction, turns + int(turned), max_turns)
        if result is not None:
            return result

        # Dead end
        path.pop()
        visited.discard((nx, ny))

    return None
