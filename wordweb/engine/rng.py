"""
Seeded pseudo-random number generation.

A seed string is hashed with xmur3 into a 32-bit state which then drives a
mulberry32 generator. Arithmetic is kept to unsigned 32-bit integers so the
stream matches the JavaScript generator the puzzles were first published with.
"""

from typing import Iterator, List, Protocol, Sequence, TypeVar


T = TypeVar("T")

_MASK = 0xFFFFFFFF


class RandomSource(Protocol):
    """Anything that can produce floats in [0, 1)."""

    def next_float(self) -> float:
        ...


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply (Math.imul)."""
    return (a * b) & _MASK


def _code_units(text: str) -> List[int]:
    """UTF-16 code units of `text`, matching String.prototype.charCodeAt."""
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def xmur3(text: str) -> Iterator[int]:
    """Yield successive 32-bit hashes of `text`."""
    units = _code_units(text)
    h = (1779033703 ^ len(units)) & _MASK
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & _MASK

    while True:
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        yield h


def hash_seed(text: str) -> int:
    """Reduce a seed string to a 32-bit integer state."""
    return next(xmur3(text))


def randbelow(source: RandomSource, n: int) -> int:
    """Draw an integer in [0, n)."""
    return int(source.next_float() * n)


def shuffled(source: RandomSource, items: Sequence[T]) -> List[T]:
    """Return a Fisher-Yates shuffled copy of `items`."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randbelow(source, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


class Mulberry32:
    """Increment-based 32-bit generator."""

    def __init__(self, state: int):
        self._state = state & _MASK

    def next_float(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296


class SeededRandom:
    """
    Deterministic random stream derived from a seed string.

    Identical seeds produce identical draws. Each instance owns its own
    state, so concurrent builds never interfere with one another.

    Attributes:
        seed: The seed string this stream was built from
    """

    def __init__(self, seed: str):
        self.seed = str(seed)
        self._source = Mulberry32(hash_seed(self.seed))

    def next_float(self) -> float:
        """Draw a float in [0, 1)."""
        return self._source.next_float()

    def randbelow(self, n: int) -> int:
        return randbelow(self, n)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[randbelow(self, len(items))]

    def shuffled(self, items: Sequence[T]) -> List[T]:
        return shuffled(self, items)

    def letter(self) -> str:
        """Draw an uppercase letter A-Z."""
        return random_letter(self)


def random_letter(source: RandomSource) -> str:
    """Draw an uppercase letter A-Z."""
    return chr(65 + randbelow(source, 26))
