"""Square grid of cells and its adjacency model.

Cells carry a transient in_use flag that the word finder sets while a cell is
part of the path being explored. Only the flag ever changes after construction.
"""

import math
import random
from contextlib import contextmanager
from typing import Generic, Iterator, Sequence, TypeVar

LETTER_A = ord("A")
OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

T = TypeVar("T")


class InvalidBoardError(ValueError):
    """Raised when a board's input matrix is not square."""


class Cell(Generic[T]):
    """One position on the board."""

    __slots__ = ("_symbol", "_row", "_col", "in_use")

    def __init__(self, symbol: T, row: int, col: int):
        self._symbol = symbol
        self._row = row
        self._col = col
        self.in_use = False

    @property
    def symbol(self) -> T:
        return self._symbol

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @contextmanager
    def claim(self):
        """Mark this cell in use for the duration of the block.

        Yields whether the cell was free on entry. The flag is only cleared on
        exit if this claim is the one that set it.
        """
        was_free = not self.in_use
        self.in_use = True
        try:
            yield was_free
        finally:
            if was_free:
                self.in_use = False

    def __str__(self):
        return str(self._symbol)

    def __repr__(self):
        return f"Cell({self._symbol!r}, {self._row}, {self._col})"


class Board(Generic[T]):
    _cells: list[Cell[T]]
    _adjacent: list[list[Cell[T]]]
    _size: int

    def __init__(self, symbols: Sequence[Sequence[T]]):
        size = len(symbols)
        for r, row in enumerate(symbols):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Board must be square: row {r} has {len(row)} cells, expected {size}"
                )
        self._size = size
        self._cells = [
            Cell(sym, r, c) for r, row in enumerate(symbols) for c, sym in enumerate(row)
        ]
        self._adjacent = [
            [
                self._cells[(cell.row + dr) * size + cell.col + dc]
                for dr, dc in OFFSETS
                if self._in_bounds(cell.row + dr, cell.col + dc)
            ]
            for cell in self._cells
        ]

    @staticmethod
    def from_letters(text: str) -> "Board[str]":
        """Parse "eila tpag reto htay" (one word per row) or "eilatpagretohtay"."""
        rows = text.split()
        if len(rows) == 1:
            (letters,) = rows
            n = math.isqrt(len(letters))
            if n * n != len(letters):
                raise InvalidBoardError(f"{len(letters)} letters do not form a square")
            rows = [letters[i * n : (i + 1) * n] for i in range(n)]
        return Board([list(row) for row in rows])

    @property
    def size(self) -> int:
        return self._size

    def _in_bounds(self, r: int, c: int):
        return 0 <= r < self._size and 0 <= c < self._size

    def get(self, r: int, c: int) -> Cell[T] | None:
        if not self._in_bounds(r, c):
            return None
        return self._cells[r * self._size + c]

    def neighbors(self, r: int, c: int) -> list[Cell[T]]:
        """All cells touching (r, c), including diagonals. Empty if out of bounds."""
        if not self._in_bounds(r, c):
            return []
        return list(self._adjacent[r * self._size + c])

    def unvisited_neighbors(self, r: int, c: int) -> list[Cell[T]]:
        return [cell for cell in self.neighbors(r, c) if not cell.in_use]

    def cells(self) -> Iterator[Cell[T]]:
        """Every cell in row-major order."""
        yield from self._cells

    def __iter__(self):
        return self.cells()

    def __len__(self):
        return len(self._cells)

    def is_idle(self) -> bool:
        return not any(cell.in_use for cell in self._cells)

    def __str__(self):
        return "\n".join(
            " ".join(str(cell) for cell in self._cells[r * self._size : (r + 1) * self._size])
            for r in range(self._size)
        )


def random_board(size: int, rng: random.Random | None = None) -> Board[str]:
    rng = rng or random.Random()
    return Board(
        [[chr(LETTER_A + rng.randint(0, 25)) for _c in range(size)] for _r in range(size)]
    )
