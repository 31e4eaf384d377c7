"""Sudoku boards: creation, parsing and text rendering."""

from __future__ import annotations

import random as _random
from collections.abc import Sequence
from os import PathLike

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def int_to_odometer(n: int) -> str:
    """Render ``n`` in base 36 using digits 0-9 and A-Z; zero or less is "0"."""
    if n <= 0:
        return "0"
    digits = []
    while n > 0:
        n, remainder = divmod(n, 36)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def odometer_to_int(text: str) -> int:
    """Parse a base-36 token written with digits 0-9 and A-Z."""
    if not text:
        raise ValueError("empty odometer value")
    value = 0
    for char in text:
        digit = _DIGITS.find(char)
        if digit < 0:
            raise ValueError(f"invalid odometer digit {char!r} in {text!r}")
        value = value * 36 + digit
    return value


class SudokuBoard:
    """A square grid of side ``p * q`` split into blocks of ``p`` rows and ``q`` columns.

    Empty cells hold 0.
    """

    def __init__(self, p: int, q: int, grid: Sequence[Sequence[int]] | None = None) -> None:
        if p < 1 or q < 1:
            raise ValueError("p and q must be positive")
        self.p = p
        self.q = q
        n = p * q
        if grid is None:
            grid = [[0] * n for _ in range(n)]
        self.grid: list[list[int]] = [list(row) for row in grid]
        if len(self.grid) != n or any(len(row) != n for row in self.grid):
            raise ValueError(f"grid must be {n}x{n}")

    @classmethod
    def random(
        cls,
        p: int,
        q: int,
        givens: int,
        rng: _random.Random | None = None,
    ) -> SudokuBoard:
        """Build a board with ``givens + 1`` randomly placed legal values.

        The count is capped at the number of cells. ValueError is raised
        when no legal placement remains before the count is reached.
        """
        if givens < 0:
            raise ValueError("givens must not be negative")
        rng = rng if rng is not None else _random.Random()
        board = cls(p, q)
        n = board.n
        target = min(givens + 1, n * n)
        placed = 0
        while placed < target:
            for _ in range(100 * n * n):
                row, col, value = rng.randrange(n), rng.randrange(n), rng.randrange(n) + 1
                if board.grid[row][col] == 0 and board.can_place(row, col, value):
                    break
            else:
                options = [
                    (r, c, v)
                    for r in range(n)
                    for c in range(n)
                    if board.grid[r][c] == 0
                    for v in range(1, n + 1)
                    if board.can_place(r, c, v)
                ]
                if not options:
                    raise ValueError("no legal placement left for a random board")
                row, col, value = rng.choice(options)
            board.grid[row][col] = value
            placed += 1
        return board

    @classmethod
    def parse(cls, text: str) -> SudokuBoard:
        """Read ``p``, ``q`` and then ``(p*q)**2`` whitespace-separated cell tokens."""
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("board text must start with p and q")
        p, q = int(tokens[0]), int(tokens[1])
        n = p * q
        cells = tokens[2:]
        if len(cells) < n * n:
            raise ValueError(f"expected {n * n} cells, found {len(cells)}")
        values = [odometer_to_int(token) for token in cells[: n * n]]
        grid = [values[i * n:(i + 1) * n] for i in range(n)]
        return cls(p, q, grid)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> SudokuBoard:
        """Load a board written in the :meth:`parse` format."""
        with open(path, encoding="utf-8") as handle:
            return cls.parse(handle.read())

    @property
    def n(self) -> int:
        """Side length of the board."""
        return self.p * self.q

    def can_place(self, row: int, col: int, value: int) -> bool:
        """Return True if ``value`` is absent from the cell's row, column and block."""
        if value in self.grid[row]:
            return False
        if any(line[col] == value for line in self.grid):
            return False
        top = row // self.p * self.p
        left = col // self.q * self.q
        return all(
            value not in line[left:left + self.q] for line in self.grid[top:top + self.p]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return (self.p, self.q, self.grid) == (other.p, other.q, other.grid)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SudokuBoard(p={self.p}, q={self.q}, grid={self.grid!r})"

    def __str__(self) -> str:
        n = self.n
        parts = [f"P:  {self.p}\tQ:  {self.q}\n"]
        for i, line in enumerate(self.grid):
            for j, value in enumerate(line):
                parts.append(int_to_odometer(value) + " ")
                if (j + 1) % self.q == 0 and j != 0 and j != n - 1:
                    parts.append("| ")
            parts.append("\n")
            if (i + 1) % self.p == 0 and i != 0 and i != n - 1:
                parts.append("- " * (n + self.p - 1) + "\n")
        return "".join(parts)