"""The puzzle as a network of variables and all-different constraints."""

from __future__ import annotations

from collections import defaultdict

from .board import SudokuBoard
from .constraint import Constraint
from .variable import Variable


class ConstraintNetwork:
    """Variables and constraints of a CSP, with helpers used by the solver."""

    def __init__(self) -> None:
        self.variables: list[Variable] = []
        self.constraints: list[Constraint] = []

    @classmethod
    def from_board(cls, board: SudokuBoard) -> ConstraintNetwork:
        """Build one variable per cell and a constraint per row, column and block."""
        network = cls()
        p, q, n = board.p, board.q, board.n
        rows: dict[int, list[Variable]] = defaultdict(list)
        cols: dict[int, list[Variable]] = defaultdict(list)
        blocks: dict[int, list[Variable]] = defaultdict(list)

        for i, line in enumerate(board.grid):
            for j, value in enumerate(line):
                values = range(1, n + 1) if value == 0 else [value]
                block = i // p * p + j // q
                variable = Variable(values, i, j, block)
                network.add_variable(variable)
                rows[i].append(variable)
                cols[j].append(variable)
                blocks[block].append(variable)

        for groups in (rows, cols, blocks):
            for key in sorted(groups):
                network.add_constraint(Constraint(groups[key]))
        return network

    def add_constraint(self, constraint: Constraint) -> None:
        """Add ``constraint`` unless an equal one is already present."""
        if constraint not in self.constraints:
            self.constraints.append(constraint)

    def add_variable(self, variable: Variable) -> None:
        """Add ``variable`` unless that very object is already present."""
        if not any(v is variable for v in self.variables):
            self.variables.append(variable)

    def neighbors_of(self, variable: Variable) -> list[Variable]:
        """Return every other variable sharing a constraint with ``variable``."""
        neighbors: list[Variable] = []
        seen: set[int] = {id(variable)}
        for constraint in self.constraints_containing(variable):
            for other in constraint.variables:
                if id(other) not in seen:
                    seen.add(id(other))
                    neighbors.append(other)
        return neighbors

    def is_consistent(self) -> bool:
        """Return True when every constraint is consistent."""
        return all(c.is_consistent() for c in self.constraints)

    def constraints_containing(self, variable: Variable) -> list[Constraint]:
        return [c for c in self.constraints if variable in c]

    def modified_constraints(self) -> list[Constraint]:
        """Return constraints with a variable modified since the last call.

        Every variable is marked unmodified afterwards; the first call
        reports the constraints holding the givens.
        """
        modified = [c for c in self.constraints if c.is_modified()]
        for variable in self.variables:
            variable.set_modified(False)
        return modified

    def to_board(self, p: int, q: int) -> SudokuBoard:
        """Lay the current assignments out row by row on a ``p`` by ``q`` board."""
        n = p * q
        grid = [[0] * n for _ in range(n)]
        for index, variable in enumerate(self.variables):
            row, col = divmod(index, n)
            grid[row][col] = variable.assignment
        return SudokuBoard(p, q, grid)

    def __str__(self) -> str:
        names = ",".join(v.name for v in self.variables)
        lines = [
            f"{len(self.variables)} Variables: {{{names}}}",
            f"{len(self.constraints)} Constraints:",
        ]
        lines.extend(str(c) for c in self.constraints)
        return "\n".join(lines)