"""Backtracking search over a Sudoku constraint network."""

from __future__ import annotations

import time
from enum import Enum

from .board import SudokuBoard
from .domain import Domain
from .network import ConstraintNetwork
from .trail import Trail
from .variable import Variable


class Consistency(Enum):
    """Which propagation and consistency check runs after each assignment."""

    ASSIGNMENTS = "assignmentsCheck"
    FORWARD_CHECKING = "forwardChecking"
    ARC_CONSISTENCY = "arcConsistency"


class BTSolver:
    """Depth-first backtracking solver that records its changes on a trail."""

    def __init__(
        self,
        board: SudokuBoard,
        trail: Trail | None = None,
        consistency: Consistency = Consistency.ASSIGNMENTS,
    ) -> None:
        self.board = board
        self.trail = trail if trail is not None else Trail()
        self.consistency = Consistency(consistency)
        self.network = ConstraintNetwork.from_board(board)
        self.has_solution = False

    # Consistency checks

    def assignments_check(self) -> bool:
        """Return True when no constraint has two equal assignments."""
        return all(c.is_consistent() for c in self.network.constraints)

    def forward_checking(self) -> tuple[dict[Variable, Domain], bool]:
        """Remove assigned values from the domains of unassigned neighbours.

        Returns the variables whose domains changed, mapped to their new
        domains, and whether the network is still consistent. When a domain
        is wiped out the mapping is empty and the flag is False.
        """
        modified: dict[Variable, Domain] = {}
        for constraint in self.network.modified_constraints():
            for variable in constraint.variables:
                if not variable.assigned:
                    continue
                value = variable.assignment
                for neighbor in self.network.neighbors_of(variable):
                    if neighbor.assigned or value not in neighbor.domain:
                        continue
                    self.trail.push(neighbor)
                    neighbor.remove_value(value)
                    if neighbor.domain.is_empty():
                        return {}, False
                    modified[neighbor] = neighbor.domain.copy()
        return modified, self.assignments_check()

    def arc_consistency(self) -> bool:
        """Propagate assignments, assigning any domain reduced to one value.

        Returns False as soon as an assigned value would empty a neighbour's
        domain, otherwise whether the network is consistent.
        """
        to_assign: list[Variable] = []
        for constraint in self.network.modified_constraints():
            for variable in constraint.variables:
                if not variable.assigned:
                    continue
                value = variable.assignment
                for neighbor in self.network.neighbors_of(variable):
                    if value not in neighbor.domain:
                        continue
                    size = len(neighbor.domain)
                    if size == 1:
                        return False
                    if size == 2:
                        to_assign.append(neighbor)
                    self.trail.push(neighbor)
                    neighbor.remove_value(value)
        if to_assign:
            for variable in to_assign:
                first = next(iter(variable.domain))
                self.trail.push(variable)
                variable.assign_value(first)
            return self.arc_consistency()
        return self.network.is_consistent()

    # Selectors

    def first_unassigned_variable(self) -> Variable | None:
        """Return the first unassigned variable, or None when all are assigned."""
        return next((v for v in self.network.variables if not v.assigned), None)

    def values_in_order(self, variable: Variable) -> list[int]:
        """Return the variable's remaining values in ascending order."""
        return sorted(variable.domain)

    # Engine

    def check_consistency(self) -> bool:
        """Run the configured consistency check."""
        if self.consistency is Consistency.FORWARD_CHECKING:
            return self.forward_checking()[1]
        if self.consistency is Consistency.ARC_CONSISTENCY:
            return self.arc_consistency()
        return self.assignments_check()

    def select_next_variable(self) -> Variable | None:
        return self.first_unassigned_variable()

    def next_values(self, variable: Variable) -> list[int]:
        return self.values_in_order(variable)

    def solve(self, time_left: float = 600.0) -> bool:
        """Search for a solution within ``time_left`` seconds of CPU time.

        The search gives up once 60 seconds or fewer remain. Returns False
        if it gave up for lack of time, True once the search has finished;
        ``has_solution`` tells whether a solution was found.
        """
        if time_left <= 60.0:
            return False
        elapsed = 0.0
        begin = time.process_time()

        if self.has_solution:
            return True

        variable = self.select_next_variable()
        if variable is None:
            if all(v.assigned for v in self.network.variables):
                self.has_solution = True
            return True

        for value in self.next_values(variable):
            self.trail.place_marker()
            self.trail.push(variable)
            variable.assign_value(value)

            if self.check_consistency():
                elapsed += time.process_time() - begin
                if not self.solve(time_left - elapsed):
                    return False

            if self.has_solution:
                return True

            self.trail.undo()
        return True

    def solution(self) -> SudokuBoard:
        """Return the network's current assignments as a board."""
        return self.network.to_board(self.board.p, self.board.q)