"""Record of domain changes, so the search can backtrack."""

from __future__ import annotations

from .domain import Domain
from .variable import Variable


class Trail:
    """A stack of saved variable domains with markers for backtracking.

    ``push_count`` and ``undo_count`` accumulate across :meth:`clear`.
    """

    def __init__(self) -> None:
        self._stack: list[tuple[Variable, Domain]] = []
        self._markers: list[int] = []
        self.push_count = 0
        self.undo_count = 0

    def __len__(self) -> int:
        return len(self._stack)

    def place_marker(self) -> None:
        """Mark the current depth of the trail."""
        self._markers.append(len(self._stack))

    def push(self, variable: Variable) -> None:
        """Save a copy of ``variable``'s domain before it is changed."""
        self.push_count += 1
        self._stack.append((variable, variable.domain.copy()))

    def undo(self) -> None:
        """Restore every variable pushed since the last marker."""
        if not self._markers:
            raise IndexError("undo without a trail marker")
        self.undo_count += 1
        target = self._markers.pop()
        while len(self._stack) > target:
            variable, domain = self._stack.pop()
            variable.set_domain(domain)
            variable.set_modified(False)
            variable.unassign()

    def clear(self) -> None:
        """Drop all saved entries and markers."""
        self._stack.clear()
        self._markers.clear()