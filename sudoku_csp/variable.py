"""A single cell of the puzzle as a CSP variable."""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from .domain import Domain

_names = itertools.count(1)


class Variable:
    """A CSP variable placed at a row, column and block.

    A variable created with a single-value domain is a given: it is
    assigned from the start and can never change.
    """

    def __init__(
        self,
        values: Iterable[int],
        row: int,
        col: int,
        block: int,
        name: str | None = None,
    ) -> None:
        self.domain = Domain(values)
        self.row = row
        self.col = col
        self.block = block
        self.name = name if name is not None else f"v{next(_names)}"
        self.modified = False
        self.changeable = True
        self.assigned = False
        if len(self.domain) == 1:
            self.modified = True
            self.changeable = False
            self.assigned = True

    @property
    def assignment(self) -> int:
        """The assigned value, or 0 when unassigned."""
        if self.assigned:
            return next(iter(self.domain))
        return 0

    @property
    def size(self) -> int:
        """Number of values left in the domain."""
        return len(self.domain)

    def assign_value(self, value: int) -> None:
        """Assign ``value``; givens are left untouched."""
        if not self.changeable:
            return
        self.assigned = True
        self.set_domain(Domain([value]))

    def set_domain(self, domain: Domain) -> None:
        """Replace the domain; givens are left untouched."""
        if not self.changeable:
            return
        self.domain = domain
        self.modified = True

    def remove_value(self, value: int) -> None:
        """Remove ``value`` from the domain; givens are left untouched."""
        if not self.changeable:
            return
        self.domain.remove(value)
        self.modified = self.domain.modified

    def unassign(self) -> None:
        self.assigned = False

    def set_modified(self, modified: bool) -> None:
        """Set the modified flag on the variable and its domain."""
        self.modified = modified
        self.domain.modified = modified

    def __str__(self) -> str:
        return f" Name: {self.name}\tdomain: {self.domain}"

    def __repr__(self) -> str:
        return (
            f"Variable(name={self.name!r}, row={self.row}, col={self.col}, "
            f"block={self.block}, domain={list(self.domain)!r})"
        )