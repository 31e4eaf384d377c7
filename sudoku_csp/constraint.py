"""All-different constraint over a group of variables."""

from __future__ import annotations

from collections.abc import Iterable

from .variable import Variable


class Constraint:
    """A not-equals constraint: no two assigned variables may share a value."""

    def __init__(self, variables: Iterable[Variable] = ()) -> None:
        self.variables: list[Variable] = list(variables)

    def add_variable(self, variable: Variable) -> None:
        self.variables.append(variable)

    def __len__(self) -> int:
        return len(self.variables)

    def __contains__(self, variable: object) -> bool:
        return any(v is variable for v in self.variables)

    def is_modified(self) -> bool:
        """Return True if any variable in the constraint was modified."""
        return any(v.modified for v in self.variables)

    def is_consistent(self) -> bool:
        """Return False if two distinct assigned variables share a value."""
        seen: dict[int, Variable] = {}
        for var in self.variables:
            if not var.assigned:
                continue
            value = var.assignment
            holder = seen.get(value)
            if holder is not None and holder is not var:
                return False
            seen[value] = var
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return len(self) == len(other) and all(v in other for v in self.variables)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + ",".join(v.name for v in self.variables) + "}"

    def __repr__(self) -> str:
        return f"Constraint({self})"