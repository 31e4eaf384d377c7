"""The set of values a CSP variable may still take."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Domain:
    """An ordered collection of distinct candidate values.

    ``modified`` becomes true whenever a value is removed.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: list[int] = []
        for value in values:
            if value not in self._values:
                self._values.append(value)
        self.modified = False

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __str__(self) -> str:
        return "{" + ",".join(str(value) for value in self._values) + "}"

    def __repr__(self) -> str:
        return f"Domain({self._values!r})"

    def is_empty(self) -> bool:
        """Return True when no values remain."""
        return not self._values

    def add(self, value: int) -> None:
        """Add ``value`` unless it is already present."""
        if value not in self._values:
            self._values.append(value)

    def remove(self, value: int) -> bool:
        """Remove ``value``; return whether it was present."""
        if value not in self._values:
            return False
        self.modified = True
        self._values = [v for v in self._values if v != value]
        return True

    def copy(self) -> Domain:
        """Return a new domain with the same values and a clear modified flag."""
        return Domain(self._values)