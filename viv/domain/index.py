"""Lattice coordinates for the unbounded Life grid.

Vertical convention: ``up`` increases ``y``. Text front-ends emit rows with
``y`` ascending, so ``up`` moves toward later rows on screen.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Index:
    """An immutable integer coordinate pair; equality and hashing are by value."""

    x: int
    y: int

    @classmethod
    def origin(cls) -> Index:
        """The index at the center of any grid."""
        return cls(0, 0)

    def up(self) -> Index:
        return Index(self.x, self.y + 1)

    def down(self) -> Index:
        return Index(self.x, self.y - 1)

    def left(self) -> Index:
        return Index(self.x - 1, self.y)

    def right(self) -> Index:
        return Index(self.x + 1, self.y)

    def neighbors(self) -> tuple[Index, ...]:
        """Return the Moore neighborhood, clockwise from up-left.

        Order: up-left, up, up-right, right, down-right, down, down-left, left.
        """
        x, y = self.x, self.y
        return (
            Index(x - 1, y + 1),
            Index(x, y + 1),
            Index(x + 1, y + 1),
            Index(x + 1, y),
            Index(x + 1, y - 1),
            Index(x, y - 1),
            Index(x - 1, y - 1),
            Index(x - 1, y),
        )

    def neighbors_list(self) -> list[Index]:
        """Same eight indices as :meth:`neighbors`, as a list."""
        return list(self.neighbors())

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
