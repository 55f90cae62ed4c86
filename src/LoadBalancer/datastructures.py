"""Data structures shared by the splitter and the search.

Architecture:

    Coordinate   one block position (x, y) in the block grid
    WorkSet      immutable collection of blocks owned by one partition
    Candidate    one evaluated (orientation, permutation) split, discarded after selection
    Solution     the retained winner of a search level
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, NamedTuple, Optional, Tuple


class Coordinate(NamedTuple):
    """Block coordinate in the grid (x = column, y = row)."""

    x: int
    y: int


# ============================================================================
# Work sets
# ============================================================================


@dataclass(frozen=True)
class WorkSet:
    """An ordered set of blocks, each block counting as one unit of work.

    WorkSets are never modified. Splitting a WorkSet produces new, disjoint
    WorkSets whose union is the original.

    Parameters
    ----------
    cells : tuple of Coordinate
        Blocks owned by this set, in order.
    index : int
        Identity of the set within its layer.
    """

    cells: Tuple[Coordinate, ...]
    index: int = 0

    _members: FrozenSet[Coordinate] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cells = tuple(Coordinate(*c) for c in self.cells)
        members = frozenset(cells)
        if len(members) != len(cells):
            raise ValueError("WorkSet cells must be unique")
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "_members", members)

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __contains__(self, coordinate):
        return coordinate in self._members

    @property
    def size(self) -> int:
        """Amount of work in this set (number of blocks)."""
        return len(self.cells)

    @property
    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Bounding box (min_x, min_y, max_x, max_y), or None when empty."""
        if not self.cells:
            return None
        xs = [c.x for c in self.cells]
        ys = [c.y for c in self.cells]
        return min(xs), min(ys), max(xs), max(ys)

    def with_index(self, index: int) -> "WorkSet":
        """Return a copy of this set with a different index."""
        return replace(self, index=index)

    @classmethod
    def merge(cls, sets: Iterable["WorkSet"], index: int = 0) -> "WorkSet":
        """Combine disjoint sets into one, preserving cell order."""
        cells = []
        for s in sets:
            cells.extend(s.cells)
        return cls(tuple(cells), index=index)

    def communication(self, neighbours) -> int:
        """Halo exchange volume between this set and the rest of the ocean.

        Every neighbour of every cell that is an ocean block outside this set
        contributes its exchange weight.

        Parameters
        ----------
        neighbours : Neighbours
            Adjacency policy defining the grid topology.

        Returns
        -------
        int
            Total communication, never negative.
        """
        total = 0
        for cell in self.cells:
            for neighbour, weight in neighbours.communication(cell):
                if neighbour not in self._members and neighbours.grid.is_ocean(neighbour):
                    total += weight
        return total

    def boundary_coordinates(self, neighbours) -> Tuple[Coordinate, ...]:
        """Distinct coordinates just outside this set (ocean or land)."""
        seen = set()
        result = []
        for cell in self.cells:
            for neighbour in neighbours.neighbours_of(cell):
                if neighbour in self._members or neighbour in seen:
                    continue
                seen.add(neighbour)
                result.append(neighbour)
        return tuple(result)


# ============================================================================
# Search records
# ============================================================================


@dataclass(frozen=True)
class Candidate:
    """One evaluated split: which orientation, which target order, what it costs."""

    orientation: str
    permutation: Tuple[int, ...]
    sets: Tuple[WorkSet, ...]
    cost: int


@dataclass(frozen=True)
class Solution:
    """Best split found on one level.

    ``permutation[k]`` is the index of the requested slice that ended up at
    spatial position ``k``.
    """

    sets: Tuple[WorkSet, ...]
    permutation: Tuple[int, ...]
