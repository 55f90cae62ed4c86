"""Exhaustive search for the cheapest hierarchical strip split.

For a set of work and a list of requested slices, every assignment of work
targets to strip positions (N! permutations) is combined with every strip
orientation (4), and the split with the least communication wins. Each
resulting slice is then split again in the same way.

The search is factorial in the number of slices per level, so the width of a
level is bounded by ``max_slices``. Slice counts of a real machine hierarchy
(nodes per cluster, cores per node) stay well below that.
"""

from __future__ import annotations

import logging
from numbers import Integral
from operator import attrgetter
from typing import List, Optional, Sequence, Tuple

from .datastructures import Candidate, Solution, WorkSet
from .splitting import RectangularSplit

log = logging.getLogger(__name__)

MAX_SLICES = 8

# Evaluation order doubles as tie-break order
ORIENTATIONS = (
    ("horizontal", "split_horizontal", False),
    ("horizontal-reversed", "split_horizontal", True),
    ("vertical", "split_vertical", False),
    ("vertical-reversed", "split_vertical", True),
)


class InvalidPartitionRequest(ValueError):
    """The requested partition cannot be made from the available work."""


def _permute(index, start, output):
    if start == len(index):
        output.append(tuple(index))
        return

    _permute(index, start + 1, output)

    for i in range(start + 1, len(index)):
        # Swap into a fresh copy; earlier branches keep their own list
        index = list(index)
        index[start], index[i] = index[i], index[start]
        _permute(index, start + 1, output)


def index_permutations(n: int) -> List[Tuple[int, ...]]:
    """All orderings of ``0..n-1``, generated by recursive swapping.

    Parameters
    ----------
    n : int
        Sequence length.

    Returns
    -------
    list of tuple
        Exactly ``n!`` distinct permutations; ``[()]`` for ``n == 0``.
    """
    if n < 0:
        raise ValueError(f"Cannot permute a sequence of length {n}")
    output = []
    _permute(list(range(n)), 0, output)
    return output


def _leaves(entry) -> int:
    """Number of leaf slices requested by a layout entry."""
    if isinstance(entry, (bool, str)) or not isinstance(entry, (Integral, Sequence)):
        raise InvalidPartitionRequest(f"Invalid slice layout: {entry!r}")
    if isinstance(entry, Integral):
        return int(entry)
    return sum(_leaves(e) for e in entry)


class SearchSplit:
    """Hierarchical split of a work set with minimal communication.

    Parameters
    ----------
    work_set : WorkSet
        The work to distribute.
    parts : int
        Total number of leaf sets the split must produce.
    neighbours : Neighbours
        Adjacency policy used to price communication.
    splitter : RectangularSplit, optional
        Strip splitter; a default one is created when omitted.
    max_slices : int
        Widest level the search accepts (cost grows as ``max_slices!``).

    Examples
    --------
    >>> search = SearchSplit(grid.work_set(), parts=4, neighbours=neighbours)
    >>> cores = search.split([2, 2])  # 2 nodes with 2 cores each
    """

    def __init__(self, work_set: WorkSet, parts: int, neighbours, splitter=None, max_slices: int = MAX_SLICES):
        if parts < 1:
            raise InvalidPartitionRequest(f"Cannot split set into {parts} parts!")
        if work_set.size < parts:
            raise InvalidPartitionRequest(
                f"Cannot split set with {work_set.size} work into {parts} parts!"
            )

        self.work_set = work_set
        self.parts = parts
        self.neighbours = neighbours
        self.splitter = splitter if splitter is not None else RectangularSplit()
        self.max_slices = max_slices

    # =========================================================================
    # Candidate evaluation
    # =========================================================================

    def communication(self, sets: Sequence[WorkSet]) -> int:
        """Total communication of a split (sum over its sets)."""
        return sum(s.communication(self.neighbours) for s in sets)

    def orientation_candidates(self, work_set: WorkSet, targets: Sequence[int], permutation=()):
        """Yield the split of ``work_set`` in each of the four orientations."""
        for name, method, reverse in ORIENTATIONS:
            sets = getattr(self.splitter, method)(work_set, targets, reverse)
            cost = self.communication(sets)
            log.debug(f"   {name} {cost}")
            yield Candidate(name, tuple(permutation), tuple(sets), cost)

    def best_orientation(self, work_set: WorkSet, targets: Sequence[int], permutation=()) -> Candidate:
        """Cheapest of the four orientations; the earliest one wins ties."""
        best = min(self.orientation_candidates(work_set, targets, permutation), key=attrgetter("cost"))
        log.debug(f"   best solution -- {best.orientation} {best.cost}")
        return best

    def candidates(self, work_set: WorkSet, targets: Sequence[int]):
        """Yield the best orientation for every ordering of ``targets``."""
        for perm in index_permutations(len(targets)):
            work = [targets[p] for p in perm]
            log.debug(f" TESTING: {list(perm)} {work}")
            yield self.best_orientation(work_set, work, perm)

    def best_split(self, work_set: WorkSet, targets: Sequence[int]) -> Solution:
        """Cheapest (permutation, orientation) split of ``work_set``."""
        best = None
        for candidate in self.candidates(work_set, targets):
            if best is None or candidate.cost < best.cost:
                best = candidate
                log.debug(f"+++ RESULT: {list(candidate.permutation)} {candidate.cost}")
            else:
                log.debug(f"--- RESULT: {list(candidate.permutation)} {candidate.cost}")
        return Solution(best.sets, best.permutation)

    # =========================================================================
    # Hierarchical split
    # =========================================================================

    def _validate(self, layout, size, depth=0):
        """Reject impossible layouts before any search runs."""
        if isinstance(layout, (bool, str)) or not isinstance(layout, (Integral, Sequence)):
            raise InvalidPartitionRequest(f"Invalid slice layout: {layout!r}")
        if isinstance(layout, Integral):
            if layout < 1:
                raise InvalidPartitionRequest(f"Sub-slice count must be positive, got {layout}")
            width = int(layout)
            entries = [1] * width if width > 1 else []
        else:
            if len(layout) == 0:
                raise InvalidPartitionRequest("Empty slice layout")
            width = len(layout)
            entries = list(layout)

        if width > size:
            raise InvalidPartitionRequest(f"Cannot split set with {size} work into {width} parts!")
        if width > self.max_slices:
            raise InvalidPartitionRequest(
                f"Level {depth} asks for {width} slices; the search supports at most {self.max_slices}"
            )

        for entry in entries:
            self._validate(entry, size, depth + 1)

    def split(self, sub_slices, result: Optional[list] = None) -> list:
        """Split the set into ``len(sub_slices)`` subsets, then split subset ``i`` into ``sub_slices[i]``.

        Entries of ``sub_slices`` may themselves be sequences, which adds
        another level to the hierarchy.

        Parameters
        ----------
        sub_slices : sequence
            Requested sub-slice count (or nested layout) per top-level slice.
        result : list, optional
            Collection the leaf sets are appended to.

        Returns
        -------
        list of WorkSet
            The leaf sets, in top-level order then leaf order.
        """
        if isinstance(sub_slices, (Integral, str)) or len(sub_slices) == 0:
            raise InvalidPartitionRequest(f"Invalid slice layout: {sub_slices!r}")
        self._validate(sub_slices, self.work_set.size)

        leaves = _leaves(sub_slices)
        if leaves != self.parts:
            raise InvalidPartitionRequest(f"Layout {list(sub_slices)} yields {leaves} parts, expected {self.parts}")

        log.debug(f"Splitting set of size {self.work_set.size} into {list(sub_slices)}")

        sets = self._split(self.work_set, sub_slices, depth=0)

        if result is None:
            result = []
        result.extend(s.with_index(i) for i, s in enumerate(sets))
        return result

    def _split(self, work_set: WorkSet, layout, depth: int) -> List[WorkSet]:
        if isinstance(layout, Integral):
            if layout == 1:
                return [work_set]
            layout = [1] * int(layout)

        counts = [_leaves(entry) for entry in layout]
        targets = self.splitter.apportion(work_set.size, len(layout), counts)

        log.debug(f"{'  ' * depth}Work per slice: {list(targets)}")

        solution = self.best_split(work_set, targets)

        leaves = []
        for position, subset in enumerate(solution.sets):
            entry = layout[solution.permutation[position]]
            log.debug(f"{'  ' * depth}Splitting SUB {position} into {entry} ---------------------")
            leaves.extend(self._split(subset, entry, depth + 1))
        return leaves


def split_work_set(work_set: WorkSet, neighbours, sub_slices, **kwargs) -> list:
    """Run a SearchSplit of ``work_set`` with ``sub_slices`` and return the leaf sets."""
    search = SearchSplit(work_set, _leaves(sub_slices), neighbours, **kwargs)
    return search.split(sub_slices)
