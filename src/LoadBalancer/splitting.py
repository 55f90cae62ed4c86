"""Rectangular strip splitting of work sets.

Cuts a WorkSet into contiguous strips along one grid axis, each strip holding
an exact amount of work. Pure geometric logic: no knowledge of communication.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .datastructures import WorkSet


class RectangularSplit:
    """Strip splitter used by the search.

    Horizontal strips are bands of rows, filled row by row from the bottom
    (south) to the top. Vertical strips are bands of columns, filled column by
    column from the left (west). ``reverse`` walks the same order backwards.

    Examples
    --------
    >>> splitter = RectangularSplit()
    >>> targets = splitter.apportion(work_set.size, 4)
    >>> strips = splitter.split_vertical(work_set, targets)
    """

    @staticmethod
    def apportion(total: int, slices: int, weights: Optional[Sequence[int]] = None) -> Tuple[int, ...]:
        """Divide ``total`` units of work over ``slices`` slices.

        Parameters
        ----------
        total : int
            Work to divide.
        slices : int
            Number of slices.
        weights : sequence of int, optional
            Relative share of each slice. Without weights the split is as
            equal as possible, with the remainder going to the first slices.

        Returns
        -------
        tuple of int
            Work per slice, summing to ``total``.
        """
        if slices < 1:
            raise ValueError(f"Cannot apportion work over {slices} slices")
        if total < 0:
            raise ValueError(f"Cannot apportion negative work {total}")

        if weights is None:
            base, rem = divmod(total, slices)
            return tuple(base + (1 if i < rem else 0) for i in range(slices))

        if len(weights) != slices:
            raise ValueError(f"Expected {slices} weights, got {len(weights)}")
        if any(w <= 0 for w in weights):
            raise ValueError(f"Weights must be positive: {list(weights)}")

        # Cumulative floor rounding keeps the sum exact
        weight_total = sum(weights)
        bounds = [0]
        running = 0
        for w in weights:
            running += w
            bounds.append(total * running // weight_total)
        return tuple(bounds[i + 1] - bounds[i] for i in range(slices))

    def split_horizontal(self, work_set: WorkSet, targets: Sequence[int], reverse: bool = False):
        """Split into bands of rows."""
        order = sorted(work_set.cells, key=lambda c: (c.y, c.x), reverse=reverse)
        return self._cut(order, targets, work_set.size)

    def split_vertical(self, work_set: WorkSet, targets: Sequence[int], reverse: bool = False):
        """Split into bands of columns."""
        order = sorted(work_set.cells, key=lambda c: (c.x, c.y), reverse=reverse)
        return self._cut(order, targets, work_set.size)

    @staticmethod
    def _cut(order, targets, size):
        if any(t < 0 for t in targets):
            raise ValueError(f"Work targets must be non-negative: {list(targets)}")
        if sum(targets) != size:
            raise ValueError(f"Work targets {list(targets)} do not add up to set size {size}")

        strips = []
        start = 0
        for i, target in enumerate(targets):
            strips.append(WorkSet(tuple(order[start:start + target]), index=i))
            start += target
        return tuple(strips)
