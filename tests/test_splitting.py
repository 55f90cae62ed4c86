"""Tests for rectangular strip splitting."""

import pytest
from LoadBalancer import RectangularSplit, WorkSet


class TestApportion:
    """Tests for dividing work over slices."""

    @pytest.mark.parametrize("total,slices,expected", [
        (16, 4, (4, 4, 4, 4)),
        (10, 3, (4, 3, 3)),
        (3, 5, (1, 1, 1, 0, 0)),
        (7, 1, (7,)),
        (0, 2, (0, 0)),
    ])
    def test_near_equal(self, total, slices, expected):
        """Remainder goes to the first slices."""
        assert RectangularSplit.apportion(total, slices) == expected

    @pytest.mark.parametrize("total,weights,expected", [
        (16, [3, 1], (12, 4)),
        (16, [1, 3], (4, 12)),
        (10, [1, 1, 1], (3, 3, 4)),
        (100, [2, 2, 1], (40, 40, 20)),
    ])
    def test_weighted(self, total, weights, expected):
        assert RectangularSplit.apportion(total, len(weights), weights) == expected

    @pytest.mark.parametrize("total", [0, 1, 17, 101, 1000])
    @pytest.mark.parametrize("weights", [None, [1, 2, 3], [5, 5, 1]])
    def test_sum_preserved(self, total, weights):
        targets = RectangularSplit.apportion(total, 3, weights)
        assert sum(targets) == total
        assert all(t >= 0 for t in targets)

    @pytest.mark.parametrize("args", [
        (10, 0),
        (-1, 2),
        (10, 2, [1]),
        (10, 2, [1, 0]),
    ])
    def test_invalid(self, args):
        with pytest.raises(ValueError):
            RectangularSplit.apportion(*args)


class TestStrips:
    """Tests for horizontal and vertical strips on a full 4x4 grid."""

    def test_horizontal_rows(self, full_grid):
        strips = RectangularSplit().split_horizontal(full_grid.work_set(), (4, 4, 4, 4))

        for i, strip in enumerate(strips):
            assert {c.y for c in strip} == {i}

    def test_horizontal_reversed_starts_at_top(self, full_grid):
        strips = RectangularSplit().split_horizontal(full_grid.work_set(), (4, 4, 4, 4), reverse=True)

        assert {c.y for c in strips[0]} == {3}
        assert {c.y for c in strips[3]} == {0}

    def test_vertical_columns(self, full_grid):
        strips = RectangularSplit().split_vertical(full_grid.work_set(), (4, 4, 4, 4))

        for i, strip in enumerate(strips):
            assert {c.x for c in strip} == {i}

    def test_vertical_reversed_starts_at_right(self, full_grid):
        strips = RectangularSplit().split_vertical(full_grid.work_set(), (8, 8), reverse=True)

        assert {c.x for c in strips[0]} == {2, 3}
        assert {c.x for c in strips[1]} == {0, 1}

    def test_uneven_targets(self, full_grid):
        """A strip that ends mid-row takes the start of the next row."""
        strips = RectangularSplit().split_horizontal(full_grid.work_set(), (5, 11))

        assert [s.size for s in strips] == [5, 11]
        assert (0, 1) in strips[0]
        assert (1, 1) in strips[1]

    def test_zero_target_gives_empty_strip(self, full_grid):
        strips = RectangularSplit().split_vertical(full_grid.work_set(), (0, 16))
        assert [s.size for s in strips] == [0, 16]

    def test_indices_are_positions(self, full_grid):
        strips = RectangularSplit().split_vertical(full_grid.work_set(), (4, 4, 8))
        assert [s.index for s in strips] == [0, 1, 2]

    @pytest.mark.parametrize("method", ["split_horizontal", "split_vertical"])
    @pytest.mark.parametrize("reverse", [False, True])
    def test_disjoint_cover(self, basin_grid, method, reverse):
        work = basin_grid.work_set()
        targets = RectangularSplit.apportion(work.size, 5)

        strips = getattr(RectangularSplit(), method)(work, targets, reverse)

        assert [s.size for s in strips] == list(targets)
        cells = [c for s in strips for c in s]
        assert len(cells) == len(set(cells))
        assert set(cells) == set(work.cells)

    def test_input_untouched(self, full_grid):
        work = full_grid.work_set()
        cells = work.cells

        RectangularSplit().split_vertical(work, (3, 13), reverse=True)

        assert work.cells == cells

    def test_targets_must_sum_to_size(self, full_grid):
        with pytest.raises(ValueError):
            RectangularSplit().split_horizontal(full_grid.work_set(), (4, 4))

    def test_negative_target(self, full_grid):
        with pytest.raises(ValueError):
            RectangularSplit().split_vertical(full_grid.work_set(), (-1, 17))

    def test_empty_set(self):
        strips = RectangularSplit().split_horizontal(WorkSet(()), (0, 0))
        assert [s.size for s in strips] == [0, 0]
