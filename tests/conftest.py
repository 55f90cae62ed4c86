"""Shared fixtures for the load balancer tests."""

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from LoadBalancer import Grid, Neighbours, Topography  # noqa: E402


@pytest.fixture
def full_grid():
    """4x4 grid where every block is ocean."""
    return Grid.from_mask(np.ones((4, 4), dtype=bool))


@pytest.fixture
def closed_neighbours(full_grid):
    """Closed boundaries and unit weights: communication counts neighbour pairs."""
    return Neighbours(full_grid, halo_width=1, boundary_x="closed", boundary_y="closed")


@pytest.fixture
def basin_grid():
    """Idealized basin, 16x12 blocks of 4x4 gridpoints."""
    return Grid(Topography.idealized(64, 48), 4, 4)


@pytest.fixture
def basin_neighbours(basin_grid):
    return Neighbours(basin_grid)
