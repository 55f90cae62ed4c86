"""Ocean topography and the block grid built on top of it.

The topography holds, for every gridpoint, the index of the deepest ocean
level (0 = land). The grid groups gridpoints into rectangular blocks; a block
containing at least one ocean point is a unit of work.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .datastructures import Coordinate, WorkSet


class Topography:
    """Depth-level map of the ocean model.

    Parameters
    ----------
    depth : array_like
        2D integer array indexed as ``depth[y, x]``. Zero marks land.
    """

    def __init__(self, depth):
        depth = np.asarray(depth)
        if depth.ndim != 2:
            raise ValueError(f"Topography must be 2D, got shape {depth.shape}")
        self.depth = depth.astype(np.int32, copy=False)
        self.height, self.width = self.depth.shape

    @classmethod
    def from_file(cls, path, width: int, height: int) -> "Topography":
        """Read a raw big-endian int32 topography file (POP ``kmt`` layout)."""
        path = Path(path)
        data = np.fromfile(path, dtype=">i4")
        if data.size != width * height:
            raise ValueError(
                f"{path.name}: expected {width * height} values for {width}x{height}, got {data.size}"
            )
        return cls(data.reshape(height, width))

    @classmethod
    def idealized(cls, width: int, height: int, levels: int = 40) -> "Topography":
        """Synthetic basin: a deep ocean with two continents and an Antarctic shelf."""
        y, x = np.mgrid[0:height, 0:width]
        u = x / max(width - 1, 1)
        v = y / max(height - 1, 1)

        depth = np.full((height, width), levels, dtype=np.int32)
        depth[v < 0.08] = 0
        depth[((u - 0.25) / 0.10) ** 2 + ((v - 0.55) / 0.30) ** 2 < 1.0] = 0
        depth[((u - 0.70) / 0.14) ** 2 + ((v - 0.65) / 0.22) ** 2 < 1.0] = 0

        # Shallow shelves next to the coast
        shelf = (depth > 0) & (np.roll(depth == 0, 1, axis=1) | np.roll(depth == 0, -1, axis=1))
        depth[shelf] = max(levels // 8, 1)
        return cls(depth)

    def is_ocean(self, x: int, y: int) -> bool:
        return bool(self.depth[y, x] > 0)


class Grid:
    """Block grid over a topography.

    Parameters
    ----------
    topography : Topography
        Gridpoint depth levels.
    block_width, block_height : int
        Block size in gridpoints. Edge blocks may be partial.
    """

    def __init__(self, topography: Topography, block_width: int, block_height: int):
        if block_width < 1 or block_height < 1:
            raise ValueError(f"Invalid block size {block_width}x{block_height}")

        self.topography = topography
        self.block_width = block_width
        self.block_height = block_height

        self.width = -(-topography.width // block_width)
        self.height = -(-topography.height // block_height)

        # Pad to whole blocks, then reduce each block to "any ocean"
        padded = np.zeros((self.height * block_height, self.width * block_width), dtype=bool)
        padded[: topography.height, : topography.width] = topography.depth > 0
        blocks = padded.reshape(self.height, block_height, self.width, block_width)
        self.ocean = blocks.any(axis=(1, 3))

    @classmethod
    def from_mask(cls, mask) -> "Grid":
        """Grid of 1x1 blocks where ``mask[y, x]`` marks ocean."""
        mask = np.asarray(mask, dtype=bool)
        return cls(Topography(mask.astype(np.int32)), 1, 1)

    def contains(self, coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def is_ocean(self, coordinate) -> bool:
        x, y = coordinate
        return self.contains(coordinate) and bool(self.ocean[y, x])

    def get(self, x: int, y: int):
        """Return the block coordinate if it is an ocean block, otherwise None."""
        c = Coordinate(x, y)
        return c if self.is_ocean(c) else None

    def coordinates(self):
        """All ocean blocks in row-major order."""
        ys, xs = np.nonzero(self.ocean)
        return tuple(Coordinate(int(x), int(y)) for y, x in zip(ys, xs))

    def work_set(self, index: int = 0) -> WorkSet:
        """The whole ocean as a single WorkSet."""
        return WorkSet(self.coordinates(), index=index)

    def __repr__(self):
        return (
            f"Grid({self.width}x{self.height} blocks of {self.block_width}x{self.block_height}, "
            f"{int(self.ocean.sum())} ocean)"
        )
