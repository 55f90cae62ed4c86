"""Neighbour relation between blocks of the grid.

Ocean models on a global grid are periodic in the east-west direction and,
on a tripole grid, folded along the northern edge: the row above the top row
is the top row mirrored in x. The southern edge is closed (Antarctica).
"""

from __future__ import annotations

from .datastructures import Coordinate

CYCLIC = "cyclic"
CLOSED = "closed"
TRIPOLE = "tripole"

# (dx, dy) in a fixed order: west, east, south, north, then the corners
DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (1, -1), (-1, 1), (1, 1),
)


class Neighbours:
    """Adjacency policy for a block grid.

    Parameters
    ----------
    grid : Grid
        Block grid the coordinates refer to.
    halo_width : int
        Number of ghost points exchanged across a block edge.
    boundary_x : str
        'cyclic' (wrap around) or 'closed'.
    boundary_y : str
        'tripole' (fold the northern edge) or 'closed'.

    Examples
    --------
    >>> n = Neighbours(grid, boundary_x='cyclic', boundary_y='tripole')
    >>> n.neighbours_of(Coordinate(0, 0))
    """

    def __init__(self, grid, halo_width: int = 2, boundary_x: str = CYCLIC, boundary_y: str = TRIPOLE):
        if boundary_x not in (CYCLIC, CLOSED):
            raise ValueError(f"Unknown x boundary: {boundary_x}. Use 'cyclic' or 'closed'.")
        if boundary_y not in (TRIPOLE, CLOSED):
            raise ValueError(f"Unknown y boundary: {boundary_y}. Use 'tripole' or 'closed'.")
        if halo_width < 1:
            raise ValueError(f"Halo width must be positive, got {halo_width}")

        self.grid = grid
        self.halo_width = halo_width
        self.boundary_x = boundary_x
        self.boundary_y = boundary_y

        # Ghost points exchanged with a neighbour in each direction
        bw, bh = grid.block_width, grid.block_height
        self._weights = {
            (dx, dy): (bh * halo_width if dy == 0 else bw * halo_width if dx == 0 else halo_width**2)
            for dx, dy in DIRECTIONS
        }

    def _resolve(self, x, y):
        """Map a possibly out-of-range position onto the grid, or None."""
        width, height = self.grid.width, self.grid.height

        if y < 0:
            return None
        if y >= height:
            if self.boundary_y != TRIPOLE:
                return None
            # Fold: the row above the top row is the top row mirrored in x
            x = width - 1 - x
            y = height - 1

        if x < 0 or x >= width:
            if self.boundary_x != CYCLIC:
                return None
            x %= width

        return Coordinate(x, y)

    def _check(self, coordinate):
        if not self.grid.contains(coordinate):
            raise ValueError(f"Coordinate {tuple(coordinate)} outside {self.grid.width}x{self.grid.height} grid")

    def communication(self, coordinate):
        """Neighbours of a block paired with the halo volume exchanged with each.

        Returns
        -------
        tuple of (Coordinate, int)
            One entry per existing direction, in ``DIRECTIONS`` order.
        """
        self._check(coordinate)
        x, y = coordinate
        result = []
        for dx, dy in DIRECTIONS:
            target = self._resolve(x + dx, y + dy)
            if target is not None:
                result.append((target, self._weights[(dx, dy)]))
        return tuple(result)

    def neighbours_of(self, coordinate):
        """Coordinates surrounding a block (land included)."""
        return tuple(target for target, _ in self.communication(coordinate))

    def __repr__(self):
        return (
            f"Neighbours(halo_width={self.halo_width}, boundary_x='{self.boundary_x}', "
            f"boundary_y='{self.boundary_y}')"
        )
