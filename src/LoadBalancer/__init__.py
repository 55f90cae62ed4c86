"""Ocean grid load balancer package.

Partitions the active blocks of an ocean model grid into nested groups of
roughly equal work (clusters, nodes, cores) while keeping the halo
communication between groups low. The grid topology is periodic in x and
folded at the northern edge (tripole).

Components
----------
Grid and topology:
- Topography, Grid: depth levels and the block grid built on them
- Neighbours: adjacency policy (cyclic / tripole boundaries)

Partitioning:
- WorkSet: immutable set of blocks
- RectangularSplit: cuts a WorkSet into strips of given work
- SearchSplit: exhaustive search for the cheapest hierarchical split
- build_distribution: layered BLOCKS / CORES / NODES / CLUSTERS result
"""

from .datastructures import Coordinate, WorkSet, Candidate, Solution
from .topography import Topography, Grid
from .neighbours import Neighbours
from .splitting import RectangularSplit
from .search import (
    MAX_SLICES,
    ORIENTATIONS,
    InvalidPartitionRequest,
    SearchSplit,
    index_permutations,
    split_work_set,
)
from .distribution import Layer, Distribution, build_distribution

__all__ = [
    # Data structures
    "Coordinate",
    "WorkSet",
    "Candidate",
    "Solution",
    # Grid
    "Topography",
    "Grid",
    "Neighbours",
    # Splitting and search
    "RectangularSplit",
    "SearchSplit",
    "InvalidPartitionRequest",
    "index_permutations",
    "split_work_set",
    "MAX_SLICES",
    "ORIENTATIONS",
    # Distribution
    "Layer",
    "Distribution",
    "build_distribution",
]
