"""Work distributions: the layered result of a hierarchical split.

A distribution assigns every ocean block to a core, every core to a node and,
optionally, every node to a cluster. Each level is a named layer of WorkSets:

    BLOCKS    one set per ocean block
    CORES     leaves of the search
    NODES     union of the cores of one node
    CLUSTERS  union of the nodes of one cluster (only with clusters > 1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

from .datastructures import Coordinate, WorkSet
from .search import MAX_SLICES, InvalidPartitionRequest, SearchSplit

log = logging.getLogger(__name__)

LAYER_ORDER = ("BLOCKS", "CORES", "NODES", "CLUSTERS")


@dataclass(frozen=True)
class Layer:
    """A named partition of the ocean blocks."""

    name: str
    sets: Tuple[WorkSet, ...]

    def __len__(self):
        return len(self.sets)

    def __iter__(self):
        return iter(self.sets)

    def locate(self, x: int, y: int):
        """Return the set owning block (x, y), or None for land."""
        c = Coordinate(x, y)
        for s in self.sets:
            if c in s:
                return s
        return None


class Distribution:
    """Layers of a computed work distribution over one grid."""

    def __init__(self, grid, layers: Dict[str, Layer]):
        self.grid = grid
        self._layers = dict(layers)

    def contains(self, name: str) -> bool:
        return name in self._layers

    def layer(self, name: str) -> Layer:
        if name not in self._layers:
            raise KeyError(f"Distribution has no layer {name}; available: {list(self._layers)}")
        return self._layers[name]

    @property
    def names(self):
        return [n for n in LAYER_ORDER if n in self._layers]

    def locate(self, name: str, x: int, y: int):
        return self.layer(name).locate(x, y)

    def summary(self, neighbours) -> pd.DataFrame:
        """Size and communication of every set in every layer."""
        rows = [
            {"layer": name, "index": s.index, "size": s.size, "communication": s.communication(neighbours)}
            for name in self.names
            for s in self._layers[name]
        ]
        return pd.DataFrame(rows, columns=["layer", "index", "size", "communication"])


def _group(sets, per_group):
    """Merge consecutive runs of ``per_group`` sets."""
    return tuple(
        WorkSet.merge(sets[i:i + per_group], index=i // per_group)
        for i in range(0, len(sets), per_group)
    )


def build_distribution(grid, neighbours, nodes: int, cores_per_node: int, clusters: int = 1,
                       max_slices: int = MAX_SLICES) -> Distribution:
    """Distribute the ocean blocks of ``grid`` over clusters, nodes and cores.

    Parameters
    ----------
    grid : Grid
        Block grid to distribute.
    neighbours : Neighbours
        Adjacency policy used to price communication.
    nodes : int
        Total number of nodes (divisible by ``clusters``).
    cores_per_node : int
        Cores per node.
    clusters : int
        Number of clusters; a CLUSTERS layer is only built when above 1.
    max_slices : int
        Widest level the search accepts.

    Returns
    -------
    Distribution
        Layers BLOCKS, CORES, NODES (and CLUSTERS).
    """
    if clusters < 1 or nodes < 1 or cores_per_node < 1:
        raise InvalidPartitionRequest(
            f"Invalid machine layout: {clusters} clusters, {nodes} nodes, {cores_per_node} cores per node"
        )
    if nodes % clusters != 0:
        raise InvalidPartitionRequest(f"{nodes} nodes cannot be spread evenly over {clusters} clusters")

    nodes_per_cluster = nodes // clusters
    if clusters > 1:
        layout = [[cores_per_node] * nodes_per_cluster for _ in range(clusters)]
    else:
        layout = [cores_per_node] * nodes

    work = grid.work_set()
    log.info(f"Distributing {work.size} blocks: {clusters} clusters, {nodes} nodes, {cores_per_node} cores per node")

    search = SearchSplit(work, nodes * cores_per_node, neighbours, max_slices=max_slices)
    cores = tuple(search.split(layout))

    # Leaves come out grouped per node, and nodes grouped per cluster
    node_sets = _group(cores, cores_per_node)

    layers = {
        "BLOCKS": Layer("BLOCKS", tuple(WorkSet((c,), index=i) for i, c in enumerate(work.cells))),
        "CORES": Layer("CORES", cores),
        "NODES": Layer("NODES", node_sets),
    }
    if clusters > 1:
        layers["CLUSTERS"] = Layer("CLUSTERS", _group(node_sets, nodes_per_cluster))

    return Distribution(grid, layers)
