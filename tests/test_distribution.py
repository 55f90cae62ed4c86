"""Tests for layered work distributions."""

import pandas as pd
import pytest
from LoadBalancer import InvalidPartitionRequest, build_distribution


class TestLayers:
    """Layer structure of a single-cluster distribution."""

    @pytest.fixture
    def distribution(self, basin_grid, basin_neighbours):
        return build_distribution(basin_grid, basin_neighbours, nodes=3, cores_per_node=2)

    def test_layer_names(self, distribution):
        assert distribution.names == ["BLOCKS", "CORES", "NODES"]
        assert not distribution.contains("CLUSTERS")

    def test_layer_sizes(self, distribution, basin_grid):
        assert len(distribution.layer("BLOCKS")) == basin_grid.work_set().size
        assert len(distribution.layer("CORES")) == 6
        assert len(distribution.layer("NODES")) == 3

    def test_cores_nest_in_nodes(self, distribution):
        """Every core lies inside exactly one node."""
        nodes = distribution.layer("NODES")
        for core in distribution.layer("CORES"):
            owners = [n for n in nodes if set(core.cells) <= set(n.cells)]
            assert len(owners) == 1

    @pytest.mark.parametrize("name", ["BLOCKS", "CORES", "NODES"])
    def test_layers_cover_ocean(self, distribution, basin_grid, name):
        cells = [c for s in distribution.layer(name) for c in s]
        assert len(cells) == len(set(cells))
        assert set(cells) == set(basin_grid.coordinates())

    def test_locate(self, distribution, basin_grid):
        c = basin_grid.coordinates()[0]
        core = distribution.locate("CORES", c.x, c.y)

        assert core is not None
        assert c in core
        assert distribution.locate("CORES", 0, 0) is None  # southern land

    def test_unknown_layer(self, distribution):
        with pytest.raises(KeyError):
            distribution.layer("RACKS")

    def test_summary(self, distribution, basin_neighbours, basin_grid):
        summary = distribution.summary(basin_neighbours)

        assert isinstance(summary, pd.DataFrame)
        assert list(summary.columns) == ["layer", "index", "size", "communication"]
        sizes = summary.groupby("layer")["size"].sum()
        assert (sizes == basin_grid.work_set().size).all()
        assert (summary["communication"] >= 0).all()


class TestClusters:
    """Three-level distributions."""

    def test_cluster_layer(self, basin_grid, basin_neighbours):
        distribution = build_distribution(basin_grid, basin_neighbours, nodes=4, cores_per_node=2, clusters=2)

        assert len(distribution.layer("CLUSTERS")) == 2
        assert len(distribution.layer("NODES")) == 4
        assert len(distribution.layer("CORES")) == 8

        clusters = distribution.layer("CLUSTERS")
        for node in distribution.layer("NODES"):
            assert sum(set(node.cells) <= set(c.cells) for c in clusters) == 1

    def test_uneven_clusters(self, basin_grid, basin_neighbours):
        with pytest.raises(InvalidPartitionRequest):
            build_distribution(basin_grid, basin_neighbours, nodes=3, cores_per_node=2, clusters=2)

    @pytest.mark.parametrize("kwargs", [
        {"nodes": 0, "cores_per_node": 2},
        {"nodes": 2, "cores_per_node": 0},
        {"nodes": 2, "cores_per_node": 2, "clusters": 0},
    ])
    def test_invalid_machine(self, basin_grid, basin_neighbours, kwargs):
        with pytest.raises(InvalidPartitionRequest):
            build_distribution(basin_grid, basin_neighbours, **kwargs)
