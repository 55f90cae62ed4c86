"""
Load balancer runner - distributes an ocean grid over nodes and cores.

Usage:
    uv run python run_partition.py
    uv run python run_partition.py distribution.nodes=8 distribution.cores_per_node=2
    uv run python run_partition.py topography.file=data/kmt.ieeei4 output.image=figures/kmt.png
"""

import logging

import hydra
from omegaconf import DictConfig

log = logging.getLogger(__name__)


def _load_grid(cfg: DictConfig):
    """Create the topography and block grid from config."""
    from LoadBalancer import Grid, Topography
    from utils.config import resolve_path

    topo_cfg = cfg.topography
    if topo_cfg.get("file"):
        topography = Topography.from_file(resolve_path(topo_cfg.file), topo_cfg.width, topo_cfg.height)
        log.info(f"Topography {topo_cfg.file} ({topo_cfg.width}x{topo_cfg.height})")
    else:
        topography = Topography.idealized(topo_cfg.width, topo_cfg.height)
        log.info(f"Idealized topography ({topo_cfg.width}x{topo_cfg.height})")

    return Grid(topography, cfg.grid.block_width, cfg.grid.block_height)


def _log_summary(summary):
    """Log per-layer statistics of the distribution."""
    for name, group in summary.groupby("layer", sort=False):
        log.info(
            f"{name}: {len(group)} sets, work {group['size'].min()}-{group['size'].max()}, "
            f"communication total={group['communication'].sum()} max={group['communication'].max()}"
        )


@hydra.main(config_path="Experiments/hydra-conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """Entry point - compute a distribution and report it."""
    from LoadBalancer import Neighbours, build_distribution

    grid = _load_grid(cfg)
    log.info(f"{grid}")

    neighbours = Neighbours(
        grid,
        halo_width=cfg.neighbours.halo_width,
        boundary_x=cfg.neighbours.boundary_x,
        boundary_y=cfg.neighbours.boundary_y,
    )

    dist_cfg = cfg.distribution
    distribution = build_distribution(
        grid,
        neighbours,
        nodes=dist_cfg.nodes,
        cores_per_node=dist_cfg.cores_per_node,
        clusters=dist_cfg.get("clusters", 1),
        max_slices=cfg.search.get("max_slices", 8),
    )

    _log_summary(distribution.summary(neighbours))

    if cfg.output.get("image"):
        from LoadBalancer.postprocessing import save_distribution_image
        from utils.config import get_config_section, resolve_path

        image = cfg.output.image
        if "/" not in str(image):
            image = f"{get_config_section('output').get('figures_dir', 'figures')}/{image}"
        path = save_distribution_image(distribution, resolve_path(image), layer=cfg.output.get("layer", "CORES"))
        log.info(f"Saved {path}")


if __name__ == "__main__":
    main()
