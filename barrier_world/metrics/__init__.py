"""Layout metrics."""

from barrier_world.metrics.spatial import (
    barrier_cluster_count,
    barrier_coverage,
    min_center_separation,
)

__all__ = [
    "barrier_cluster_count",
    "barrier_coverage",
    "min_center_separation",
]
