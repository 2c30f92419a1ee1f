"""Per-generation metrics computed from live-set snapshots."""

from viv.metrics.spatial import births_and_deaths, cluster_count, population

__all__ = ["births_and_deaths", "cluster_count", "population"]
