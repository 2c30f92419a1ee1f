"""Spatial metrics: population, turnover, and Moore-connected clusters."""

from __future__ import annotations

from collections.abc import Set

import networkx as nx

from viv.domain.index import Index


def population(living: Set[Index]) -> int:
    """Return the number of live cells."""
    return len(living)


def births_and_deaths(previous: Set[Index], current: Set[Index]) -> tuple[int, int]:
    """Return ``(births, deaths)`` between two consecutive live sets."""
    births = len(current - previous)
    deaths = len(previous - current)
    return births, deaths


def adjacency_graph(living: Set[Index]) -> nx.Graph:
    """Build the graph of live cells with an edge between Moore-adjacent cells."""
    graph = nx.Graph()
    graph.add_nodes_from(living)
    for index in living:
        # Right half of the neighborhood is enough: each edge is seen once.
        for neighbor in index.neighbors()[2:6]:
            if neighbor in living:
                graph.add_edge(index, neighbor)
    return graph


def cluster_count(living: Set[Index]) -> int:
    """Count Moore-connected components among live cells.

    Isolated cells count as single-cell clusters; an empty set has none.
    """
    if not living:
        return 0
    return nx.number_connected_components(adjacency_graph(living))
