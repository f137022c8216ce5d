"""Graph traversal used by the highlight toggles."""

from nodelight.analyzers.neighborhood import NeighborhoodResolver, nodes_within_depth

__all__ = [
    "NeighborhoodResolver",
    "nodes_within_depth",
]
