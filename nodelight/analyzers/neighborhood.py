"""Bounded-depth neighborhood resolution.

Expands outward from a seed node one hop at a time using the renderer's
"connected nodes" primitive, for a fixed number of hops:

- depth 1 is the seed's direct neighbors
- depth d is the neighbors of every node first reached at depth d-1

The returned set contains every node reachable by 1..max_depth hops. The seed
is part of it whenever a walk of at most max_depth hops leads back to it (any
seed with a neighbor, once max_depth >= 2). Cycles cannot cause unbounded
expansion because the loop runs at most max_depth times.
"""

from nodelight.logging import logger
from nodelight.network import GraphTopology
from nodelight.utils.cache import NeighborhoodCache


def _connected(topology: GraphTopology, node_id: str) -> list[str]:
    # A lookup miss means an isolated (or unknown) node, not an error.
    return list(topology.get_connected_nodes(node_id) or [])


def nodes_within_depth(
    topology: GraphTopology,
    seed: str,
    max_depth: int,
) -> dict[str, int]:
    """Find all nodes reachable from ``seed`` within ``max_depth`` hops.

    Args:
        topology: Source of directly-connected node lookups.
        seed: Starting node ID.
        max_depth: Maximum number of hops (>= 1).

    Returns:
        Dict mapping reached node ID to the hop count at which it was first
        reached.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, got {max_depth}")

    result: dict[str, int] = {}
    current_level = [seed]

    for depth in range(1, max_depth + 1):
        next_level: list[str] = []
        for n in current_level:
            for neighbor in _connected(topology, n):
                if neighbor not in result:
                    result[neighbor] = depth
                    next_level.append(neighbor)
        current_level = next_level
        if not current_level:
            break

    return result


class NeighborhoodResolver:
    """Resolves seed neighborhoods for one session.

    Args:
        topology: Source of directly-connected node lookups.
        max_depth: Hops to expand, fixed for the session.
        cache: Optional memoization cache. When given, a seed is traversed at
            most once until the cache is invalidated.
    """

    def __init__(
        self,
        topology: GraphTopology,
        max_depth: int,
        cache: NeighborhoodCache | None = None,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.topology = topology
        self.max_depth = max_depth
        self.cache = cache

    def resolve(self, seed: str) -> frozenset[str]:
        """Return the de-duplicated set of nodes within max_depth hops of seed."""
        if self.cache is not None:
            cached = self.cache.get(seed)
            if cached is not None:
                logger.debug("  Neighborhood cache hit for %s (%d nodes)", seed, len(cached))
                return cached

        hops = nodes_within_depth(self.topology, seed, self.max_depth)
        neighborhood = frozenset(hops)
        logger.debug(
            "  Resolved neighborhood of %s: %d nodes at depth<=%d (deepest hop %d)",
            seed,
            len(neighborhood),
            self.max_depth,
            max(hops.values(), default=0),
        )

        if self.cache is not None:
            self.cache.put(seed, neighborhood)
        return neighborhood

    def direct_neighbors(self, seed: str) -> frozenset[str]:
        """Return the seed's depth-1 neighbors."""
        return frozenset(_connected(self.topology, seed))

    def invalidate(self) -> None:
        """Forget memoized neighborhoods (call on topology change)."""
        if self.cache is not None:
            self.cache.invalidate()
