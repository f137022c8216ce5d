"""Neighborhood memoization for repeated highlight traversals.

Entries are keyed by seed node ID and are only valid while the graph topology
is unchanged. Owners must call ``invalidate`` whenever nodes or edges are
added or removed; ``HighlightSession`` wires this to the network's topology
change notifications.
"""

from nodelight.logging import logger


class NeighborhoodCache:
    """Seed node ID -> previously resolved neighborhood.

    Entries are never evicted individually. The cache is cleared as a whole on
    topology change.
    """

    def __init__(self) -> None:
        self._entries: dict[str, frozenset[str]] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, seed: object) -> bool:
        return seed in self._entries

    def get(self, seed: str) -> frozenset[str] | None:
        """Return the cached neighborhood for ``seed``, or None on a miss."""
        entry = self._entries.get(seed)
        if entry is None:
            self.misses += 1
        else:
            self.hits += 1
        return entry

    def put(self, seed: str, neighborhood: frozenset[str]) -> None:
        self._entries[seed] = neighborhood

    def invalidate(self) -> None:
        """Drop every entry."""
        if self._entries:
            logger.debug("  Invalidating %d cached neighborhoods", len(self._entries))
        self._entries.clear()
