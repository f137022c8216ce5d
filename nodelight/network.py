"""Collaborator interfaces consumed by the highlight core.

The rendering library owns node/edge storage, topology queries, selection
rendering and physics. The core only depends on the four small protocols
below. ``InMemoryNetwork`` implements all of them on top of a NetworkX graph;
it backs the CLI and the test suite and can stand in for a real renderer in
headless use.
"""

from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

import networkx as nx

from nodelight.logging import logger
from nodelight.models.graph import EdgeRecord, NodeRecord


@runtime_checkable
class NodeStore(Protocol):
    """Queryable node collection with a batched write."""

    def get_all(self) -> dict[str, NodeRecord]: ...

    def update_batch(self, records: Iterable[NodeRecord]) -> None: ...


@runtime_checkable
class EdgeStore(Protocol):
    """Queryable edge collection."""

    def get_all(self) -> dict[str, EdgeRecord]: ...


@runtime_checkable
class GraphTopology(Protocol):
    """Directly-connected node lookup."""

    def get_connected_nodes(self, node_id: str) -> list[str] | None: ...


@runtime_checkable
class Renderer(Protocol):
    """The parts of the renderer the core drives directly."""

    def select_nodes(self, node_ids: list[str]) -> None: ...

    def set_options(self, **options: Any) -> None: ...


TopologyListener = Callable[[], None]


class _NodeCollection:
    def __init__(self, network: "InMemoryNetwork") -> None:
        self._network = network

    def get_all(self) -> dict[str, NodeRecord]:
        return {
            node_id: record.model_copy(deep=True)
            for node_id, record in self._network._nodes.items()
        }

    def update_batch(self, records: Iterable[NodeRecord]) -> None:
        self._network._apply_node_batch(list(records))


class _EdgeCollection:
    def __init__(self, network: "InMemoryNetwork") -> None:
        self._network = network

    def get_all(self) -> dict[str, EdgeRecord]:
        return {
            edge_id: record.model_copy(deep=True)
            for edge_id, record in self._network._edges.items()
        }


class InMemoryNetwork:
    """Node/edge store, topology and renderer state held in memory.

    Topology is an undirected ``nx.MultiGraph`` so that parallel edges and
    self-loops behave like they do in a vis-network data set: connected nodes
    are reported regardless of edge direction.

    Attributes:
        nodes: NodeStore view (``get_all`` returns deep copies).
        edges: EdgeStore view.
        write_count: Number of ``update_batch`` calls received.
        selected: Node IDs most recently passed to ``select_nodes``.
        options: Renderer options most recently set (e.g. ``physics``).
    """

    def __init__(self) -> None:
        self._graph = nx.MultiGraph()
        self._nodes: dict[str, NodeRecord] = {}
        self._edges: dict[str, EdgeRecord] = {}
        self._listeners: list[TopologyListener] = []
        self.nodes = _NodeCollection(self)
        self.edges = _EdgeCollection(self)
        self.write_count = 0
        self.selected: list[str] = []
        self.options: dict[str, Any] = {"physics": True}

    # ------------------------------------------------------------------
    # Construction / topology mutation
    # ------------------------------------------------------------------

    def add_node(self, record: NodeRecord | dict[str, Any]) -> NodeRecord:
        """Add (or replace) a node record."""
        node = record if isinstance(record, NodeRecord) else NodeRecord.model_validate(record)
        is_new = node.id not in self._nodes
        self._nodes[node.id] = node
        self._graph.add_node(node.id)
        if is_new:
            self._notify()
        return node

    def add_edge(self, record: EdgeRecord | dict[str, Any]) -> EdgeRecord:
        """Add an edge record, creating bare endpoint nodes in the topology."""
        edge = record if isinstance(record, EdgeRecord) else EdgeRecord.model_validate(record)
        if edge.id in self._edges:
            self.remove_edge(edge.id)
        self._edges[edge.id] = edge
        self._graph.add_edge(edge.source, edge.target, key=edge.id)
        self._notify()
        return edge

    def remove_edge(self, edge_id: str) -> None:
        """Remove an edge. Unknown IDs are ignored."""
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            return
        if self._graph.has_edge(edge.source, edge.target, key=edge_id):
            self._graph.remove_edge(edge.source, edge.target, key=edge_id)
        self._notify()

    def remove_node(self, node_id: str) -> None:
        """Remove a node and every edge attached to it."""
        if node_id not in self._nodes and node_id not in self._graph:
            return
        self._nodes.pop(node_id, None)
        for edge_id in [
            eid for eid, e in self._edges.items() if node_id in (e.source, e.target)
        ]:
            del self._edges[edge_id]
        if node_id in self._graph:
            self._graph.remove_node(node_id)
        self._notify()

    def on_topology_change(self, listener: TopologyListener) -> Callable[[], None]:
        """Register a callback fired after every node/edge addition or removal.

        Returns:
            A function that unregisters the callback again.
        """
        self._listeners.append(listener)
        return lambda: self.remove_topology_listener(listener)

    def remove_topology_listener(self, listener: TopologyListener) -> None:
        """Unregister a topology callback. Unknown callbacks are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ------------------------------------------------------------------
    # GraphTopology
    # ------------------------------------------------------------------

    def get_connected_nodes(self, node_id: str) -> list[str]:
        """Return IDs directly connected to ``node_id`` (empty if unknown)."""
        if node_id not in self._graph:
            return []
        return [str(n) for n in self._graph.neighbors(node_id)]

    # ------------------------------------------------------------------
    # Renderer
    # ------------------------------------------------------------------

    def select_nodes(self, node_ids: list[str]) -> None:
        self.selected = list(node_ids)

    def set_options(self, **options: Any) -> None:
        self.options.update(options)

    # ------------------------------------------------------------------

    def _apply_node_batch(self, records: list[NodeRecord]) -> None:
        self.write_count += 1
        for record in records:
            if record.id not in self._nodes:
                # The store never creates nodes from an update batch.
                logger.debug("  Dropping update for unknown node %s", record.id)
                continue
            self._nodes[record.id] = record.model_copy(deep=True)
