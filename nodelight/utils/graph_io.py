"""Load vis-network style graph documents into an InMemoryNetwork.

Expected shape::

    {
      "nodes": [{"id": "A", "label": "Alpha", "color": "#97C2FC", "type": "server"}],
      "edges": [{"from": "A", "to": "B", "weight": 3}]
    }

Edges without an ``id`` are numbered in file order.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nodelight.logging import logger
from nodelight.network import InMemoryNetwork


class GraphLoadError(Exception):
    """Raised when a graph document cannot be read or validated."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


def network_from_dict(data: dict[str, Any]) -> InMemoryNetwork:
    """Build an InMemoryNetwork from a parsed graph document.

    Raises:
        GraphLoadError: If the document is not a graph or a record is invalid.
    """
    if not isinstance(data, dict):
        raise GraphLoadError("Graph document must be a JSON object")

    nodes = data.get("nodes") or []
    edges = data.get("edges") or []
    for section, records in (("nodes", nodes), ("edges", edges)):
        if not isinstance(records, list):
            raise GraphLoadError(
                f'"{section}" must be a list, got {type(records).__name__}'
            )

    network = InMemoryNetwork()
    try:
        for node in nodes:
            network.add_node(node)
        for i, edge in enumerate(edges):
            if isinstance(edge, dict) and "id" not in edge:
                edge = {**edge, "id": f"e{i}"}
            network.add_edge(edge)
    except ValidationError as e:
        raise GraphLoadError(f"Invalid graph record: {e}") from e

    return network


def load_network(path: Path | str) -> InMemoryNetwork:
    """Load a graph document from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Populated InMemoryNetwork.

    Raises:
        GraphLoadError: If the file cannot be read, parsed or validated.
    """
    filepath = Path(path)
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise GraphLoadError(f"Could not load {filepath}: {e}", filepath) from e

    try:
        network = network_from_dict(data)
    except GraphLoadError as e:
        e.path = filepath
        raise

    logger.debug(
        "  Loaded %d nodes and %d edges from %s",
        len(network.nodes.get_all()),
        len(network.edges.get_all()),
        filepath,
    )
    return network
