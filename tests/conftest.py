"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from nodelight.config import SessionProfile
from nodelight.highlight import HighlightSession
from nodelight.network import InMemoryNetwork


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep profile environment variables from leaking into tests."""
    for name in (
        "NODELIGHT_RESOURCE_CONSTRAINED",
        "NODELIGHT_MAX_DEPTH",
        "NODELIGHT_CACHE_NEIGHBORHOODS",
    ):
        monkeypatch.delenv(name, raising=False)


def _build_network(edges: list[tuple[str, str]], nodes: list[dict] | None = None) -> InMemoryNetwork:
    """Create a network with one labelled, colored node per endpoint."""
    network = InMemoryNetwork()
    for node in nodes or []:
        network.add_node(node)
    for src, dst in edges:
        for node_id in (src, dst):
            if node_id not in network.nodes.get_all():
                network.add_node({"id": node_id, "label": f"label-{node_id}", "color": f"#{node_id}"})
    for i, (src, dst) in enumerate(edges):
        network.add_edge({"id": f"e{i}", "from": src, "to": dst})
    return network


@pytest.fixture
def chain_network() -> InMemoryNetwork:
    """A - B - C - D."""
    return _build_network([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def chain_session(chain_network: InMemoryNetwork) -> HighlightSession:
    """Session over the chain graph with the default profile (depth 2)."""
    return HighlightSession.create(chain_network, SessionProfile(max_depth=2))


@pytest.fixture
def make_network():
    """Factory fixture: build a network from an edge list (and optional extra nodes)."""
    return _build_network


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
