"""Tests for loading graph documents."""

import json
from pathlib import Path

import pytest

from nodelight.utils.graph_io import GraphLoadError, load_network, network_from_dict


class TestNetworkFromDict:
    """Tests for building a network from a parsed document."""

    def test_builds_nodes_and_edges(self) -> None:
        network = network_from_dict(
            {
                "nodes": [{"id": 1, "label": "one"}, {"id": 2, "label": "two"}],
                "edges": [{"from": 1, "to": 2}],
            }
        )

        assert set(network.nodes.get_all()) == {"1", "2"}
        assert list(network.edges.get_all()) == ["e0"]
        assert network.get_connected_nodes("1") == ["2"]

    def test_missing_sections_are_empty(self) -> None:
        network = network_from_dict({})

        assert network.nodes.get_all() == {}
        assert network.edges.get_all() == {}

    def test_invalid_record_raises(self) -> None:
        with pytest.raises(GraphLoadError):
            network_from_dict({"nodes": [{"label": "no id"}]})

    @pytest.mark.parametrize(
        "document",
        [{"nodes": 5}, {"edges": 3}, {"nodes": {"id": "A"}}, {"nodes": [], "edges": "A-B"}],
    )
    def test_non_list_section_raises(self, document: dict) -> None:
        """Sections that are not arrays are rejected as malformed."""
        with pytest.raises(GraphLoadError, match="must be a list"):
            network_from_dict(document)

    def test_non_object_raises(self) -> None:
        with pytest.raises(GraphLoadError):
            network_from_dict([1, 2, 3])  # type: ignore[arg-type]


class TestLoadNetwork:
    """Tests for reading graph files."""

    def test_loads_file(self, temp_dir: Path) -> None:
        path = temp_dir / "graph.json"
        path.write_text(json.dumps({"nodes": [{"id": "A"}], "edges": []}))

        network = load_network(path)

        assert list(network.nodes.get_all()) == ["A"]

    def test_missing_file_raises(self, temp_dir: Path) -> None:
        with pytest.raises(GraphLoadError) as excinfo:
            load_network(temp_dir / "missing.json")

        assert excinfo.value.path == temp_dir / "missing.json"

    def test_malformed_json_raises(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.json"
        path.write_text("{not json")

        with pytest.raises(GraphLoadError):
            load_network(path)

    def test_non_list_section_reports_path(self, temp_dir: Path) -> None:
        path = temp_dir / "bad_section.json"
        path.write_text(json.dumps({"nodes": 5, "edges": []}))

        with pytest.raises(GraphLoadError) as excinfo:
            load_network(path)

        assert excinfo.value.path == path

    def test_invalid_record_reports_path(self, temp_dir: Path) -> None:
        path = temp_dir / "bad_record.json"
        path.write_text(json.dumps({"nodes": [{"label": "no id"}]}))

        with pytest.raises(GraphLoadError) as excinfo:
            load_network(path)

        assert excinfo.value.path == path
