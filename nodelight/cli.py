"""CLI interface for nodelight.

Applies the highlight toggles to a graph file headlessly and prints the
resulting node records, which is handy for inspecting what a renderer would be
asked to draw.
"""

import json
import sys
from collections.abc import Callable

import click
from dotenv import load_dotenv
from pydantic import ValidationError

# Load .env before importing other nodelight modules
# This ensures env vars are set before module-level code reads them
load_dotenv()

from nodelight import __version__  # noqa: E402
from nodelight.config import load_profile  # noqa: E402
from nodelight.highlight import (  # noqa: E402
    HighlightSession,
    filter_highlight,
    highlight_filter,
    neighborhood_highlight,
    select_node,
    select_nodes,
)
from nodelight.logging import log_operation, logger  # noqa: E402
from nodelight.utils.graph_io import GraphLoadError, load_network  # noqa: E402


def _open_session(graph_path: str, depth: int | None, constrained: bool) -> HighlightSession:
    try:
        network = load_network(graph_path)
    except GraphLoadError as e:
        click.echo(f"Failed to load graph: {e}", err=True)
        sys.exit(1)

    try:
        profile = load_profile(
            resource_constrained=True if constrained else None,
            max_depth=depth,
        )
    except ValidationError as e:
        click.echo(f"Invalid session profile: {e}", err=True)
        sys.exit(1)
    return HighlightSession.create(network, profile)


def _dump_nodes(session: HighlightSession) -> None:
    records = [
        node.model_dump(by_alias=True, exclude_none=True)
        for node in session.nodes.get_all().values()
    ]
    click.echo(json.dumps(records, indent=2))


def _graph_options(func: Callable[..., None]) -> Callable[..., None]:
    """Shared GRAPH_PATH argument and profile options."""
    func = click.option(
        "--constrained",
        is_flag=True,
        help="Use the resource-constrained profile (depth 1, cached, no physics)",
    )(func)
    func = click.option(
        "--depth",
        type=click.IntRange(min=1),
        default=None,
        help="Neighborhood depth in hops (default: 2, or 1 when constrained)",
    )(func)
    func = click.argument(
        "graph_path", type=click.Path(exists=True, dir_okay=False, resolve_path=True)
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="nodelight")
def cli() -> None:
    """nodelight - reversible neighborhood highlighting for graph views."""
    pass


@cli.command()
@_graph_options
@click.option("--node", "node_ids", multiple=True, required=True, help="Selected node ID")
@click.option("--reset", is_flag=True, help="Clear the highlight again before printing")
def highlight(
    graph_path: str,
    depth: int | None,
    constrained: bool,
    node_ids: tuple[str, ...],
    reset: bool,
) -> None:
    """Highlight the neighborhood of the first --node and print node records.

    GRAPH_PATH: JSON file with "nodes" and "edges" arrays.
    """
    session = _open_session(graph_path, depth, constrained)

    with log_operation("highlight", {"seed": node_ids[0], "depth": session.profile.max_depth}):
        select_node(session, list(node_ids))
        if reset:
            neighborhood_highlight(session, {"nodes": []})

    _dump_nodes(session)


@cli.command(name="filter")
@_graph_options
@click.option("--node", "node_ids", multiple=True, required=True, help="Node ID to keep visible")
@click.option("--reset", is_flag=True, help="Clear the filter again before printing")
def filter_cmd(
    graph_path: str,
    depth: int | None,
    constrained: bool,
    node_ids: tuple[str, ...],
    reset: bool,
) -> None:
    """Hide every node except the given ones and print node records.

    GRAPH_PATH: JSON file with "nodes" and "edges" arrays.
    """
    session = _open_session(graph_path, depth, constrained)

    with log_operation("filter", {"nodes": len(node_ids)}):
        select_nodes(session, list(node_ids))
        if reset:
            filter_highlight(session, {"nodes": []})

    _dump_nodes(session)


@cli.command()
@_graph_options
@click.option(
    "--item",
    type=click.Choice(["node", "edge"]),
    default="node",
    help="Collection to scan (default: node)",
)
@click.option("--property", "prop", required=True, help="Property name to compare")
@click.option("--value", "values", multiple=True, required=True, help="Allowed value")
def match(
    graph_path: str,
    depth: int | None,
    constrained: bool,
    item: str,
    prop: str,
    values: tuple[str, ...],
) -> None:
    """Show only nodes (or edge endpoints) whose property matches a value.

    GRAPH_PATH: JSON file with "nodes" and "edges" arrays.
    """
    session = _open_session(graph_path, depth, constrained)

    with log_operation("match", {"item": item, "property": prop}):
        matched = highlight_filter(
            session, {"item": item, "property": prop, "value": list(values)}
        )

    logger.info("  Matched %d nodes", len(matched))
    _dump_nodes(session)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
