"""Neighborhood highlight and selection filter toggles.

Both entry points take a selection event (``{"nodes": [...]}``) and behave as
two-state machines:

- a non-empty selection activates (or re-targets) the toggle
- an empty selection while active reverts everything the toggle changed
- an empty selection while inactive does nothing

Each call reads one snapshot of all nodes and issues at most one batched
write. IDs missing from the snapshot are skipped.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from nodelight.highlight.constants import DIMMED_COLOR, NEIGHBORHOOD_COLOR, SELECTED_COLOR
from nodelight.highlight.session import HighlightSession, ToggleState
from nodelight.logging import logger
from nodelight.models.graph import (
    FilterCriteria,
    NodeColor,
    NodeRecord,
    SelectionEvent,
    StructuredColor,
)

EventLike = SelectionEvent | Mapping[str, Any]


def _selection(event: EventLike) -> list[str]:
    if isinstance(event, SelectionEvent):
        return list(event.nodes)
    return SelectionEvent.model_validate(event).nodes


def _copy_color(color: NodeColor | None) -> NodeColor | None:
    if isinstance(color, StructuredColor):
        return color.model_copy(deep=True)
    return color


def _restore_hidden_label(node: NodeRecord) -> None:
    if node.hidden_label is not None:
        node.label = node.hidden_label
        node.hidden_label = None


def _restore_saved_label(node: NodeRecord) -> None:
    if node.saved_label is not None:
        node.label = node.saved_label
        node.saved_label = None


# =============================================================================
# Neighborhood highlight
# =============================================================================


def neighborhood_highlight(session: HighlightSession, event: EventLike) -> None:
    """Emphasize the first selected node's neighborhood and dim everything else.

    Args:
        session: Highlight session for the graph instance.
        event: Selection event; an empty ``nodes`` list clears the highlight.
    """
    selection = _selection(event)

    if selection:
        _activate_highlight(session, selection[0])
    elif session.highlight_state is ToggleState.ACTIVE:
        _reset_highlight(session)
    else:
        logger.debug("  Highlight already inactive, nothing to clear")


def _activate_highlight(session: HighlightSession, seed: str) -> None:
    all_nodes = session.nodes.get_all()
    original_colors = session.original_colors

    # Dim everything, remembering colors the first time a node is seen
    for node_id, node in all_nodes.items():
        if node_id not in original_colors:
            original_colors[node_id] = _copy_color(node.color)
        node.color = DIMMED_COLOR
        if node.hidden_label is None:
            node.hidden_label = node.label
            node.label = None

    # Lightly un-dim the whole neighborhood
    for node_id in session.resolver.resolve(seed):
        node = all_nodes.get(node_id)
        if node is not None:
            node.color = NEIGHBORHOOD_COLOR
            _restore_hidden_label(node)

    # Direct neighbors and the seed get their own colors back
    for node_id in session.resolver.direct_neighbors(seed):
        node = all_nodes.get(node_id)
        if node is not None:
            node.color = _copy_color(original_colors[node_id])
            _restore_hidden_label(node)

    seed_node = all_nodes.get(seed)
    if seed_node is not None:
        if session.profile.resource_constrained:
            seed_node.color = SELECTED_COLOR
        else:
            seed_node.color = _copy_color(original_colors[seed])
        _restore_hidden_label(seed_node)
    else:
        logger.debug("  Seed %s not in node store, dimming only", seed)

    session.nodes.update_batch(all_nodes.values())
    session.highlight_state = ToggleState.ACTIVE
    logger.debug("  Highlight active around %s", seed)


def _reset_highlight(session: HighlightSession) -> None:
    all_nodes = session.nodes.get_all()

    for node_id, node in all_nodes.items():
        if node_id in session.original_colors:
            node.color = _copy_color(session.original_colors[node_id])
        _restore_hidden_label(node)

    session.nodes.update_batch(all_nodes.values())
    session.highlight_state = ToggleState.INACTIVE
    logger.debug("  Highlight cleared")


# =============================================================================
# Selection filter
# =============================================================================


def filter_highlight(session: HighlightSession, event: EventLike) -> None:
    """Hide every node except the selected ones.

    Args:
        session: Highlight session for the graph instance.
        event: Selection event; an empty ``nodes`` list shows every node again.
    """
    selection = _selection(event)

    if selection:
        _activate_filter(session, selection)
    elif session.filter_state is ToggleState.ACTIVE:
        _reset_filter(session)
    else:
        logger.debug("  Filter already inactive, nothing to clear")


def _activate_filter(session: HighlightSession, selection: list[str]) -> None:
    all_nodes = session.nodes.get_all()

    for node in all_nodes.values():
        node.hidden = True
        if node.saved_label is None:
            node.saved_label = node.label
            node.label = None

    for node_id in selection:
        node = all_nodes.get(node_id)
        if node is not None:
            node.hidden = False
            _restore_saved_label(node)

    session.nodes.update_batch(all_nodes.values())
    session.filter_state = ToggleState.ACTIVE
    logger.debug("  Filter active on %d nodes", len(selection))


def _reset_filter(session: HighlightSession) -> None:
    all_nodes = session.nodes.get_all()

    for node in all_nodes.values():
        node.hidden = False
        _restore_saved_label(node)

    session.nodes.update_batch(all_nodes.values())
    session.filter_state = ToggleState.INACTIVE
    logger.debug("  Filter cleared")


# =============================================================================
# Selection adapters
# =============================================================================


def select_node(session: HighlightSession, node_ids: list[str]) -> list[str]:
    """Mark ``node_ids`` as selected, then highlight the first one's neighborhood."""
    session.renderer.select_nodes(list(node_ids))
    neighborhood_highlight(session, {"nodes": list(node_ids)})
    return node_ids


def select_nodes(session: HighlightSession, node_ids: list[str]) -> list[str]:
    """Mark ``node_ids`` as selected, then filter the view down to them."""
    session.renderer.select_nodes(list(node_ids))
    filter_highlight(session, {"nodes": list(node_ids)})
    return node_ids


def _as_text(value: Any) -> str | None:
    """Textual form used for attribute matching (None never matches)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _matching_ids(records: Iterable[Any], prop: str, allowed: set[str], item: str) -> list[str]:
    matched: list[str] = []
    for record in records:
        if _as_text(record.property_value(prop)) not in allowed:
            continue
        if item == "edge":
            matched.extend((record.source, record.target))
        else:
            matched.append(record.id)
    return matched


def highlight_filter(
    session: HighlightSession,
    criteria: FilterCriteria | Mapping[str, Any],
) -> list[str]:
    """Filter the view to nodes (or edge endpoints) whose property matches.

    Args:
        session: Highlight session for the graph instance.
        criteria: ``{"item": "node"|"edge", "property": str, "value": [str, ...]}``.

    Returns:
        The matched node IDs (first-appearance order, no duplicates) that were
        passed to ``select_nodes``.
    """
    if not isinstance(criteria, FilterCriteria):
        criteria = FilterCriteria.model_validate(criteria)

    allowed = set(criteria.value)
    store = session.nodes if criteria.item == "node" else session.edges
    matched = _matching_ids(store.get_all().values(), criteria.property, allowed, criteria.item)
    selection = list(dict.fromkeys(matched))

    logger.debug(
        "  Attribute filter %s.%s matched %d nodes",
        criteria.item,
        criteria.property,
        len(selection),
    )
    return select_nodes(session, selection)
