"""Reversible neighborhood highlight and selection filter toggles."""

from nodelight.highlight.constants import DIMMED_COLOR, NEIGHBORHOOD_COLOR, SELECTED_COLOR
from nodelight.highlight.session import HighlightSession, ToggleState, handle_visibility_change
from nodelight.highlight.toggles import (
    filter_highlight,
    highlight_filter,
    neighborhood_highlight,
    select_node,
    select_nodes,
)

__all__ = [
    "DIMMED_COLOR",
    "NEIGHBORHOOD_COLOR",
    "SELECTED_COLOR",
    "HighlightSession",
    "ToggleState",
    "filter_highlight",
    "handle_visibility_change",
    "highlight_filter",
    "neighborhood_highlight",
    "select_node",
    "select_nodes",
]
