"""Explicit per-graph state for the highlight and filter toggles."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from nodelight.analyzers.neighborhood import NeighborhoodResolver
from nodelight.config import SessionProfile, load_profile
from nodelight.logging import logger
from nodelight.models.graph import NodeColor
from nodelight.network import EdgeStore, GraphTopology, NodeStore, Renderer
from nodelight.utils.cache import NeighborhoodCache


class ToggleState(str, Enum):
    """State of one highlight toggle."""

    INACTIVE = "inactive"
    ACTIVE = "active"


@dataclass
class HighlightSession:
    """Collaborators and mutable state for one graph instance.

    Owned by the caller and passed into every toggle entry point. A session is
    not safe for concurrent mutation: confine it to the thread (or event loop)
    that dispatches selection events.

    Attributes:
        nodes: Node store the toggles read from and batch-write to.
        edges: Edge store scanned by attribute filtering.
        topology: Directly-connected node lookups.
        renderer: Selection marking and physics options.
        profile: Device/session profile, fixed for the session.
        original_colors: Node ID -> color recorded the first time the node
            was dimmed. Never overwritten and never cleared.
        highlight_state: State of the neighborhood highlight toggle.
        filter_state: State of the selection filter toggle.
    """

    nodes: NodeStore
    edges: EdgeStore
    topology: GraphTopology
    renderer: Renderer
    profile: SessionProfile = field(default_factory=SessionProfile)
    original_colors: dict[str, NodeColor | None] = field(default_factory=dict)
    highlight_state: ToggleState = ToggleState.INACTIVE
    filter_state: ToggleState = ToggleState.INACTIVE
    cache: NeighborhoodCache | None = field(init=False, default=None)
    resolver: NeighborhoodResolver = field(init=False)
    _detach: Callable[[], None] | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        if self.profile.caching_enabled:
            self.cache = NeighborhoodCache()
        self.resolver = NeighborhoodResolver(
            self.topology, self.profile.max_depth, cache=self.cache
        )
        if self.profile.resource_constrained:
            self.renderer.set_options(physics=False)
        logger.debug(
            "  Highlight session ready (max_depth=%d, cache=%s, constrained=%s)",
            self.profile.max_depth,
            self.cache is not None,
            self.profile.resource_constrained,
        )

    @classmethod
    def create(cls, network: Any, profile: SessionProfile | None = None) -> "HighlightSession":
        """Build a session from a single object exposing every collaborator.

        ``network`` must provide ``nodes`` and ``edges`` stores and implement
        ``get_connected_nodes``, ``select_nodes`` and ``set_options`` (as
        ``InMemoryNetwork`` does). If it offers ``on_topology_change``, the
        neighborhood cache is invalidated on every topology mutation.
        """
        session = cls(
            nodes=network.nodes,
            edges=network.edges,
            topology=network,
            renderer=network,
            profile=profile if profile is not None else load_profile(),
        )
        subscribe = getattr(network, "on_topology_change", None)
        if callable(subscribe):
            session._detach = subscribe(session.resolver.invalidate)
        return session

    def close(self) -> None:
        """Stop listening for topology changes.

        Call this when the session is discarded while its network lives on;
        otherwise the network keeps the session's resolver alive. Toggle state
        and recorded colors are left as they are.
        """
        if callable(self._detach):
            self._detach()
        self._detach = None

    @property
    def highlight_active(self) -> bool:
        return self.highlight_state is ToggleState.ACTIVE

    @property
    def filter_active(self) -> bool:
        return self.filter_state is ToggleState.ACTIVE


def handle_visibility_change(session: HighlightSession, hidden: bool) -> None:
    """Pause physics while the view is backgrounded.

    Resuming turns physics back on only outside the resource-constrained
    profile. Toggle state is untouched.
    """
    if hidden:
        session.renderer.set_options(physics=False)
    elif not session.profile.resource_constrained:
        session.renderer.set_options(physics=True)
