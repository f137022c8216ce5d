"""Session profile configuration.

The profile is fixed for the lifetime of a highlight session. Values come from
explicit keyword arguments first, then from the environment (``.env`` is loaded
when the package is imported):

- ``NODELIGHT_RESOURCE_CONSTRAINED``: ``1``/``true``/``yes`` enables the
  resource-constrained profile (shallower neighborhoods, cached traversals,
  physics disabled).
- ``NODELIGHT_MAX_DEPTH``: neighborhood depth, default 1 when constrained and
  2 otherwise.
- ``NODELIGHT_CACHE_NEIGHBORHOODS``: force the neighborhood cache on or off.
"""

import os
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = ("1", "true", "yes", "on")

DEFAULT_MAX_DEPTH = 2
CONSTRAINED_MAX_DEPTH = 1


class SessionProfile(BaseModel):
    """Device/session profile supplied when a highlight session starts."""

    resource_constrained: bool = Field(
        default=False, description="Low-power device profile (e.g. touch/mobile)"
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH, ge=1, description="Neighborhood depth in hops"
    )
    cache_neighborhoods: bool | None = Field(
        default=None,
        description="Memoize resolved neighborhoods; defaults to resource_constrained",
    )

    model_config = {"frozen": True}

    @property
    def caching_enabled(self) -> bool:
        """Whether resolved neighborhoods are memoized for this session."""
        if self.cache_neighborhoods is None:
            return self.resource_constrained
        return self.cache_neighborhoods


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip().lower() in _TRUTHY


def load_profile(**overrides: Any) -> SessionProfile:
    """Build a SessionProfile from the environment and explicit overrides.

    Args:
        **overrides: Field values that take precedence over the environment.
            ``None`` values are ignored.

    Returns:
        Validated, frozen SessionProfile.

    Raises:
        pydantic.ValidationError: If a value is invalid (e.g. max_depth < 1).
    """
    values: dict[str, Any] = {}

    constrained = _env_flag("NODELIGHT_RESOURCE_CONSTRAINED")
    if constrained is not None:
        values["resource_constrained"] = constrained

    cache = _env_flag("NODELIGHT_CACHE_NEIGHBORHOODS")
    if cache is not None:
        values["cache_neighborhoods"] = cache

    depth = os.getenv("NODELIGHT_MAX_DEPTH")
    if depth:
        values["max_depth"] = depth

    values.update({k: v for k, v in overrides.items() if v is not None})

    if "max_depth" not in values:
        values["max_depth"] = (
            CONSTRAINED_MAX_DEPTH if values.get("resource_constrained") else DEFAULT_MAX_DEPTH
        )

    return SessionProfile.model_validate(values)
