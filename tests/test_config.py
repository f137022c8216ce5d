"""Tests for session profile loading."""

import pytest
from pydantic import ValidationError

from nodelight.config import SessionProfile, load_profile


class TestSessionProfile:
    """Tests for the profile model."""

    def test_defaults(self) -> None:
        profile = SessionProfile()

        assert profile.resource_constrained is False
        assert profile.max_depth == 2
        assert profile.caching_enabled is False

    def test_caching_follows_constrained_flag(self) -> None:
        assert SessionProfile(resource_constrained=True).caching_enabled is True

    def test_explicit_cache_setting_wins(self) -> None:
        profile = SessionProfile(resource_constrained=True, cache_neighborhoods=False)

        assert profile.caching_enabled is False

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ValidationError):
            SessionProfile(max_depth=0)

    def test_is_frozen(self) -> None:
        profile = SessionProfile()
        with pytest.raises(ValidationError):
            profile.max_depth = 5


class TestLoadProfile:
    """Tests for environment-driven configuration."""

    def test_without_environment(self) -> None:
        assert load_profile().model_dump() == SessionProfile().model_dump()

    def test_constrained_from_environment_lowers_depth(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The constrained profile defaults to one hop."""
        monkeypatch.setenv("NODELIGHT_RESOURCE_CONSTRAINED", "yes")

        profile = load_profile()

        assert profile.resource_constrained is True
        assert profile.max_depth == 1
        assert profile.caching_enabled is True

    def test_depth_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODELIGHT_MAX_DEPTH", "3")

        assert load_profile().max_depth == 3

    def test_cache_flag_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODELIGHT_CACHE_NEIGHBORHOODS", "1")

        assert load_profile().caching_enabled is True

    def test_overrides_beat_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Keyword arguments take precedence; None overrides are ignored."""
        monkeypatch.setenv("NODELIGHT_MAX_DEPTH", "3")
        monkeypatch.setenv("NODELIGHT_RESOURCE_CONSTRAINED", "false")

        profile = load_profile(max_depth=4, resource_constrained=None)

        assert profile.max_depth == 4
        assert profile.resource_constrained is False

    def test_invalid_depth_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODELIGHT_MAX_DEPTH", "0")

        with pytest.raises(ValidationError):
            load_profile()
