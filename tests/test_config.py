"""Tests for MatchConfig validation and defaults.

Python 3.13+.
"""

from dataclasses import FrozenInstanceError

import pytest

from langmatch import MatchConfig, MatchLevel


class TestMatchConfig:
    """MatchConfig construction."""

    def test_defaults(self) -> None:
        config = MatchConfig()
        assert config.collapse_paradigm_regions
        assert config.paradigm_discount
        assert config.max_distance is None

    def test_default_for_level(self) -> None:
        config = MatchConfig(language_default=900, script_default=400, region_default=30)
        assert config.default_for(MatchLevel.LANGUAGE) == 900
        assert config.default_for(MatchLevel.SCRIPT) == 400
        assert config.default_for(MatchLevel.REGION) == 30

    def test_default_for_matches_level_defaults(self) -> None:
        config = MatchConfig()
        for level in MatchLevel:
            assert config.default_for(level) == level.default_distance

    @pytest.mark.parametrize("field", ["language_default", "script_default", "region_default"])
    def test_negative_default_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=f"{field} must be non-negative"):
            MatchConfig(**{field: -1})  # type: ignore[arg-type]

    @pytest.mark.parametrize("max_distance", [0, -10])
    def test_non_positive_max_distance_rejected(self, max_distance: int) -> None:
        with pytest.raises(ValueError, match="max_distance must be positive"):
            MatchConfig(max_distance=max_distance)

    def test_frozen(self) -> None:
        config = MatchConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_distance = 10  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(MatchConfig()) == hash(MatchConfig())
