"""
Unit tests for the badge catalog.

Tests:
- Default four-tier catalog
- Catalog ordering checks
- First-match-wins selection
"""

from pathlib import Path

import pytest

from mindquiz.gamification.badge import (
    Badge,
    default_badge_catalog,
    select_badge,
    validate_catalog,
)


class TestDefaultCatalog:
    """Test suite for the built-in catalog."""

    def test_tiers_in_descending_order(self):
        catalog = default_badge_catalog(Path("assets/badges"))
        assert [b.name for b in catalog] == ["Gold", "Silver", "Bronze", "Keep Learning"]
        assert [b.requirement_points for b in catalog] == [15, 10, 5, 0]
        validate_catalog(catalog)

    def test_icon_paths(self):
        catalog = default_badge_catalog(Path("assets/badges"))
        assert catalog[0].icon_path == Path("assets/badges/Gold.png")
        assert catalog[-1].icon_path == Path("assets/badges/Keep_Learning.png")

    def test_badge_info(self):
        gold = default_badge_catalog()[0]
        assert gold.badge_info == "Gold - Requires: Score 15+ points"

    @pytest.mark.parametrize(
        "points, expected",
        [(0, "Keep Learning"), (4, "Keep Learning"), (5, "Bronze"), (9, "Bronze"),
         (10, "Silver"), (14, "Silver"), (15, "Gold"), (100, "Gold")],
    )
    def test_select_badge_boundaries(self, points, expected):
        assert select_badge(points, default_badge_catalog()).name == expected

    def test_select_badge_below_every_tier(self):
        assert select_badge(-1, default_badge_catalog()) is None


class TestValidateCatalog:
    """Test suite for catalog ordering checks."""

    def _badge(self, name, points):
        return Badge(name, Path(f"{name}.png"), points, f"{points}+")

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_catalog([])

    def test_ascending_catalog_rejected(self):
        with pytest.raises(ValueError, match="descending"):
            validate_catalog([self._badge("Low", 0), self._badge("High", 10)])

    def test_duplicate_thresholds_rejected(self):
        with pytest.raises(ValueError):
            validate_catalog([self._badge("A", 5), self._badge("B", 5)])

    def test_check_requirement(self):
        badge = self._badge("Mid", 10)
        assert badge.check_requirement(10)
        assert not badge.check_requirement(9)
