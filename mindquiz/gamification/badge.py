"""
Badge definitions and tier selection.

The catalog is plain ordered data: tiers are listed highest requirement
first and the first tier a point total meets is the one awarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from ..config import config


@dataclass(frozen=True)
class Badge:
    """
    A named achievement tier.

    Attributes:
        name: Badge name (e.g. "Gold")
        icon_path: Path to the badge icon image
        requirement_points: Minimum total points needed
        requirement: Human-readable requirement text
    """
    name: str
    icon_path: Path
    requirement_points: int
    requirement: str

    def check_requirement(self, user_points: int) -> bool:
        return user_points >= self.requirement_points

    @property
    def badge_info(self) -> str:
        return f"{self.name} - Requires: {self.requirement}"


# (name, icon file, minimum points, requirement text), highest tier first
BADGE_TIERS: Tuple[Tuple[str, str, int, str], ...] = (
    ("Gold", "Gold.png", 15, "Score 15+ points"),
    ("Silver", "Silver.png", 10, "Score 10-14 points"),
    ("Bronze", "Bronze.png", 5, "Score 5-9 points"),
    ("Keep Learning", "Keep_Learning.png", 0, "Less than 5 points"),
)


def default_badge_catalog(badges_dir: Optional[Path] = None) -> Tuple[Badge, ...]:
    """
    Build the standard four-tier catalog.

    Args:
        badges_dir: Directory holding badge icons (default: config.gamification.badges_dir)

    Returns:
        Badges ordered highest requirement first
    """
    badges_dir = Path(badges_dir) if badges_dir is not None else config.gamification.badges_dir
    return tuple(
        Badge(name=name, icon_path=badges_dir / icon, requirement_points=points, requirement=text)
        for name, icon, points, text in BADGE_TIERS
    )


def validate_catalog(badges: Sequence[Badge]) -> None:
    """
    Check that a catalog is non-empty and strictly descending by requirement.

    Raises:
        ValueError: If the catalog cannot be scanned first-match-wins
    """
    if not badges:
        raise ValueError("Badge catalog cannot be empty")

    for higher, lower in zip(badges, badges[1:]):
        if higher.requirement_points <= lower.requirement_points:
            raise ValueError(
                f"Badge catalog must be ordered by descending requirement: "
                f"{higher.name} ({higher.requirement_points}) precedes "
                f"{lower.name} ({lower.requirement_points})"
            )


def select_badge(points: int, badges: Sequence[Badge]) -> Optional[Badge]:
    """Return the first badge in catalog order whose requirement is met."""
    return next((badge for badge in badges if badge.check_requirement(points)), None)
