"""
Quiz participant with accumulated points and the badge currently held.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..gamification.badge import Badge


class User:
    """
    A quiz participant.

    Points only accumulate; the badge is replaced (never stacked) each time
    the gamification engine re-evaluates the user.
    """

    def __init__(self, name: str, points: int = 0):
        """
        Initialize a user.

        Args:
            name: Display name
            points: Starting points (default 0)
        """
        self.name = name
        self.total_points = points
        self.badge: Optional[Badge] = None

    def award_points(self, points: int) -> None:
        self.total_points += points

    def set_badge(self, badge: Optional[Badge]) -> None:
        self.badge = badge

    @property
    def badge_name(self) -> str:
        return self.badge.name if self.badge is not None else "None"

    @property
    def badge_icon_path(self) -> str:
        return str(self.badge.icon_path) if self.badge is not None else ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "total_points": self.total_points,
            "badge": self.badge_name,
        }

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, total_points={self.total_points}, badge={self.badge_name!r})"
