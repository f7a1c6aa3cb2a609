"""
Gamification layer: badges, points and the leaderboard.
"""

from .badge import Badge, default_badge_catalog, select_badge, validate_catalog
from .engine import GamificationEngine

__all__ = [
    "Badge",
    "default_badge_catalog",
    "select_badge",
    "validate_catalog",
    "GamificationEngine",
]
