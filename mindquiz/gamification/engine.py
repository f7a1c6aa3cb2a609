"""
Gamification Engine - Awards points, assigns badges and ranks users.

Tracks the users who took a quiz, converts correct answers into points,
keeps each user's badge in step with their total and maintains the
leaderboard order.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config import config
from ..models.user import User
from .badge import Badge, default_badge_catalog, select_badge, validate_catalog

logger = logging.getLogger(__name__)


class GamificationEngine:
    """
    Points, badges and leaderboard for a group of users.

    The engine owns its user list. Pass a list in to share it between
    several views of the same classroom; nothing is kept at module level.
    """

    def __init__(
        self,
        users: Optional[List[User]] = None,
        badges: Optional[Sequence[Badge]] = None,
        points_per_correct_answer: Optional[int] = None,
    ):
        """
        Initialize the engine.

        Args:
            users: Registered users (a new empty list if None)
            badges: Badge catalog, highest requirement first (default four tiers)
            points_per_correct_answer: Multiplier for correct answers
                (default: config.gamification.points_per_correct_answer)

        Raises:
            ValueError: If the badge catalog is empty or not strictly descending
        """
        self.users: List[User] = users if users is not None else []
        self.badges = tuple(badges) if badges is not None else default_badge_catalog()
        validate_catalog(self.badges)
        self.points_per_correct_answer = (
            points_per_correct_answer
            if points_per_correct_answer is not None
            else config.gamification.points_per_correct_answer
        )

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def award_points_to_user(self, user: User, correct_answers: int) -> int:
        """
        Award points for a quiz result.

        Args:
            user: User to reward
            correct_answers: Number of correctly answered questions

        Returns:
            Points awarded

        Raises:
            ValueError: If correct_answers is negative
        """
        if correct_answers < 0:
            raise ValueError(f"Correct answers cannot be negative: {correct_answers}")

        points = correct_answers * self.points_per_correct_answer
        user.award_points(points)
        previous = user.badge_name
        self.assign_badge(user)
        self.update_leaderboard()

        logger.info("Awarded %d points to %s (total %d)", points, user.name, user.total_points)
        if user.badge_name != previous:
            logger.info("%s badge changed: %s -> %s", user.name, previous, user.badge_name)
        return points

    def assign_badge(self, user: User) -> Optional[Badge]:
        """Give the user the highest badge their total points meet."""
        badge = select_badge(user.total_points, self.badges)
        if badge is not None:
            user.set_badge(badge)
        return badge

    def assign_badges(self) -> None:
        for user in self.users:
            self.assign_badge(user)

    def get_total_points(self) -> int:
        return sum(user.total_points for user in self.users)

    def update_leaderboard(self) -> None:
        """Sort users by total points, highest first. Ties keep their order."""
        self.users.sort(key=lambda u: u.total_points, reverse=True)

    def get_leaderboard(self) -> List[User]:
        return list(self.users)

    def leaderboard_rows(self) -> List[Dict[str, Any]]:
        """Leaderboard as ranked rows for display or export."""
        return [
            {
                "rank": rank,
                "name": user.name,
                "points": user.total_points,
                "badge": user.badge_name,
            }
            for rank, user in enumerate(self.users, start=1)
        ]

    def format_leaderboard(self) -> str:
        """Render the leaderboard as a fixed-width text table."""
        lines = [
            f"{'No':<5} {'Name':<15} {'Points':<10} {'Badge':<15}",
            "-" * 53,
        ]
        for row in self.leaderboard_rows():
            lines.append(
                f"{row['rank']:<5d} {row['name']:<15} {row['points']:<10d} {row['badge']:<15}"
            )
        return "\n".join(lines)

    @staticmethod
    def format_result(user: User) -> str:
        """Render one user's quiz result."""
        return (
            "Quiz Completed\n\n"
            f"Name: {user.name}\n"
            f"Points: {user.total_points}\n"
            f"Badge: {user.badge_name}\n"
        )
