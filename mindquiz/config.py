"""
Configuration management for MindQuiz.

This module centralizes all configuration settings:
- Overrides loaded from environment variables (and a local .env file)
- Sensible defaults for a classroom quiz
- Single source of truth for file system paths
- Logging setup for the whole package
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass
class QuizConfig:
    """Quiz attempt and scoring configuration."""

    time_limit_seconds: int = field(
        default_factory=lambda: int(os.getenv("QUIZ_TIME_LIMIT", "120"))
    )

    # Percentage formula assumes every question is worth this many points
    points_per_question: int = 10

    # Motivational message thresholds (percent)
    excellent_threshold: float = 80.0
    good_threshold: float = 50.0

    # Reproducibility
    random_seed: Optional[int] = field(
        default_factory=lambda: _optional_int("QUIZ_RANDOM_SEED")
    )


@dataclass
class GamificationConfig:
    """Points and badge configuration."""

    points_per_correct_answer: int = 2
    badges_dir: Path = field(default_factory=lambda: Path("assets") / "badges")


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    # Base paths
    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)
    data_dir: Path = field(default_factory=lambda: Path(__file__).parent.parent / "data")

    # Bundled schema and question bank, installed as package data
    package_dir: Path = field(default_factory=lambda: Path(__file__).parent)

    # Computed from data_dir / package_dir / project_root
    scores_file: Path = field(init=False)
    questions_dir: Path = field(init=False)
    default_question_bank: Path = field(init=False)
    schemas_dir: Path = field(init=False)
    question_bank_schema: Path = field(init=False)
    assets_dir: Path = field(init=False)
    information_dir: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        scores_override = os.getenv("MINDQUIZ_SCORES_FILE")
        self.scores_file = (
            Path(scores_override) if scores_override else self.data_dir / "scores.txt"
        )
        self.questions_dir = self.package_dir / "questions"
        self.default_question_bank = self.questions_dir / "mental_health.json"
        self.schemas_dir = self.package_dir / "schemas"
        self.question_bank_schema = self.schemas_dir / "question_bank.schema.json"
        self.assets_dir = self.project_root / "assets"
        self.information_dir = self.assets_dir / "information"

    def prepare_filesystem(self):
        """
        Create directories if they don't exist.

        Separated from __post_init__ to avoid side-effects on import.
        Call this explicitly from your app entrypoint.
        """
        for directory in [
            self.data_dir,
            self.scores_file.parent,
        ]:
            directory.mkdir(parents=True, exist_ok=True)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from mindquiz.config import config

        # Access settings
        limit = config.quiz.time_limit_seconds
        scores = config.paths.scores_file

        # Prepare filesystem (call once at startup)
        config.prepare_fs()
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.quiz = QuizConfig()
            cls._instance.gamification = GamificationConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def prepare_fs(self):
        """Prepare filesystem (create directories). Call once at startup."""
        self.paths.prepare_filesystem()

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        # Quiz validation
        if self.quiz.time_limit_seconds < 0:
            errors.append(
                f"time_limit_seconds must be >= 0, got {self.quiz.time_limit_seconds}"
            )

        if self.quiz.points_per_question <= 0:
            errors.append(
                f"points_per_question must be > 0, got {self.quiz.points_per_question}"
            )

        if not (0 <= self.quiz.good_threshold <= self.quiz.excellent_threshold <= 100):
            errors.append(
                "Motivational thresholds must satisfy 0 <= good <= excellent <= 100, "
                f"got good={self.quiz.good_threshold}, excellent={self.quiz.excellent_threshold}"
            )

        # Gamification validation
        if self.gamification.points_per_correct_answer <= 0:
            errors.append(
                "points_per_correct_answer must be > 0, "
                f"got {self.gamification.points_per_correct_answer}"
            )

        # Logging validation
        if not isinstance(logging.getLevelName(self.logging.log_level.upper()), int):
            errors.append(f"Unknown log_level: {self.logging.log_level}")

        # Path validation
        if not self.paths.question_bank_schema.exists():
            errors.append(
                f"Question bank schema not found: {self.paths.question_bank_schema}"
            )

        return errors


# Global config instance
config = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from LoggingConfig.

    Args:
        level: Optional level name overriding config.logging.log_level
    """
    logging.basicConfig(
        level=(level or config.logging.log_level).upper(),
        format=config.logging.log_format,
    )
