"""
File-backed storage of historical quiz scores.

The score file holds one integer percentage per line. Lines that do not
parse as an integer are ignored when reading, as are lines with undecodable bytes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import config
from .progress import score_histogram, score_summary

logger = logging.getLogger(__name__)

_SCORE_LINE = re.compile(r"[+-]?[0-9]+")


class DataAccessError(Exception):
    """Raised when the score store cannot be read or written."""


class InvalidScoreError(DataAccessError, ValueError):
    """Raised when a score outside 0-100 is appended."""


class DataManager:
    """
    Stores quiz scores in a text file.

    Features:
    - Creates the file on first use
    - Validated appends (0-100 inclusive)
    - Latest and average score, motivational message from the average
    - Reset (truncate) of the whole store

    Every file error is re-raised as DataAccessError with the OSError chained.
    """

    MIN_SCORE = 0
    MAX_SCORE = 100

    def __init__(
        self,
        file_name: Optional[Path | str] = None,
        initial_scores: Optional[Iterable[int]] = None,
    ):
        """
        Initialize data manager.

        Args:
            file_name: Score file (default: config.paths.scores_file)
            initial_scores: Scores to seed the in-memory cache with

        Raises:
            DataAccessError: If the file does not exist and cannot be created
        """
        self.file_name = Path(file_name) if file_name else config.paths.scores_file
        self.scores: List[int] = list(initial_scores or [])
        self._initialize_file()

    def _initialize_file(self) -> None:
        try:
            if not self.file_name.exists():
                self.file_name.touch()
                logger.debug("Created score file %s", self.file_name)
        except OSError as e:
            raise DataAccessError(f"Could not create data file: {self.file_name}") from e

    def save_data(self, data: str) -> None:
        """Overwrite the file with the given text."""
        try:
            with open(self.file_name, "w", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise DataAccessError("Failed to save data.") from e

    def load_data(self) -> str:
        """Return the whole file, each line newline-terminated."""
        try:
            with open(self.file_name, "r", encoding="utf-8", errors="replace") as f:
                return "".join(line.rstrip("\r\n") + "\n" for line in f)
        except OSError as e:
            raise DataAccessError("Failed to load data.") from e

    def get_user_scores(self) -> List[int]:
        """
        Reload scores from the file.

        Returns:
            Scores in file order, malformed lines skipped
        """
        scores = []
        try:
            with open(self.file_name, "r", encoding="utf-8", errors="replace") as f:
                for line_no, line in enumerate(f, start=1):
                    text = line.strip()
                    if _SCORE_LINE.fullmatch(text):
                        scores.append(int(text))
                    else:
                        logger.debug("Skipping invalid score on line %d: %r", line_no, text)
        except OSError as e:
            raise DataAccessError("Unable to read scores from file.") from e

        self.scores = scores
        return list(self.scores)

    def append_score(self, score: int) -> None:
        """
        Append a score to the file.

        Args:
            score: Percentage score (0-100 inclusive)

        Raises:
            InvalidScoreError: If the score is not an integer in range (nothing is written)
            DataAccessError: If the file cannot be written
        """
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScoreError(f"Score must be an integer, got {score!r}")
        if not (self.MIN_SCORE <= score <= self.MAX_SCORE):
            raise InvalidScoreError(
                f"Score must be between {self.MIN_SCORE} and {self.MAX_SCORE}, got {score}"
            )

        try:
            with open(self.file_name, "a", encoding="utf-8") as f:
                f.write(f"{score}\n")
        except OSError as e:
            raise DataAccessError("Failed to append score.") from e

        self.scores.append(score)
        logger.info("Recorded score %d in %s", score, self.file_name)

    def get_latest_score(self) -> int:
        """Most recent score, 0 if none are stored."""
        scores = self.get_user_scores()
        return scores[-1] if scores else 0

    def get_average_score(self) -> float:
        """Average score, 0.0 if none are stored."""
        scores = self.get_user_scores()
        if not scores:
            return 0.0
        return sum(scores) / len(scores)

    def get_motivational_message(self) -> str:
        avg = self.get_average_score()
        if avg >= 80:
            return "Outstanding!"
        if avg >= 60:
            return "That's good!"
        if avg >= 40:
            return "Good try!"
        if avg >= 20:
            return "You can do better!"
        return "Don't give up!"

    def get_score_summary(self) -> Dict[str, float]:
        """Summary statistics of the stored scores."""
        return score_summary(self.get_user_scores())

    def get_score_histogram(self, band_width: int = 10) -> List[Tuple[str, int]]:
        """Stored scores counted per percentage band."""
        return score_histogram(self.get_user_scores(), band_width)

    def reset(self) -> None:
        """Truncate the score file and clear cached scores."""
        try:
            with open(self.file_name, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise DataAccessError("Failed to delete data.") from e

        self.scores.clear()
        logger.info("Reset score file %s", self.file_name)
