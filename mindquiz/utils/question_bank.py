"""
Question bank loading.

Reads a JSON question bank, validates it against the question bank schema
and turns each entry into a Question.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..config import config
from ..models.question import Question
from ..models.quiz_module import QuizModule
from .validation import QuestionBankValidator

if TYPE_CHECKING:
    from ..gamification.engine import GamificationEngine

logger = logging.getLogger(__name__)


class QuestionBankError(ValueError):
    """Raised when a question bank is missing, unreadable or invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


def question_from_dict(item: Dict[str, Any]) -> Question:
    """Build a Question from one validated question bank entry."""
    if item["question_type"] == "multiple_choice":
        return Question.multiple_choice(
            item["question_text"],
            item["points"],
            item["options"],
            item["correct_option"],
            question_id=item.get("question_id"),
        )
    return Question.true_false(
        item["question_text"],
        item["points"],
        item["correct_answer"],
        question_id=item.get("question_id"),
    )


def load_question_bank(
    path: Optional[Path | str] = None,
    auto_repair: bool = False,
) -> List[Question]:
    """
    Load and validate a question bank.

    Args:
        path: JSON file (default: config.paths.default_question_bank)
        auto_repair: Whether to repair common mistakes before giving up

    Returns:
        Questions in file order

    Raises:
        QuestionBankError: If the file cannot be read or fails validation
    """
    path = Path(path) if path else config.paths.default_question_bank

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise QuestionBankError(f"Cannot read question bank {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Question bank {path} is not valid JSON: {e}") from e

    result = QuestionBankValidator().validate(data, auto_repair=auto_repair)
    if not result.valid:
        raise QuestionBankError(f"Invalid question bank {path}:\n{result}", result.errors)
    for repair in result.repairs:
        logger.warning("Question bank %s: %s", path.name, repair)

    questions = []
    for i, item in enumerate(result.data["questions"]):
        try:
            questions.append(question_from_dict(item))
        except ValueError as e:
            raise QuestionBankError(
                f"Invalid question bank {path}: question {i}: {e}", [f"Question {i}: {e}"]
            ) from e

    logger.info("Loaded %d questions on '%s' from %s", len(questions), result.data["topic"], path)
    return questions


def build_quiz(
    path: Optional[Path | str] = None,
    engine: Optional[GamificationEngine] = None,
    time_limit: Optional[int] = None,
) -> QuizModule:
    """
    Create a quiz holding every question of a bank, not yet shuffled.

    Args:
        path: Question bank file (default: config.paths.default_question_bank)
        engine: Gamification engine for awarding points
        time_limit: Time limit in seconds (default: config.quiz.time_limit_seconds)

    Returns:
        QuizModule ready for generate_quiz()
    """
    quiz = QuizModule(time_limit=time_limit, engine=engine)
    for question in load_question_bank(path):
        quiz.add_question(question)
    return quiz
