"""
Quiz Module - Holds a quiz's questions, shuffles them and scores an attempt.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..config import config
from .question import Question

if TYPE_CHECKING:
    from ..gamification.engine import GamificationEngine
    from .user import User

logger = logging.getLogger(__name__)


class QuizModule:
    """
    A quiz made of an ordered list of questions.

    Lifecycle:
    - Questions are appended in insertion order
    - generate_quiz() shuffles them once and fixes total_questions
    - evaluate_answers() scores one attempt against the shuffled order
    """

    def __init__(
        self,
        time_limit: Optional[int] = None,
        engine: Optional[GamificationEngine] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize quiz.

        Args:
            time_limit: Time limit in seconds, display only
                (default: config.quiz.time_limit_seconds)
            engine: Gamification engine used by award_score_to_user
            rng: Random source for shuffling (seeded from config.quiz.random_seed if None)
        """
        self.time_limit = time_limit if time_limit is not None else config.quiz.time_limit_seconds
        self.engine = engine
        self.rng = rng or random.Random(config.quiz.random_seed)

        self.questions: List[Question] = []
        self.current_score = 0
        self.correct_count = 0
        self.total_questions = 0

    def add_question(self, question: Question) -> None:
        """Add a question to the quiz."""
        self.questions.append(question)

    def generate_quiz(self) -> None:
        """Shuffle the questions and start the quiz."""
        self.rng.shuffle(self.questions)
        self.total_questions = len(self.questions)
        logger.info(
            "Quiz started with %d questions. Time limit: %d seconds",
            self.total_questions,
            self.time_limit,
        )

    def evaluate_answers(self, answers: Sequence[Optional[str]]) -> int:
        """
        Score an attempt.

        Answers are matched to questions by position. Answers beyond the last
        question and questions without an answer are skipped.

        Args:
            answers: One answer per question, in quiz order

        Returns:
            Sum of the points of correctly answered questions
        """
        self.current_score = 0
        self.correct_count = 0
        for question, answer in zip(self.questions, answers):
            if question.evaluate(answer):
                self.current_score += question.points
                self.correct_count += 1

        logger.debug(
            "Evaluated %d answers: %d correct, %d points",
            len(answers),
            self.correct_count,
            self.current_score,
        )
        return self.current_score

    def calculate_score(self) -> float:
        """
        Score as a percentage.

        Every question is counted as worth config.quiz.points_per_question,
        whatever its own point value.
        """
        if self.total_questions == 0:
            return 0.0
        max_points = self.total_questions * config.quiz.points_per_question
        return (self.current_score / max_points) * 100

    def get_motivational_message(self) -> str:
        percentage = self.calculate_score()
        if percentage >= config.quiz.excellent_threshold:
            return "Excellent job! Keep it up!"
        if percentage >= config.quiz.good_threshold:
            return "Good effort! You can do even better!"
        return "Don't give up! Learning takes time."

    def award_score_to_user(self, user: User, correct_answers: int) -> Optional[int]:
        """
        Award gamification points through the attached engine.

        Returns:
            Points awarded, or None when the quiz has no engine
        """
        if self.engine is None:
            return None
        return self.engine.award_points_to_user(user, correct_answers)

    @staticmethod
    def validate_answer(question: Question, answer: Optional[str]) -> bool:
        return question.evaluate(answer)

    @staticmethod
    def get_question_type(question: Question) -> str:
        return question.type_label

    def summary(self) -> Dict[str, Any]:
        """Result of the last evaluated attempt."""
        return {
            "score": self.current_score,
            "correct_answers": self.correct_count,
            "total_questions": self.total_questions,
            "percentage": self.calculate_score(),
            "message": self.get_motivational_message(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert quiz to dictionary for persistence."""
        return {
            "time_limit": self.time_limit,
            "questions": [q.to_dict() for q in self.questions],
            **self.summary(),
        }
