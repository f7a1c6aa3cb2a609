"""
Quiz question model.

A single frozen dataclass covers every question type; the ``question_type``
tag selects how ``evaluate`` checks an answer.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Sequence, Tuple

QuestionType = Literal["multiple_choice", "true_false"]

QUESTION_TYPE_LABELS = {
    "multiple_choice": "MCQ",
    "true_false": "True/False",
}


def parse_bool(answer: Optional[str]) -> bool:
    """Parse a textual answer: only "true" (any case) is True."""
    return answer is not None and answer.lower() == "true"


@dataclass(frozen=True)
class Question:
    """
    A single quiz question.

    Attributes:
        question_text: The question text
        points: Points awarded for a correct answer
        question_type: "multiple_choice" or "true_false"
        options: Answer options (multiple choice only)
        correct_answer: Correct option text (multiple choice) or bool (true/false)
        question_id: Unique identifier
    """
    question_text: str
    points: int
    question_type: QuestionType
    correct_answer: Any
    options: Tuple[str, ...] = ()
    question_id: str = field(default_factory=lambda: f"q-{uuid.uuid4()}")

    def __post_init__(self):
        if not self.question_text or not self.question_text.strip():
            raise ValueError("Question text cannot be empty")

        if isinstance(self.points, bool) or not isinstance(self.points, int) or self.points < 0:
            raise ValueError(f"Question points must be a non-negative integer, got {self.points!r}")

        if self.question_type == "multiple_choice":
            if len(self.options) < 2:
                raise ValueError(
                    f"MCQ question {self.question_id} must have at least 2 options, got {len(self.options)}"
                )
            if self.correct_answer not in self.options:
                raise ValueError(
                    f"MCQ question {self.question_id} correct option {self.correct_answer!r} is not one of its options"
                )
        elif self.question_type == "true_false":
            if not isinstance(self.correct_answer, bool):
                raise ValueError(
                    f"True/False question {self.question_id} must have a boolean correct_answer"
                )
        else:
            raise ValueError(f"Unknown question type: {self.question_type!r}")

    @classmethod
    def multiple_choice(
        cls,
        question_text: str,
        points: int,
        options: Sequence[str],
        correct_option: str,
        question_id: Optional[str] = None,
    ) -> Question:
        """Build a multiple choice question."""
        kwargs = {"question_id": question_id} if question_id else {}
        return cls(
            question_text=question_text,
            points=points,
            question_type="multiple_choice",
            correct_answer=correct_option,
            options=tuple(options),
            **kwargs,
        )

    @classmethod
    def true_false(
        cls,
        question_text: str,
        points: int,
        correct_answer: bool,
        question_id: Optional[str] = None,
    ) -> Question:
        """Build a true/false question."""
        kwargs = {"question_id": question_id} if question_id else {}
        return cls(
            question_text=question_text,
            points=points,
            question_type="true_false",
            correct_answer=correct_answer,
            **kwargs,
        )

    @property
    def type_label(self) -> str:
        return QUESTION_TYPE_LABELS[self.question_type]

    def evaluate(self, answer: Optional[str]) -> bool:
        """
        Check an answer against this question.

        Multiple choice answers match the correct option ignoring case.
        True/false answers are parsed with ``parse_bool`` first.
        """
        if self.question_type == "multiple_choice":
            return answer is not None and answer.lower() == self.correct_answer.lower()
        return parse_bool(answer) == self.correct_answer

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence."""
        data: Dict[str, Any] = {
            "question_id": self.question_id,
            "question_text": self.question_text,
            "question_type": self.question_type,
            "points": self.points,
        }
        if self.question_type == "multiple_choice":
            data["options"] = list(self.options)
            data["correct_option"] = self.correct_answer
        else:
            data["correct_answer"] = self.correct_answer
        return data
