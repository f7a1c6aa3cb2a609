"""
Utility modules for MindQuiz.

This module contains utility functions:
- data_manager: File-backed score history
- validation: JSON Schema validation with auto-repair
- question_bank: Load questions from validated JSON files
- progress: Score statistics helpers
"""

from .data_manager import DataAccessError, DataManager, InvalidScoreError
from .progress import score_histogram, score_summary
from .validation import (
    QuestionBankValidator,
    SchemaValidator,
    ValidationResult,
    validate_question_bank,
)
from .question_bank import (
    QuestionBankError,
    build_quiz,
    load_question_bank,
    question_from_dict,
)

__all__ = [
    # Score storage
    "DataManager",
    "DataAccessError",
    "InvalidScoreError",
    # Progress analytics
    "score_histogram",
    "score_summary",
    # Validation
    "SchemaValidator",
    "QuestionBankValidator",
    "ValidationResult",
    "validate_question_bank",
    # Question banks
    "QuestionBankError",
    "build_quiz",
    "load_question_bank",
    "question_from_dict",
]
