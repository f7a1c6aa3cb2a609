"""
Data models for quizzes.

This module contains core data models:
- Question: A single quiz question (multiple choice or true/false)
- QuizModule: Ordered questions, shuffling and scoring of an attempt
- User: Quiz participant with points and a badge
- LearningModule: Learning pages shown before a quiz
"""

from .question import Question
from .quiz_module import QuizModule
from .user import User
from .learning_module import LearningModule

__all__ = [
    "Question",
    "QuizModule",
    "User",
    "LearningModule",
]
