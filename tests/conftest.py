"""
Shared pytest fixtures and configuration for MindQuiz tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_questions():
    """
    Fixture providing a small mixed set of questions.

    Returns:
        list[Question]: two multiple choice and two true/false questions
    """
    from mindquiz.models.question import Question

    return [
        Question.multiple_choice(
            "What is a common symptom of depression?",
            10,
            ["Fever", "Persistent sadness", "High energy", "Strong appetite"],
            "Persistent sadness",
        ),
        Question.true_false("CPTSD is the same as PTSD.", 10, False),
        Question.multiple_choice(
            "What is a healthy way to manage stress?",
            5,
            ["Overeating", "Mindfulness meditation", "Ignoring problems"],
            "Mindfulness meditation",
        ),
        Question.true_false(
            "Burnout can lead to physical symptoms like headaches and fatigue.", 10, True
        ),
    ]


@pytest.fixture
def valid_question_bank():
    """
    Fixture providing a valid question bank document.

    Returns:
        dict: A question bank that passes all validation
    """
    return {
        "meta": {"schema_version": 1, "source": "pytest"},
        "topic": "Stress",
        "questions": [
            {
                "question_id": "q-test-1",
                "question_type": "multiple_choice",
                "question_text": "Which strategy is recommended to manage burnout?",
                "points": 10,
                "options": ["Working longer hours", "Taking regular breaks"],
                "correct_option": "Taking regular breaks",
            },
            {
                "question_id": "q-test-2",
                "question_type": "true_false",
                "question_text": "Ignoring your feelings can improve mental health.",
                "points": 10,
                "correct_answer": False,
            },
        ],
    }


@pytest.fixture
def question_bank_file(tmp_path, valid_question_bank):
    """
    Fixture writing the valid question bank to a temporary file.

    Returns:
        Path: Path to the JSON file
    """
    bank_file = tmp_path / "bank.json"
    with open(bank_file, "w", encoding="utf-8") as f:
        json.dump(valid_question_bank, f)
    return bank_file


@pytest.fixture
def scores_file(tmp_path):
    """Path to a score file that does not exist yet."""
    return tmp_path / "scores.txt"


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
