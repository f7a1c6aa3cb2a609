"""
Unit tests for QuizModule.

Tests shuffling, answer evaluation, percentage scoring and messages.
"""

import random
import unittest
from unittest.mock import Mock

from mindquiz.models.question import Question
from mindquiz.models.quiz_module import QuizModule
from mindquiz.models.user import User


def make_quiz(questions, **kwargs):
    quiz = QuizModule(time_limit=120, rng=random.Random(42), **kwargs)
    for question in questions:
        quiz.add_question(question)
    return quiz


class TestQuizModule(unittest.TestCase):
    """Test QuizModule scoring."""

    def setUp(self):
        self.mcq = Question.multiple_choice(
            "Which of the following can help manage anxiety?",
            10,
            ["Avoiding sleep", "Overworking", "Deep breathing", "Ignoring problems"],
            "Deep breathing",
        )
        self.tf = Question.true_false("CPTSD is the same as PTSD.", 10, False)
        self.light = Question.true_false("Therapy is only for serious illness.", 4, False)
        self.quiz = make_quiz([self.mcq, self.tf, self.light])

    def test_add_question_keeps_insertion_order(self):
        self.assertEqual(self.quiz.questions, [self.mcq, self.tf, self.light])

    def test_generate_quiz_sets_total_and_keeps_questions(self):
        self.quiz.generate_quiz()
        self.assertEqual(self.quiz.total_questions, 3)
        self.assertCountEqual(self.quiz.questions, [self.mcq, self.tf, self.light])

    def test_generate_quiz_is_reproducible_with_seeded_rng(self):
        other = make_quiz([self.mcq, self.tf, self.light])
        self.quiz.generate_quiz()
        other.generate_quiz()
        self.assertEqual(
            [q.question_id for q in self.quiz.questions],
            [q.question_id for q in other.questions],
        )

    def test_evaluate_answers_sums_points_of_correct_answers(self):
        score = self.quiz.evaluate_answers(["deep breathing", "true", "false"])
        self.assertEqual(score, 14)
        self.assertEqual(self.quiz.correct_count, 2)

    def test_evaluate_answers_all_wrong(self):
        self.assertEqual(self.quiz.evaluate_answers(["Overworking", "true", "true"]), 0)
        self.assertEqual(self.quiz.correct_count, 0)

    def test_evaluate_answers_resets_running_score(self):
        self.quiz.evaluate_answers(["Deep breathing", "false", "false"])
        self.assertEqual(self.quiz.evaluate_answers(["Deep breathing"]), 10)

    def test_missing_answers_are_skipped(self):
        self.assertEqual(self.quiz.evaluate_answers(["Deep breathing"]), 10)
        self.assertEqual(self.quiz.evaluate_answers([]), 0)

    def test_excess_answers_are_skipped(self):
        score = self.quiz.evaluate_answers(["Deep breathing", "false", "false", "extra", "more"])
        self.assertEqual(score, 24)

    def test_calculate_score_without_questions_is_zero(self):
        empty = QuizModule(time_limit=60)
        empty.generate_quiz()
        empty.evaluate_answers([])
        self.assertEqual(empty.calculate_score(), 0.0)

    def test_calculate_score_before_generate_is_zero(self):
        self.quiz.evaluate_answers(["Deep breathing", "false", "false"])
        self.assertEqual(self.quiz.calculate_score(), 0.0)

    def test_calculate_score_assumes_ten_points_per_question(self):
        quiz = make_quiz([self.mcq, self.tf, self.light])
        answers = {self.mcq.question_id: "Deep breathing", self.tf.question_id: "false",
                   self.light.question_id: "false"}
        quiz.generate_quiz()
        quiz.evaluate_answers([answers[q.question_id] for q in quiz.questions])
        # 24 points out of an assumed 3 * 10
        self.assertAlmostEqual(quiz.calculate_score(), 80.0)

    def test_motivational_messages(self):
        quiz = make_quiz([Question.true_false(f"Statement {i}", 10, True) for i in range(10)])
        quiz.generate_quiz()

        quiz.evaluate_answers(["true"] * 8)
        self.assertEqual(quiz.get_motivational_message(), "Excellent job! Keep it up!")

        quiz.evaluate_answers(["true"] * 5)
        self.assertEqual(quiz.get_motivational_message(), "Good effort! You can do even better!")

        quiz.evaluate_answers(["true"] * 4)
        self.assertEqual(quiz.get_motivational_message(), "Don't give up! Learning takes time.")

    def test_summary(self):
        self.quiz.generate_quiz()
        self.quiz.evaluate_answers([])
        summary = self.quiz.summary()
        self.assertEqual(summary["total_questions"], 3)
        self.assertEqual(summary["score"], 0)
        self.assertEqual(summary["percentage"], 0.0)
        self.assertIn("message", summary)

    def test_to_dict(self):
        result = self.quiz.to_dict()
        self.assertEqual(result["time_limit"], 120)
        self.assertEqual(len(result["questions"]), 3)

    def test_question_handler_helpers(self):
        self.assertTrue(QuizModule.validate_answer(self.mcq, "DEEP BREATHING"))
        self.assertEqual(QuizModule.get_question_type(self.mcq), "MCQ")
        self.assertEqual(QuizModule.get_question_type(self.tf), "True/False")


class TestQuizAwards(unittest.TestCase):
    """Test forwarding awards to the gamification engine."""

    def test_award_without_engine(self):
        quiz = QuizModule(time_limit=10)
        self.assertIsNone(quiz.award_score_to_user(User("Ana"), 3))

    def test_award_with_engine(self):
        engine = Mock()
        engine.award_points_to_user.return_value = 6
        quiz = QuizModule(time_limit=10, engine=engine)
        user = User("Ana")

        self.assertEqual(quiz.award_score_to_user(user, 3), 6)
        engine.award_points_to_user.assert_called_once_with(user, 3)


def test_evaluate_answers_matches_predicates(sample_questions):
    quiz = make_quiz(sample_questions)
    answers = ["persistent sadness", "false", "Overeating", "true"]

    expected = sum(q.points for q, a in zip(sample_questions, answers) if q.evaluate(a))

    assert quiz.evaluate_answers(answers) == expected == 30
    assert quiz.correct_count == 3


if __name__ == "__main__":
    unittest.main()
