"""
Complete workflow example: Learning pages -> Quiz -> Points & badge -> Leaderboard -> Score history

Demonstrates end-to-end integration of all system components:
1. Page through the learning module
2. Load the question bank and shuffle the quiz
3. Score a simulated attempt
4. Award points and badges to a classroom of users
5. Record the percentage in the score history
"""

import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mindquiz.config import config, configure_logging
from mindquiz.gamification import GamificationEngine
from mindquiz.models import LearningModule, User
from mindquiz.utils import DataAccessError, DataManager, build_quiz


def main():
    configure_logging()
    config.prepare_fs()

    # ==================== Step 1: Learning Module ====================
    print("=" * 60)
    print("STEP 1: Learning Module")
    print("=" * 60)

    learning = LearningModule()
    if learning.total_pages == 0:
        print(f"No learning pages found in {learning.pages_dir}, going straight to the quiz.")
    while learning.total_pages and not learning.is_last_page:
        print(f"  Page {learning.current_page + 1}/{learning.total_pages}: {learning.current.name}")
        learning.next_page()
    print()

    # ==================== Step 2: Quiz ====================
    print("=" * 60)
    print("STEP 2: Quiz")
    print("=" * 60)

    engine = GamificationEngine()
    quiz = build_quiz(engine=engine)
    quiz.generate_quiz()

    # Simulated learner: right about 70% of the time
    rng = random.Random(7)
    answers = []
    for question in quiz.questions:
        if question.question_type == "multiple_choice":
            pick = question.correct_answer if rng.random() < 0.7 else rng.choice(question.options)
        else:
            truth = question.correct_answer if rng.random() < 0.7 else not question.correct_answer
            pick = "true" if truth else "false"
        answers.append(pick)

    score = quiz.evaluate_answers(answers)
    print(f"Your Score: {score} ({quiz.correct_count}/{quiz.total_questions} correct)")
    print(f"Percentage: {quiz.calculate_score():.1f}%")
    print(quiz.get_motivational_message())
    print()

    # ==================== Step 3: Gamification ====================
    print("=" * 60)
    print("STEP 3: Points, Badges and Leaderboard")
    print("=" * 60)

    learner = User("Alice")
    engine.add_user(learner)
    for name, correct in [("Bob", 8), ("Chen", 3), ("Dana", 0)]:
        classmate = User(name)
        engine.add_user(classmate)
        engine.award_points_to_user(classmate, correct)
    quiz.award_score_to_user(learner, quiz.correct_count)

    print(engine.format_result(learner))
    print(engine.format_leaderboard())
    print(f"\nClass total: {engine.get_total_points()} points")
    print()

    # ==================== Step 4: Score History ====================
    print("=" * 60)
    print("STEP 4: Score History")
    print("=" * 60)

    try:
        history = DataManager()
        history.append_score(round(min(quiz.calculate_score(), 100)))
        print(f"Latest score: {history.get_latest_score()}")
        print(f"Average score: {history.get_average_score():.1f}")
        print(history.get_motivational_message())
        print("\nScores by band:")
        for band, count in history.get_score_histogram():
            print(f"  {band:>7}: {'#' * count}")
    except DataAccessError as e:
        print(f"Could not update score history: {e}")


if __name__ == "__main__":
    main()
