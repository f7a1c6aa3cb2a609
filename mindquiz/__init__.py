"""
MindQuiz: mental health awareness quizzes with points, badges and a leaderboard.
"""

__version__ = "0.1.0"
