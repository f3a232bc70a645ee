"""Daily quiz web service: name-based login, date-keyed quizzes, leaderboard."""

__version__ = "0.1.0"
