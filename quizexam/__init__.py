"""
QuizExam CLI - terminal exam client for remote question banks.

Loads a quiz bank and its questions from the quiz service, lets the user
move between questions, records answers and grades them against the
answer key stored with each question.
"""

__version__ = "1.0.0"
