"""
Exam session state machine and answer evaluation.
"""

from .evaluator import evaluate
from .keys import Key, KeySource, parse_key
from .session import AnswerResult, ExamSession, QuestionSource, SessionState

__all__ = [
    "AnswerResult",
    "ExamSession",
    "Key",
    "KeySource",
    "QuestionSource",
    "SessionState",
    "evaluate",
    "parse_key",
]
