"""
Data model for quiz banks and questions as delivered by the quiz service.
"""

from .difficulty import DifficultyLevel, difficulty_style, difficulty_text
from .question import (
    AnswerKey,
    CollectionKey,
    Question,
    QuestionType,
    ScalarKey,
    answer_key_from_raw,
)
from .quiz_bank import QuizBank
from .result import ApiResult, ResultCode

__all__ = [
    "AnswerKey",
    "ApiResult",
    "CollectionKey",
    "DifficultyLevel",
    "Question",
    "QuestionType",
    "QuizBank",
    "ResultCode",
    "ScalarKey",
    "answer_key_from_raw",
    "difficulty_style",
    "difficulty_text",
]
