"""
Answer evaluation.

Each question type has its own comparator, registered with @register:
- SINGLE_CHOICE: exact match against the (first) key token
- JUDGMENT: T/F answer against a key that may use the A/B labels
- MULTIPLE_CHOICE: order-independent match of comma-separated options
- FILL_BLANK / SHORT_ANSWER: exact match against any accepted phrasing

Types without a comparator are never correct.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from quizexam.models.question import (
    AnswerKey,
    CollectionKey,
    QuestionType,
    answer_key_from_raw,
)

Comparator = Callable[[str, AnswerKey], bool]

# Comparator registry - populated by @register
COMPARATORS: dict[QuestionType, Comparator] = {}

# Judgment keys imported from binary-choice banks use A/B instead of T/F
JUDGMENT_LABELS = {"A": "T", "B": "F"}


def register(*question_types: QuestionType):
    """Decorator to register a comparator for one or more question types."""
    def decorator(func: Comparator) -> Comparator:
        for question_type in question_types:
            COMPARATORS[question_type] = func
        return func
    return decorator


def _single_token(key: AnswerKey) -> str:
    if isinstance(key, CollectionKey):
        return key.tokens[0]
    return key.token


def _key_tokens(key: AnswerKey) -> list[str]:
    if isinstance(key, CollectionKey):
        return list(key.tokens)
    return [key.token]


@register(QuestionType.SINGLE_CHOICE)
def _check_single_choice(user_answer: str, key: AnswerKey) -> bool:
    return user_answer == _single_token(key)


@register(QuestionType.JUDGMENT)
def _check_judgment(user_answer: str, key: AnswerKey) -> bool:
    expected = _single_token(key)
    expected = JUDGMENT_LABELS.get(expected, expected)
    if user_answer not in ("T", "F"):
        return False
    return user_answer == expected


@register(QuestionType.MULTIPLE_CHOICE)
def _check_multiple_choice(user_answer: str, key: AnswerKey) -> bool:
    chosen = sorted(token for token in user_answer.split(",") if token)
    expected = sorted(_key_tokens(key))
    return chosen == expected


@register(QuestionType.FILL_BLANK, QuestionType.SHORT_ANSWER)
def _check_text(user_answer: str, key: AnswerKey) -> bool:
    if isinstance(key, CollectionKey):
        return user_answer in key.tokens
    return user_answer == key.token


def evaluate(
    user_answer: str | None,
    correct_answer: Any,
    question_type: QuestionType | str | None,
) -> bool:
    """
    Decide whether a user's answer is correct.

    Args:
        user_answer: Raw answer text as entered by the user
        correct_answer: Answer key, raw (str / list) or already normalized
        question_type: Question type enum or its string tag

    Returns:
        True only for a non-empty answer matching a non-empty key.
    """
    if not user_answer:
        return False
    key = answer_key_from_raw(correct_answer)
    if key is None:
        return False

    resolved = QuestionType.parse(question_type)
    comparator = COMPARATORS.get(resolved) if resolved else None
    if comparator is None:
        logger.warning(f"No comparator for question type {question_type!r}; marking incorrect")
        return False

    return comparator(user_answer, key)


__all__ = [
    "COMPARATORS",
    "JUDGMENT_LABELS",
    "evaluate",
    "register",
]
