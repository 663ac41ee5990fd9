"""
Question model and answer-key normalization.

The service stores a question's answer either as a single token ("A",
"Paris") or as a list of tokens (["A", "C"], ["Paris", "paris"]). The shape
is normalized once, when a question is parsed, into one of two answer-key
variants so the evaluator never inspects raw payload types.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from loguru import logger


class QuestionType(str, Enum):
    """Question types served by the quiz service."""
    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    JUDGMENT = "JUDGMENT"
    FILL_BLANK = "FILL_BLANK"
    SHORT_ANSWER = "SHORT_ANSWER"

    @classmethod
    def parse(cls, value: str | QuestionType | None) -> QuestionType | None:
        """Look up a type tag, case-insensitively. Unknown tags give None."""
        if isinstance(value, QuestionType):
            return value
        if not value:
            return None
        try:
            return cls(str(value).upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class ScalarKey:
    """Answer key holding one token."""
    token: str


@dataclass(frozen=True)
class CollectionKey:
    """Answer key holding several tokens (options or accepted phrasings)."""
    tokens: tuple[str, ...]


AnswerKey = Union[ScalarKey, CollectionKey]


def answer_key_from_raw(value: Any) -> AnswerKey | None:
    """
    Normalize a raw answer value into an answer-key variant.

    Returns None for a missing or empty key.
    """
    if isinstance(value, (ScalarKey, CollectionKey)):
        return value
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return CollectionKey(tuple(str(token) for token in value))
    token = str(value)
    if not token:
        return None
    return ScalarKey(token)


def _decode_answer(raw: Any) -> Any:
    """Answer lists may arrive JSON-encoded in a text column."""
    if isinstance(raw, str) and raw.lstrip().startswith("["):
        try:
            decoded = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return raw
        if isinstance(decoded, list):
            return decoded
    return raw


def _decode_options(raw: Any) -> dict[str, str]:
    """Options are a label -> text mapping, sometimes sent as a JSON string."""
    if isinstance(raw, dict):
        return {str(k): str(v) for k, v in raw.items()}
    if isinstance(raw, str) and raw.strip():
        try:
            decoded = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.debug(f"Ignoring undecodable options payload: {raw!r}")
            return {}
        if isinstance(decoded, dict):
            return {str(k): str(v) for k, v in decoded.items()}
    return {}


@dataclass
class Question:
    """A question belonging to a quiz bank."""

    id: Any
    quiz_bank_id: Any = None
    title: str = ""
    content: str = ""
    type: str = ""  # raw tag as delivered; see question_type
    answer: Any = None
    answer_key: AnswerKey | None = None
    options: dict[str, str] = field(default_factory=dict)
    analysis: str | None = None
    difficulty: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        if self.answer_key is None:
            self.answer_key = answer_key_from_raw(self.answer)

    @property
    def question_type(self) -> QuestionType | None:
        return QuestionType.parse(self.type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Question:
        """Parse a question from the service's camelCase payload."""
        answer = _decode_answer(data.get("answer"))
        return cls(
            id=data.get("id"),
            quiz_bank_id=data.get("quizBankId", data.get("quiz_bank_id")),
            title=data.get("title") or "",
            content=data.get("content") or "",
            type=data.get("type") or "",
            answer=answer,
            options=_decode_options(data.get("options")),
            analysis=data.get("analysis"),
            difficulty=data.get("difficulty"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
