"""
Exam session state for one attempt at a quiz bank.

The session owns the loaded questions, the current selection, the user's
answers and the graded results. Nothing else writes to that state: the UI
reads through properties and mutates through the operations below.

Lifecycle:
    session = ExamSession(bank_id, client)
    await session.initialize()      # bank info, then questions
    session.activate(key_source)    # left/right navigation
    ...
    session.close()                 # unsubscribes and drops late writes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import httpx
from loguru import logger

from quizexam.exam.evaluator import evaluate
from quizexam.exam.keys import Key, KeySource
from quizexam.models import ApiResult, Question, QuizBank

INVALID_BANK_ID = "Invalid quiz bank id"
BANK_INFO_FAILED = "Failed to load quiz bank info"
BANK_INFO_NETWORK_ERROR = "Network error: unable to load quiz bank info"
QUESTIONS_FAILED = "Failed to load question list"
QUESTIONS_NETWORK_ERROR = "Network error: unable to load question list"

NO_SELECTION = -1


class QuestionSource(Protocol):
    """Remote collaborator the session loads from."""

    async def get_bank_info(self, bank_id: Any) -> ApiResult[QuizBank]:
        ...

    async def get_questions_for_bank(self, bank_id: Any) -> ApiResult[list[Question]]:
        ...


@dataclass(frozen=True)
class AnswerResult:
    """Grading outcome for one question."""
    evaluated: bool
    correct: bool


NOT_EVALUATED = AnswerResult(evaluated=False, correct=False)


@dataclass
class SessionState:
    """In-memory state of one exam attempt."""

    questions: list[Question] = field(default_factory=list)
    bank_info: Optional[QuizBank] = None
    selected_index: int = NO_SELECTION
    selected_question: Optional[Question] = None
    user_answers: dict[Any, str] = field(default_factory=dict)
    answer_results: dict[Any, AnswerResult] = field(default_factory=dict)
    loading: bool = False
    error: str = ""

    def clear_selection(self) -> None:
        self.selected_index = NO_SELECTION
        self.selected_question = None


def _as_question(item: Any) -> Question:
    if isinstance(item, Question):
        return item
    return Question.from_dict(item)


def _as_bank(item: Any) -> Optional[QuizBank]:
    if item is None or isinstance(item, QuizBank):
        return item
    return QuizBank.from_dict(item)


class ExamSession:
    """
    State machine for an exam attempt.

    Exactly one question is selected once a non-empty question list has
    loaded. Navigation is clamped to the list bounds and never wraps.
    """

    def __init__(self, bank_id: Any, source: QuestionSource):
        self.bank_id = bank_id
        self.source = source
        self.state = SessionState()
        self._key_source: KeySource | None = None
        self._closed = False

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def questions(self) -> list[Question]:
        return self.state.questions

    @property
    def bank_info(self) -> Optional[QuizBank]:
        return self.state.bank_info

    @property
    def selected_question(self) -> Optional[Question]:
        return self.state.selected_question

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> str:
        return self.state.error

    @property
    def current_answer(self) -> str:
        """Saved answer for the selected question, or ''."""
        question = self.state.selected_question
        if question is None:
            return ""
        return self.state.user_answers.get(question.id) or ""

    @property
    def current_result(self) -> AnswerResult:
        """Grading result for the selected question, or NOT_EVALUATED."""
        question = self.state.selected_question
        if question is None:
            return NOT_EVALUATED
        return self.state.answer_results.get(question.id, NOT_EVALUATED)

    @property
    def has_previous(self) -> bool:
        return self.state.selected_index > 0

    @property
    def has_next(self) -> bool:
        index = self.state.selected_index
        return index != NO_SELECTION and index < len(self.state.questions) - 1

    @property
    def answered_count(self) -> int:
        return sum(1 for answer in self.state.user_answers.values() if answer)

    @property
    def submitted_count(self) -> int:
        return len(self.state.answer_results)

    @property
    def is_active(self) -> bool:
        return self._key_source is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    # =========================================================================
    # Loading
    # =========================================================================

    async def initialize(self, bank_id: Any = None) -> None:
        """
        Load bank info, then the bank's questions.

        Never raises for load failures: problems end up in `error`. A bank
        info failure is cleared once the questions fetch starts, so `error`
        only survives a successful load when the questions fetch failed.
        """
        if bank_id is not None:
            self.bank_id = bank_id

        self.state.error = ""
        if not self.bank_id:
            logger.warning("Exam session started without a quiz bank id")
            self.state.error = INVALID_BANK_ID
            self.state.questions = []
            self.state.clear_selection()
            return

        await self._fetch_bank_info()
        if self._closed:
            return
        await self._fetch_questions()

    async def _fetch_bank_info(self) -> None:
        try:
            result = await self.source.get_bank_info(self.bank_id)
            bank = _as_bank(result.data) if result.ok else None
        except (httpx.HTTPError, OSError) as e:
            logger.error(f"Error loading quiz bank {self.bank_id}: {e}")
            if not self._closed:
                self.state.error = BANK_INFO_NETWORK_ERROR
            return
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed quiz bank response for {self.bank_id}: {e}")
            if not self._closed:
                self.state.error = BANK_INFO_FAILED
            return

        if self._closed:
            logger.debug(f"Session closed; dropping bank info for {self.bank_id}")
            return

        if result.ok:
            self.state.bank_info = bank
            logger.info(f"Loaded quiz bank {self.bank_id}")
        else:
            logger.warning(f"Quiz bank {self.bank_id} returned code {result.code}: {result.message}")
            self.state.error = result.message or BANK_INFO_FAILED

    async def _fetch_questions(self) -> None:
        self.state.error = ""
        self.state.loading = True
        try:
            result = await self.source.get_questions_for_bank(self.bank_id)
            questions = [_as_question(item) for item in (result.data or [])] if result.ok else []
        except (httpx.HTTPError, OSError) as e:
            logger.error(f"Error loading questions for bank {self.bank_id}: {e}")
            if not self._closed:
                self._fail_questions(QUESTIONS_NETWORK_ERROR)
            return
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed question list for bank {self.bank_id}: {e}")
            if not self._closed:
                self._fail_questions(QUESTIONS_FAILED)
            return
        finally:
            self.state.loading = False

        if self._closed:
            logger.debug(f"Session closed; dropping questions for {self.bank_id}")
            return

        if not result.ok:
            logger.warning(
                f"Questions for bank {self.bank_id} returned code {result.code}: {result.message}"
            )
            self._fail_questions(result.message or QUESTIONS_FAILED)
            return

        self.state.questions = questions
        logger.info(f"Loaded {len(self.state.questions)} questions for bank {self.bank_id}")
        if self.state.questions:
            self.select(self.state.questions[0])
        else:
            self.state.clear_selection()

    def _fail_questions(self, message: str) -> None:
        self.state.error = message
        self.state.questions = []
        self.state.clear_selection()

    # =========================================================================
    # Navigation
    # =========================================================================

    def select(self, question: Question) -> None:
        """Select a question; one not in the list leaves nothing selected."""
        index = next(
            (i for i, q in enumerate(self.state.questions) if q.id == question.id),
            NO_SELECTION,
        )
        if index == NO_SELECTION:
            logger.warning(f"Question {question.id} is not part of this session")
            self.state.clear_selection()
            return
        self.state.selected_index = index
        self.state.selected_question = question

    def select_at(self, index: int) -> bool:
        """Select by position. Returns False for an out-of-range index."""
        if not 0 <= index < len(self.state.questions):
            return False
        self.select(self.state.questions[index])
        return True

    def next(self) -> None:
        """Move to the next question; no-op on the last one or without a selection."""
        index = self.state.selected_index
        if index != NO_SELECTION and index < len(self.state.questions) - 1:
            self.select_at(index + 1)

    def previous(self) -> None:
        """Move to the previous question; no-op on the first one."""
        if self.state.selected_index > 0:
            self.select_at(self.state.selected_index - 1)

    # =========================================================================
    # Answers
    # =========================================================================

    def save_answer(self, answer: str) -> None:
        """Store the answer for the selected question (no-op without one)."""
        question = self.state.selected_question
        if question is None:
            logger.debug("No question selected; answer not saved")
            return
        logger.debug(f"Saving answer for question {question.id}: {answer!r}")
        self.state.user_answers[question.id] = answer

    def submit_answer(self) -> bool:
        """
        Grade the saved answer for the selected question.

        Returns False (and records nothing) when no question is selected or
        no answer has been saved for it. Resubmitting regrades.
        """
        question = self.state.selected_question
        if question is None:
            return False
        answer = self.state.user_answers.get(question.id)
        if not answer:
            return False

        verdict = evaluate(answer, question.answer_key, question.type)
        self.state.answer_results[question.id] = AnswerResult(evaluated=True, correct=verdict)
        logger.debug(f"Question {question.id} graded: {'correct' if verdict else 'incorrect'}")
        return True

    # =========================================================================
    # Keyboard binding
    # =========================================================================

    def handle_key(self, key: Key) -> None:
        if key is Key.LEFT:
            self.previous()
        elif key is Key.RIGHT:
            self.next()

    def activate(self, key_source: KeySource) -> None:
        """Subscribe to navigation keys. Repeated activation is a no-op."""
        if self._key_source is key_source:
            return
        if self._key_source is not None:
            self.deactivate()
        key_source.subscribe(self.handle_key)
        self._key_source = key_source

    def deactivate(self) -> None:
        """Unsubscribe from navigation keys."""
        if self._key_source is None:
            return
        self._key_source.unsubscribe(self.handle_key)
        self._key_source = None

    def close(self) -> None:
        """End the session. A load still in flight will not write its result."""
        self.deactivate()
        self._closed = True
