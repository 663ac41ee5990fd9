"""
Quiz Service Client

HTTP client for the quiz bank service. Every endpoint answers with a
`{code, message, data}` envelope; `data` is converted to model objects here.

Usage:
    async with QuizBankClient(settings.api) as client:
        bank = await client.get_bank_info(3)
        questions = await client.get_questions_for_bank(3)

Transport errors (httpx.RequestError) are not caught: callers decide how
to report them.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from quizexam.config import ApiConfig
from quizexam.models import ApiResult, Question, QuizBank


class QuizBankClient:
    """Read-only HTTP client for quiz banks and their questions."""

    def __init__(self, config: ApiConfig):
        self.config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "QuizBankClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={"Accept": "application/json"},
                timeout=self.config.timeout_seconds,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> ApiResult[Any]:
        """GET an endpoint and unwrap its envelope."""
        client = await self._ensure_client()
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        response = await client.get(url, params=params or None)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if ApiResult.is_envelope(payload):
            result = ApiResult.from_dict(payload)
        else:
            result = ApiResult(code=response.status_code, message=response.reason_phrase)

        if not result.ok:
            logger.warning(f"GET {url} failed: code={result.code} message={result.message!r}")
        return result

    # =========================================================================
    # Quiz banks
    # =========================================================================

    async def get_bank_info(self, bank_id: Any) -> ApiResult[QuizBank]:
        """Fetch a quiz bank by ID."""
        result = await self._get(f"{self.config.banks_endpoint}/{bank_id}")
        if result.ok and result.data is not None:
            result.data = QuizBank.from_dict(result.data)
        return result

    async def list_banks(self) -> ApiResult[list[QuizBank]]:
        """Fetch all quiz banks."""
        result = await self._get(self.config.banks_endpoint)
        if result.ok:
            result.data = [QuizBank.from_dict(item) for item in result.data or []]
        return result

    async def search_banks(self, name: str | None = None) -> ApiResult[list[QuizBank]]:
        """Search quiz banks by name keyword."""
        result = await self._get(f"{self.config.banks_endpoint}/search", params={"name": name})
        if result.ok:
            result.data = [QuizBank.from_dict(item) for item in result.data or []]
        return result

    # =========================================================================
    # Questions
    # =========================================================================

    async def get_questions_for_bank(self, bank_id: Any) -> ApiResult[list[Question]]:
        """Fetch the ordered question list of a quiz bank."""
        result = await self._get(f"{self.config.questions_endpoint}/bank/{bank_id}")
        if result.ok:
            result.data = [Question.from_dict(item) for item in result.data or []]
            logger.debug(f"Fetched {len(result.data)} questions for bank {bank_id}")
        return result

    async def get_question(self, question_id: Any) -> ApiResult[Question]:
        """Fetch a single question by ID."""
        result = await self._get(f"{self.config.questions_endpoint}/{question_id}")
        if result.ok and result.data is not None:
            result.data = Question.from_dict(result.data)
        return result

    async def search_questions(
        self,
        quiz_bank_id: Any = None,
        title: str | None = None,
        question_type: str | None = None,
    ) -> ApiResult[list[Question]]:
        """Search questions by bank, title keyword and type."""
        result = await self._get(
            f"{self.config.questions_endpoint}/search",
            params={"quizBankId": quiz_bank_id, "title": title, "type": question_type},
        )
        if result.ok:
            result.data = [Question.from_dict(item) for item in result.data or []]
        return result
