"""
Response envelope returned by every quiz service endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResultCode(IntEnum):
    """Response codes used in the envelope's `code` field."""
    SUCCESS = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    SERVER_ERROR = 500


@dataclass
class ApiResult(Generic[T]):
    """`{code, message, data}` envelope."""

    code: int
    message: str = ""
    data: T | None = None

    @property
    def ok(self) -> bool:
        return self.code == ResultCode.SUCCESS

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> ApiResult[Any]:
        """Parse an envelope; the caller converts `data` to model objects."""
        code = payload.get("code")
        return cls(
            code=int(code) if ApiResult.is_envelope(payload) else 0,
            message=payload.get("message") or "",
            data=payload.get("data"),
        )

    @staticmethod
    def is_envelope(payload: Any) -> bool:
        """A dict whose `code` is an integer (or an all-digit string)."""
        if not isinstance(payload, dict):
            return False
        code = payload.get("code")
        if isinstance(code, bool):
            return False
        if isinstance(code, int):
            return True
        return isinstance(code, str) and code.isdecimal()
