"""
Quiz bank record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class QuizBank:
    """A named collection of questions."""

    id: int
    name: str
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizBank:
        """Parse a bank from the service's camelCase payload."""
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            description=data.get("description"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
