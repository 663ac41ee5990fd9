"""
Question difficulty levels.
"""

from enum import Enum


class DifficultyLevel(str, Enum):
    """Difficulty tag attached to a question."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


_TEXT = {
    DifficultyLevel.EASY: "Easy",
    DifficultyLevel.MEDIUM: "Medium",
    DifficultyLevel.HARD: "Hard",
}

# rich style names
_STYLE = {
    DifficultyLevel.EASY: "green",
    DifficultyLevel.MEDIUM: "yellow",
    DifficultyLevel.HARD: "red",
}


def _coerce(level: str | DifficultyLevel | None) -> DifficultyLevel | None:
    if isinstance(level, DifficultyLevel):
        return level
    if not level:
        return None
    try:
        return DifficultyLevel(str(level).lower())
    except ValueError:
        return None


def difficulty_text(level: str | DifficultyLevel | None) -> str:
    """Display label for a difficulty level."""
    return _TEXT.get(_coerce(level), "Unknown")


def difficulty_style(level: str | DifficultyLevel | None) -> str:
    """Rich style used to render a difficulty level."""
    return _STYLE.get(_coerce(level), "")
