"""
Rich rendering for the exam screen.
"""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from quizexam.exam.session import AnswerResult
from quizexam.models import Question, QuestionType, QuizBank, difficulty_style, difficulty_text
from quizexam.models.question import CollectionKey

# =============================================================================
# THEME
# =============================================================================

THEME = {
    "primary": "#00BFFF",
    "accent": "#FF69B4",
    "success": "#00FF88",
    "warning": "#FFD700",
    "error": "#FF3366",
    "dim": "#7a8894",
    "white": "#F0F0F0",
}

STYLES = {
    "primary": Style(color=THEME["primary"], bold=True),
    "success": Style(color=THEME["success"], bold=True),
    "warning": Style(color=THEME["warning"], bold=True),
    "error": Style(color=THEME["error"], bold=True),
    "dim": Style(color=THEME["dim"]),
}

TYPE_LABELS = {
    QuestionType.SINGLE_CHOICE: "SINGLE CHOICE",
    QuestionType.MULTIPLE_CHOICE: "MULTIPLE CHOICE",
    QuestionType.JUDGMENT: "TRUE OR FALSE",
    QuestionType.FILL_BLANK: "FILL IN THE BLANK",
    QuestionType.SHORT_ANSWER: "SHORT ANSWER",
}

ANSWER_HINTS = {
    QuestionType.SINGLE_CHOICE: "one option label, e.g. A",
    QuestionType.MULTIPLE_CHOICE: "comma-separated labels, e.g. A,C",
    QuestionType.JUDGMENT: "T or F",
    QuestionType.FILL_BLANK: "the missing text",
    QuestionType.SHORT_ANSWER: "your answer",
}


def type_label(question: Question) -> str:
    question_type = question.question_type
    if question_type is None:
        return question.type.upper() or "QUESTION"
    return TYPE_LABELS[question_type]


def answer_hint(question: Question) -> str:
    return ANSWER_HINTS.get(question.question_type, "your answer")


def format_key(question: Question) -> str:
    """Human-readable answer key."""
    key = question.answer_key
    if key is None:
        return "-"
    if isinstance(key, CollectionKey):
        return ", ".join(key.tokens)
    return key.token


def render_question_panel(question: Question, index: int, total: int) -> Panel:
    """
    Render the selected question with its options.

    Args:
        question: Question to display
        index: Zero-based position in the session
        total: Number of questions in the session

    Returns:
        Rich Panel
    """
    header = Text()
    header.append(f"[{type_label(question)}]", style=STYLES["primary"])
    header.append(f" Q {index + 1}/{total}", style=STYLES["dim"])
    if question.difficulty:
        header.append(
            f" {difficulty_text(question.difficulty)}",
            style=difficulty_style(question.difficulty) or STYLES["dim"],
        )

    body = Table.grid(padding=(0, 1))
    body.add_column()
    if question.title:
        body.add_row(Text(question.title, style=Style(color=THEME["white"], bold=True)))
    if question.content:
        body.add_row(Text(question.content, style=Style(color=THEME["white"])))

    if question.options:
        options = Table(box=box.MINIMAL, show_header=False)
        options.add_column("Label", style="cyan", justify="right", width=4)
        options.add_column("Option", style="white")
        for label, text in question.options.items():
            options.add_row(f"{label}.", text)
        body.add_row(options)

    return Panel(
        Align.left(body),
        title=header,
        title_align="left",
        border_style=Style(color=THEME["primary"]),
        box=box.HEAVY,
        padding=(1, 2),
    )


def render_answer_line(answer: str, result: AnswerResult) -> Text:
    """One-line status: saved answer and grading state."""
    text = Text()
    text.append("Your answer: ", style=STYLES["dim"])
    text.append(answer or "(none)", style=Style(color=THEME["white"], bold=bool(answer)))
    if result.evaluated:
        if result.correct:
            text.append("  ✓ correct", style=STYLES["success"])
        else:
            text.append("  ✗ incorrect", style=STYLES["error"])
    return text


def render_result_panel(question: Question, result: AnswerResult) -> Panel:
    """Verdict panel shown after a submission."""
    color = THEME["success"] if result.correct else THEME["error"]
    content = Text()
    content.append("CORRECT" if result.correct else "INCORRECT", style=Style(color=color, bold=True))
    content.append("\n\nAnswer: ", style=STYLES["dim"])
    content.append(format_key(question), style=Style(color=THEME["white"], bold=True))

    if question.analysis:
        content.append("\n\nExplanation: ", style=STYLES["warning"])
        content.append(question.analysis, style=STYLES["dim"])

    return Panel(content, border_style=Style(color=color), box=box.HEAVY, padding=(1, 2))


def render_nav(has_prev: bool, has_next: bool, answered: int, total: int) -> Text:
    """Navigation and command help line."""
    options = []
    if has_prev:
        options.append("[<] prev")
    if has_next:
        options.append("[>] next")
    options.extend(["[a TEXT] answer", "[s]ubmit", "[q]uit"])

    text = Text()
    text.append(" | ".join(options), style=STYLES["dim"])
    text.append(f"    answered {answered}/{total}", style=STYLES["dim"])
    return text


def render_bank_header(bank: QuizBank | None, bank_id: object) -> Panel:
    name = bank.name if bank else f"Quiz bank {bank_id}"
    content = Text(name, style=STYLES["primary"])
    if bank and bank.description:
        content.append(f"\n{bank.description}", style=STYLES["dim"])
    return Panel(content, box=box.ROUNDED, border_style=Style(color=THEME["accent"]), padding=(0, 1))


def render_bank_table(banks: list[QuizBank]) -> Table:
    table = Table(title="Quiz Banks", box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for bank in banks:
        table.add_row(str(bank.id), bank.name, bank.description or "")
    return table
