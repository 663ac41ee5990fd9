"""
QuizExam CLI - take quizzes from a remote question bank in the terminal.

Usage:
    quizexam banks                  # List quiz banks
    quizexam banks --search linux   # Search banks by name
    quizexam exam 3                 # Take the exam for bank 3
    quizexam show 42                # Show one question with its answer

Inside an exam:
    < / >        previous / next question (also: left, right)
    a TEXT       save TEXT as the answer to the current question
    s            submit (grade) the saved answer
    q            quit
"""

from __future__ import annotations

import asyncio
import sys
from enum import Enum
from typing import Annotated

import httpx
import typer
from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from quizexam import ui
from quizexam.api import QuizBankClient
from quizexam.config import QuizExamConfig, get_settings
from quizexam.exam import ExamSession, KeySource

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quizexam",
    help="QuizExam CLI - take quizzes from a remote question bank",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


@app.callback()
def main_callback(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING...)")
    ] = None,
) -> None:
    """QuizExam CLI."""
    configure_logging(log_level or get_settings().log_level)


# =============================================================================
# Exam loop
# =============================================================================


class Outcome(str, Enum):
    """What an exam command did."""
    NAVIGATED = "navigated"
    SAVED = "saved"
    SUBMITTED = "submitted"
    NOTHING_TO_SUBMIT = "nothing_to_submit"
    QUIT = "quit"
    UNKNOWN = "unknown"


def run_command(session: ExamSession, keys: KeySource, line: str) -> Outcome:
    """Apply one line of exam input to the session."""
    stripped = line.strip()
    lowered = stripped.lower()

    if lowered in ("q", "quit", "exit"):
        return Outcome.QUIT
    if keys.feed(stripped):
        return Outcome.NAVIGATED
    if lowered in ("s", "submit"):
        return Outcome.SUBMITTED if session.submit_answer() else Outcome.NOTHING_TO_SUBMIT
    if lowered.startswith("a "):
        session.save_answer(stripped[2:].strip())
        return Outcome.SAVED
    return Outcome.UNKNOWN


def _render(session: ExamSession) -> None:
    question = session.selected_question
    if question is None:
        console.print("[yellow]No question selected[/]")
        return
    total = len(session.questions)
    console.print(ui.render_question_panel(question, session.selected_index, total))
    console.print(ui.render_answer_line(session.current_answer, session.current_result))
    console.print(ui.answer_hint(question), style="dim")
    console.print(ui.render_nav(session.has_previous, session.has_next, session.answered_count, total))


async def _load_session(config: QuizExamConfig, bank_id: str) -> ExamSession:
    async with QuizBankClient(config.api) as client:
        session = ExamSession(bank_id, client)
        with console.status("[dim]Loading questions...[/dim]", spinner="dots"):
            await session.initialize()
    return session


@app.command()
def exam(
    bank_id: Annotated[str, typer.Argument(help="Quiz bank ID")],
) -> None:
    """
    Take the exam for a quiz bank.

    Examples:
        quizexam exam 3
    """
    config = get_settings()
    session = asyncio.run(_load_session(config, bank_id))

    if session.error:
        console.print(f"[red]{session.error}[/]")
    if not session.questions:
        if not session.error:
            console.print("[yellow]This quiz bank has no questions.[/]")
        raise typer.Exit(code=1 if session.error else 0)

    console.print(ui.render_bank_header(session.bank_info, bank_id))

    keys = KeySource()
    session.activate(keys)
    try:
        _render(session)
        while True:
            line = Prompt.ask("[cyan]>_[/cyan]", default="")
            outcome = run_command(session, keys, line)
            if outcome is Outcome.QUIT:
                break
            if outcome is Outcome.SUBMITTED:
                console.print(ui.render_result_panel(session.selected_question, session.current_result))
                continue
            if outcome is Outcome.NOTHING_TO_SUBMIT:
                console.print("[yellow]Save an answer first (a TEXT)[/]")
                continue
            if outcome is Outcome.UNKNOWN:
                console.print("[yellow]Unknown command[/]")
                continue
            _render(session)
    except (KeyboardInterrupt, EOFError):
        console.print()
    finally:
        session.close()

    console.print(
        f"[dim]Answered {session.answered_count}/{len(session.questions)}, "
        f"submitted {session.submitted_count}[/]"
    )


# =============================================================================
# Browsing
# =============================================================================


async def _fetch_banks(config: QuizExamConfig, search: str | None):
    async with QuizBankClient(config.api) as client:
        if search:
            return await client.search_banks(search)
        return await client.list_banks()


@app.command()
def banks(
    search: Annotated[
        str | None, typer.Option("--search", "-s", help="Filter by name keyword")
    ] = None,
) -> None:
    """List quiz banks."""
    config = get_settings()
    try:
        result = asyncio.run(_fetch_banks(config, search))
    except httpx.RequestError as e:
        logger.error(f"Connection error listing banks: {e}")
        console.print(f"[red]Network error: unable to reach {config.api.base_url}[/]")
        raise typer.Exit(code=1)

    if not result.ok:
        console.print(f"[red]{result.message or 'Failed to load quiz banks'}[/]")
        raise typer.Exit(code=1)
    if not result.data:
        console.print("[yellow]No quiz banks found.[/]")
        return
    console.print(ui.render_bank_table(result.data))


async def _fetch_question(config: QuizExamConfig, question_id: str):
    async with QuizBankClient(config.api) as client:
        return await client.get_question(question_id)


@app.command()
def show(
    question_id: Annotated[str, typer.Argument(help="Question ID")],
) -> None:
    """Show a single question with its answer and explanation."""
    config = get_settings()
    try:
        result = asyncio.run(_fetch_question(config, question_id))
    except httpx.RequestError as e:
        logger.error(f"Connection error fetching question {question_id}: {e}")
        console.print(f"[red]Network error: unable to reach {config.api.base_url}[/]")
        raise typer.Exit(code=1)

    if not result.ok or result.data is None:
        console.print(f"[red]{result.message or 'Question not found'}[/]")
        raise typer.Exit(code=1)

    question = result.data
    console.print(ui.render_question_panel(question, 0, 1))
    console.print(f"[bold]Answer:[/] {ui.format_key(question)}")
    if question.analysis:
        console.print(f"[yellow]Explanation:[/] {question.analysis}")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
