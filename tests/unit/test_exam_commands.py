"""
Unit tests for exam input handling in the CLI.
"""

import asyncio

import pytest

from quizexam.cli import Outcome, run_command
from quizexam.exam import ExamSession, KeySource


@pytest.fixture
def active(source):
    session = ExamSession(7, source)
    asyncio.run(session.initialize())
    keys = KeySource()
    session.activate(keys)
    yield session, keys
    session.close()


class TestRunCommand:

    def test_navigation(self, active):
        session, keys = active

        assert run_command(session, keys, ">") is Outcome.NAVIGATED
        assert session.selected_index == 1
        assert run_command(session, keys, "left") is Outcome.NAVIGATED
        assert session.selected_index == 0

    def test_save_and_submit(self, active):
        session, keys = active

        assert run_command(session, keys, "a A") is Outcome.SAVED
        assert session.current_answer == "A"
        assert run_command(session, keys, "s") is Outcome.SUBMITTED
        assert session.current_result.correct is True

    def test_answer_keeps_case_and_inner_spaces(self, active):
        session, keys = active
        session.select_at(4)

        run_command(session, keys, "a working directory ")

        assert session.current_answer == "working directory"

    def test_submit_without_answer(self, active):
        session, keys = active

        assert run_command(session, keys, "submit") is Outcome.NOTHING_TO_SUBMIT

    def test_quit_and_unknown(self, active):
        session, keys = active

        assert run_command(session, keys, "q") is Outcome.QUIT
        assert run_command(session, keys, "A") is Outcome.UNKNOWN
