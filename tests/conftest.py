"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizexam.models import ApiResult, Question, QuizBank  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FakeQuestionSource:
    """In-memory stand-in for the quiz service client."""

    def __init__(self, bank_result=None, questions_result=None, bank_error=None, questions_error=None):
        self.bank_result = bank_result
        self.questions_result = questions_result
        self.bank_error = bank_error
        self.questions_error = questions_error
        self.calls: list[tuple[str, object]] = []

    async def get_bank_info(self, bank_id):
        self.calls.append(("bank", bank_id))
        if self.bank_error:
            raise self.bank_error
        return self.bank_result

    async def get_questions_for_bank(self, bank_id):
        self.calls.append(("questions", bank_id))
        if self.questions_error:
            raise self.questions_error
        return self.questions_result


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_bank():
    return QuizBank(id=7, name="Linux Basics", description="Shell and filesystem")


@pytest.fixture
def sample_questions():
    """One question of every type."""
    return [
        Question(id=1, quiz_bank_id=7, title="Default shell", type="SINGLE_CHOICE",
                 options={"A": "bash", "B": "csh"}, answer="A"),
        Question(id=2, quiz_bank_id=7, title="Text editors", type="MULTIPLE_CHOICE",
                 options={"A": "vim", "B": "emacs", "C": "ls"}, answer=["A", "B"]),
        Question(id=3, quiz_bank_id=7, title="/etc holds configuration", type="JUDGMENT",
                 answer="A", analysis="Host-specific configuration lives in /etc."),
        Question(id=4, quiz_bank_id=7, title="List files with __", type="FILL_BLANK",
                 answer=["ls", "ls -l"]),
        Question(id=5, quiz_bank_id=7, title="What does pwd print?", type="SHORT_ANSWER",
                 answer="working directory"),
    ]


@pytest.fixture
def source(sample_bank, sample_questions):
    return FakeQuestionSource(
        bank_result=ApiResult(code=200, message="ok", data=sample_bank),
        questions_result=ApiResult(code=200, message="ok", data=sample_questions),
    )


@pytest.fixture
def make_source():
    """The fake source class, for tests that build their own responses."""
    return FakeQuestionSource
