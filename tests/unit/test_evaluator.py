"""
Unit tests for answer evaluation.

Run: pytest tests/unit/test_evaluator.py -v
"""

import pytest

from quizexam.exam.evaluator import COMPARATORS, evaluate
from quizexam.models import CollectionKey, QuestionType, ScalarKey


class TestRegistry:
    """Test the comparator registry."""

    def test_every_type_has_a_comparator(self):
        assert set(COMPARATORS) == set(QuestionType)

    def test_unknown_type_is_never_correct(self):
        assert evaluate("A", "A", "ESSAY") is False

    def test_missing_type_is_never_correct(self):
        assert evaluate("A", "A", None) is False

    def test_type_tag_is_case_insensitive(self):
        assert evaluate("A", "A", "single_choice") is True

    def test_accepts_enum_type(self):
        assert evaluate("A", "A", QuestionType.SINGLE_CHOICE) is True


class TestEmptyInputs:
    """An unanswered question or a missing key is never correct."""

    @pytest.mark.parametrize("user_answer", ["", None])
    def test_empty_user_answer(self, user_answer):
        assert evaluate(user_answer, "A", "SINGLE_CHOICE") is False

    @pytest.mark.parametrize("key", ["", None, []])
    def test_empty_key(self, key):
        assert evaluate("A", key, "SINGLE_CHOICE") is False

    def test_empty_key_for_text_types(self):
        assert evaluate("", "", "FILL_BLANK") is False


class TestSingleChoice:

    def test_match(self):
        assert evaluate("A", "A", "SINGLE_CHOICE") is True

    def test_mismatch(self):
        assert evaluate("B", "A", "SINGLE_CHOICE") is False

    def test_collection_key_uses_first_element(self):
        assert evaluate("A", ["A", "B"], "SINGLE_CHOICE") is True
        assert evaluate("B", ["A", "B"], "SINGLE_CHOICE") is False

    def test_case_sensitive(self):
        assert evaluate("a", "A", "SINGLE_CHOICE") is False


class TestJudgment:

    def test_a_label_means_true(self):
        assert evaluate("T", "A", "JUDGMENT") is True

    def test_b_label_means_false(self):
        assert evaluate("F", "B", "JUDGMENT") is True

    def test_true_against_false_label(self):
        assert evaluate("T", "B", "JUDGMENT") is False

    def test_plain_t_f_keys(self):
        assert evaluate("T", "T", "JUDGMENT") is True
        assert evaluate("F", "F", "JUDGMENT") is True
        assert evaluate("F", "T", "JUDGMENT") is False

    def test_collection_key_uses_first_element(self):
        assert evaluate("T", ["A"], "JUDGMENT") is True

    @pytest.mark.parametrize("user_answer", ["A", "B", "true", "t", "X"])
    def test_only_t_and_f_can_be_correct(self, user_answer):
        assert evaluate(user_answer, "A", "JUDGMENT") is False
        assert evaluate(user_answer, "T", "JUDGMENT") is False


class TestMultipleChoice:

    def test_order_independent(self):
        assert evaluate("B,A", ["A", "B"], "MULTIPLE_CHOICE") is True

    def test_length_mismatch(self):
        assert evaluate("C", ["A", "B"], "MULTIPLE_CHOICE") is False

    def test_subset_is_wrong(self):
        assert evaluate("A", ["A", "B"], "MULTIPLE_CHOICE") is False

    def test_superset_is_wrong(self):
        assert evaluate("A,B,C", ["A", "B"], "MULTIPLE_CHOICE") is False

    def test_empty_tokens_dropped(self):
        assert evaluate("A,,B,", ["B", "A"], "MULTIPLE_CHOICE") is True

    def test_scalar_key_is_one_element_collection(self):
        assert evaluate("C", "C", "MULTIPLE_CHOICE") is True
        assert evaluate("C,D", "C", "MULTIPLE_CHOICE") is False


class TestTextAnswers:

    def test_any_accepted_phrasing(self):
        assert evaluate("Paris", ["Paris", "paris"], "FILL_BLANK") is True

    def test_case_sensitive_without_fuzzy_match(self):
        assert evaluate("paris", ["Paris"], "FILL_BLANK") is False

    def test_scalar_key_exact(self):
        assert evaluate("working directory", "working directory", "SHORT_ANSWER") is True
        assert evaluate("working dir", "working directory", "SHORT_ANSWER") is False

    def test_short_answer_collection(self):
        assert evaluate("cwd", ["working directory", "cwd"], "SHORT_ANSWER") is True


class TestNormalizedKeys:
    """The evaluator also takes already-normalized keys."""

    def test_scalar_key(self):
        assert evaluate("A", ScalarKey("A"), "SINGLE_CHOICE") is True

    def test_collection_key(self):
        assert evaluate("C,A", CollectionKey(("A", "C")), "MULTIPLE_CHOICE") is True
