"""
Unit tests for QuestionRecord.
"""

import pytest

from labyrinth_toolkit.core.models import QuestionRecord


class TestQuestionRecord:
    """Tests for QuestionRecord dataclass."""

    def test_init_when_valid_then_creates_record(self):
        record = QuestionRecord("2 + 2?", "4", ("3", "5"))

        assert record.question == "2 + 2?"
        assert record.correct_answer == "4"
        assert record.distractors == ("3", "5")

    def test_init_when_list_distractors_then_stored_as_tuple(self):
        record = QuestionRecord("2 + 2?", "4", ["3", "5"])

        assert record.distractors == ("3", "5")

    def test_answers_when_called_then_correct_first(self):
        record = QuestionRecord("2 + 2?", "4", ("3", "5"))

        assert record.answers == ("4", "3", "5")

    @pytest.mark.parametrize("question, correct", [("", "4"), ("   ", "4"), ("Q?", ""), ("Q?", " ")])
    def test_init_when_blank_field_then_raises_error(self, question, correct):
        with pytest.raises(ValueError, match="must be non-empty"):
            QuestionRecord(question, correct, ("3", "5"))

    def test_init_when_blank_distractor_then_raises_error(self):
        with pytest.raises(ValueError, match="distractor 1"):
            QuestionRecord("Q?", "4", ("3", ""))

    @pytest.mark.parametrize("distractors", [("3",), ("3", "5", "6"), ()])
    def test_init_when_wrong_distractor_count_then_raises_error(self, distractors):
        with pytest.raises(ValueError, match="exactly 2"):
            QuestionRecord("Q?", "4", distractors)

    def test_from_dict_when_to_dict_output_then_equal(self):
        record = QuestionRecord("Q?", "a", ("b", "c"))

        assert QuestionRecord.from_dict(record.to_dict()) == record

    def test_frozen_when_assigning_then_raises(self):
        record = QuestionRecord("Q?", "a", ("b", "c"))

        with pytest.raises(AttributeError):
            record.question = "other"
