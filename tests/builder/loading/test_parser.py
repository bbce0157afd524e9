"""
Tests for the question file parser.
"""

import pytest

from labyrinth_toolkit.builder.loading import (
    ParseError,
    parse_questions_file,
    parse_questions_text,
)


SAMPLE = """\
# Geography round
What is the capital of France?
Paris
Lyon
Marseille

How many continents are there?
7
5
9
"""


class TestParseQuestionsText:

    def test_parse_when_valid_then_records_in_order(self):
        records = parse_questions_text(SAMPLE)

        assert len(records) == 2
        assert records[0].question == "What is the capital of France?"
        assert records[0].correct_answer == "Paris"
        assert records[0].distractors == ("Lyon", "Marseille")
        assert records[1].correct_answer == "7"

    def test_parse_when_no_blank_separators_then_still_groups_by_four(self):
        text = "Q1?\na\nb\nc\nQ2?\nd\ne\nf\n"

        records = parse_questions_text(text)

        assert [r.question for r in records] == ["Q1?", "Q2?"]

    def test_parse_when_whitespace_then_stripped(self):
        records = parse_questions_text("  Q?  \n\t a \nb  \n c\n")

        assert records[0].question == "Q?"
        assert records[0].answers == ("a", "b", "c")

    def test_parse_when_bom_then_ignored(self):
        records = parse_questions_text("\ufeffQ?\na\nb\nc\n")

        assert records[0].question == "Q?"

    def test_parse_when_empty_then_no_records(self):
        assert parse_questions_text("") == []
        assert parse_questions_text("\n\n# only comments\n") == []

    def test_parse_when_incomplete_block_then_raises_with_line(self):
        text = "Q1?\na\nb\nc\n\nQ2?\nd\n"

        with pytest.raises(ParseError, match="has 1 answer") as exc_info:
            parse_questions_text(text)

        assert exc_info.value.line == 6
        assert "line 6" in str(exc_info.value)

    def test_parse_error_when_path_given_then_in_message(self, tmp_path):
        path = tmp_path / "q.txt"

        with pytest.raises(ParseError) as exc_info:
            parse_questions_text("Q?\na\n", path=path)

        assert str(exc_info.value).startswith(f"{path}:1")
        assert exc_info.value.path == path


class TestParseQuestionsFile:

    def test_parse_file_when_exists_then_reads_records(self, question_file):
        path = question_file(7)

        records = parse_questions_file(path)

        assert len(records) == 7
        assert records[3].correct_answer == "right 3"

    def test_parse_file_when_missing_then_raises(self, tmp_path):
        with pytest.raises(ParseError, match="not found"):
            parse_questions_file(tmp_path / "missing.txt")

    def test_parse_file_when_not_utf8_then_raises(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes(b"Caf\xe9?\na\nb\nc\n")

        with pytest.raises(ParseError, match="cannot read"):
            parse_questions_file(path)
