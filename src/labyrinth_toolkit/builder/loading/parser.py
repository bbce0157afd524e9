"""
Module: builder.loading.parser

Purpose:
    Parse the plain-text question file into validated QuestionRecords.

File format:
    Blank lines are ignored. Lines starting with '#' are comments.
    Each question is four consecutive content lines:

        What colour is the sky?
        Blue            <- correct answer
        Green           <- wrong answer
        Red             <- wrong answer

Key Functions:
    - parse_questions_text(): Parse file contents
    - parse_questions_file(): Read and parse a file

Key Classes:
    - ParseError: Exception for malformed input

Used By:
    - builder.controller: Build pipeline
    - labyrinth_toolkit.cli: `scheme` command
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from labyrinth_toolkit.core.models import QuestionRecord

logger = logging.getLogger(__name__)

LINES_PER_QUESTION = 4
COMMENT_PREFIX = "#"


class ParseError(Exception):
    """Error parsing the question file."""

    def __init__(self, message: str, line: Optional[int] = None, path: Optional[Path] = None):
        where = ""
        if path is not None:
            where = f"{path}"
        if line is not None:
            where = f"{where}:{line}" if where else f"line {line}"
        super().__init__(f"{where}: {message}" if where else message)
        self.line = line
        self.path = path


def _content_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, stripped_line) for non-blank, non-comment lines."""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield number, line


def parse_questions_text(text: str, *, path: Optional[Path] = None) -> List[QuestionRecord]:
    """
    Parse question file contents.

    Args:
        text: File contents
        path: Source path, used in error messages only

    Returns:
        Records in file order

    Raises:
        ParseError: If the last question has fewer than three answers

    Example:
        >>> parse_questions_text("2 + 2?\\n4\\n3\\n5\\n")[0].correct_answer
        '4'
    """
    records: List[QuestionRecord] = []
    block: List[Tuple[int, str]] = []

    for number, line in _content_lines(text.lstrip("\ufeff")):
        block.append((number, line))
        if len(block) < LINES_PER_QUESTION:
            continue

        (start, question), (_, correct), (_, wrong_a), (_, wrong_b) = block
        try:
            records.append(QuestionRecord(question, correct, (wrong_a, wrong_b)))
        except ValueError as e:
            raise ParseError(str(e), line=start, path=path) from e
        block = []

    if block:
        start, question = block[0]
        raise ParseError(
            f"question {question!r} has {len(block) - 1} answer(s), expected "
            f"{LINES_PER_QUESTION - 1}",
            line=start,
            path=path,
        )

    logger.debug(f"Parsed {len(records)} questions")
    return records


def parse_questions_file(path: Path) -> List[QuestionRecord]:
    """
    Read and parse a UTF-8 question file.

    Raises:
        ParseError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ParseError("question file not found", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read question file: {e}", path=path) from e

    records = parse_questions_text(text, path=path)
    logger.info(f"Loaded {len(records)} questions from {path}")
    return records
