"""
Module: builder.loading

Purpose:
    Read question files into QuestionRecords.

Key Functions:
    - parse_questions_file(): Read and parse a question file
    - parse_questions_text(): Parse file contents

Used By:
    - builder.controller: Main build controller
"""

from .parser import parse_questions_file, parse_questions_text, ParseError

__all__ = [
    "parse_questions_file",
    "parse_questions_text",
    "ParseError",
]
