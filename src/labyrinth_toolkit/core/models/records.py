"""
Module: records

Purpose:
    Provides the QuestionRecord dataclass - one parsed question with its
    correct answer and two wrong answers. Records are the input of the
    scheme generator; their order decides layer membership.

Key Classes:
    - QuestionRecord: Immutable question/answer record

Dependencies:
    - dataclasses (std)

Used By:
    - builder.loading.parser: Builds records from the input file
    - core.models.cards.StandardCard: Card content
    - builder.scheme.layering: One card per record
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DISTRACTOR_COUNT = 2


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """
    Question with one correct answer and two distractors (immutable).

    Attributes:
        question: Question text printed on the card
        correct_answer: Answer that advances the player to the next layer
        distractors: Exactly two wrong answers

    Invariants:
        - No field is empty or whitespace-only
        - len(distractors) == 2

    Example:
        >>> record = QuestionRecord("2 + 2?", "4", ("3", "5"))
        >>> record.answers
        ('4', '3', '5')
    """

    question: str
    correct_answer: str
    distractors: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate record on construction."""
        # Lists are accepted at the call site but stored as a tuple
        if not isinstance(self.distractors, tuple):
            object.__setattr__(self, "distractors", tuple(self.distractors))

        if not self.question or not self.question.strip():
            raise ValueError("question must be non-empty")
        if not self.correct_answer or not self.correct_answer.strip():
            raise ValueError("correct_answer must be non-empty")
        if len(self.distractors) != DISTRACTOR_COUNT:
            raise ValueError(
                f"distractors must contain exactly {DISTRACTOR_COUNT} answers: "
                f"{len(self.distractors)}"
            )
        for i, answer in enumerate(self.distractors):
            if not answer or not answer.strip():
                raise ValueError(f"distractor {i} must be non-empty")

    @property
    def answers(self) -> Tuple[str, ...]:
        """All answers, correct one first."""
        return (self.correct_answer, *self.distractors)

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "correct_answer": self.correct_answer,
            "distractors": list(self.distractors),
        }

    @classmethod
    def from_dict(cls, data: dict) -> QuestionRecord:
        return cls(
            question=data["question"],
            correct_answer=data["correct_answer"],
            distractors=tuple(data["distractors"]),
        )
