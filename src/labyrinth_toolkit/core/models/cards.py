"""
Module: cards

Purpose:
    Card variants placed in the hunt. A card is either a StandardCard
    (question with three answer routes) or the FinishCard that ends the
    hunt. Both are frozen; wiring produces new StandardCard instances.

Key Classes:
    - CardKind: Tag discriminating the two variants
    - StandardCard: Question card with outgoing links
    - FinishCard: Terminal card with a message
    - Card: Union of both variants

Dependencies:
    - dataclasses (std)
    - .records.QuestionRecord

Used By:
    - builder.scheme: Layering and wiring
    - builder.output: Rendering
    - core.models.scheme: Scheme container
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .records import QuestionRecord

CODE_LENGTH = 2
LINK_COUNT = 3
CORRECT_LINK = 0

DEFAULT_FINISH_MESSAGE = (
    "You have reached the finish. Congratulations! Return to the base and "
    "report your arrival to an organiser so your time can be recorded."
)

_CODE_RE = re.compile(r"^[A-Z]{2}$")


def is_valid_code(code: str) -> bool:
    """Check a card code is two uppercase ASCII letters."""
    return bool(_CODE_RE.match(code or ""))


class CardKind(str, Enum):
    """Type of card."""
    STANDARD = "standard"  # Question card with three answer routes
    FINISH = "finish"      # Terminal card, no routes

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class StandardCard:
    """
    Question card (immutable).

    Attributes:
        code: Two-letter code printed on the card
        record: Question and answers shown on the card
        outgoing_links: Destination codes; empty until wired, then exactly
            three. Index 0 is the correct-answer destination, 1 and 2 are
            the wrong-answer destinations.
        deadline_text: Display-only text for the removal notice

    Example:
        >>> card = StandardCard("AB", record)
        >>> card.is_wired
        False
        >>> card.with_links(("CD", "EF", "GH")).correct_link
        'CD'
    """

    code: str
    record: QuestionRecord
    outgoing_links: Tuple[str, ...] = ()
    deadline_text: str = ""

    def __post_init__(self) -> None:
        """Validate card on construction."""
        if not is_valid_code(self.code):
            raise ValueError(f"card code must be two uppercase letters: {self.code!r}")
        if self.outgoing_links:
            if len(self.outgoing_links) != LINK_COUNT:
                raise ValueError(
                    f"card {self.code} must have {LINK_COUNT} links: {self.outgoing_links}"
                )
            if len(set(self.outgoing_links)) != LINK_COUNT:
                raise ValueError(f"card {self.code} has duplicate links: {self.outgoing_links}")
            if self.code in self.outgoing_links:
                raise ValueError(f"card {self.code} links to itself")

    @property
    def kind(self) -> CardKind:
        return CardKind.STANDARD

    @property
    def is_wired(self) -> bool:
        return len(self.outgoing_links) == LINK_COUNT

    @property
    def correct_link(self) -> Optional[str]:
        """Code of the next-layer card, or None before wiring."""
        return self.outgoing_links[CORRECT_LINK] if self.is_wired else None

    @property
    def decoy_links(self) -> Tuple[str, ...]:
        """Codes of the same-layer cards the wrong answers lead to."""
        return self.outgoing_links[CORRECT_LINK + 1:]

    def with_links(self, links: Tuple[str, ...]) -> StandardCard:
        """Return a wired copy of this card."""
        return replace(self, outgoing_links=tuple(links))

    def answer_routes(self) -> Tuple[Tuple[str, str], ...]:
        """
        Pair each destination code with the answer that leads there.

        Returns:
            ((code, answer), ...) with the correct answer first

        Raises:
            ValueError: If the card is not wired yet
        """
        if not self.is_wired:
            raise ValueError(f"card {self.code} is not wired")
        return tuple(zip(self.outgoing_links, self.record.answers))

    def to_dict(self) -> dict:
        return {
            "kind": str(self.kind),
            "code": self.code,
            "record": self.record.to_dict(),
            "outgoing_links": list(self.outgoing_links),
            "deadline_text": self.deadline_text,
        }


@dataclass(frozen=True, slots=True)
class FinishCard:
    """Terminal card of the hunt (immutable)."""

    code: str
    message: str = DEFAULT_FINISH_MESSAGE

    def __post_init__(self) -> None:
        if not is_valid_code(self.code):
            raise ValueError(f"card code must be two uppercase letters: {self.code!r}")

    @property
    def kind(self) -> CardKind:
        return CardKind.FINISH

    @property
    def outgoing_links(self) -> Tuple[str, ...]:
        return ()

    def to_dict(self) -> dict:
        return {
            "kind": str(self.kind),
            "code": self.code,
            "message": self.message,
        }


Card = Union[StandardCard, FinishCard]


def card_from_dict(data: dict) -> Card:
    """
    Deserialize a card of either kind.

    Raises:
        ValueError: If the kind tag is unknown
    """
    kind = CardKind(data["kind"])
    if kind is CardKind.FINISH:
        return FinishCard(code=data["code"], message=data.get("message", DEFAULT_FINISH_MESSAGE))
    return StandardCard(
        code=data["code"],
        record=QuestionRecord.from_dict(data["record"]),
        outgoing_links=tuple(data.get("outgoing_links", ())),
        deadline_text=data.get("deadline_text", ""),
    )
