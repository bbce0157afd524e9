"""
Module: builder.output.answers

Purpose:
    Decide the printed order of a card's answers and the removal notice
    text shared by the PDF and LaTeX renderers.

Key Functions:
    - printed_routes(): (code, answer) pairs in print order
    - removal_notice(): Footer text for a StandardCard
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from labyrinth_toolkit.core.models import StandardCard

NOTICE_TEXT = "This card is part of a treasure hunt. Please do not remove it"


def printed_routes(
    card: StandardCard,
    *,
    shuffle: bool = True,
    seed: Optional[int] = None,
) -> Tuple[Tuple[str, str], ...]:
    """
    Answer routes of a card in the order they are printed.

    With shuffle on, the correct answer must not always be printed first.
    The order is derived from the scheme seed and the card code, so
    re-rendering the same scheme prints every card identically.

    Args:
        card: Wired StandardCard
        shuffle: Whether to shuffle the answers
        seed: Scheme seed

    Returns:
        ((code, answer), ...) in print order
    """
    routes = list(card.answer_routes())
    if shuffle:
        random.Random(f"{seed}:{card.code}").shuffle(routes)
    return tuple(routes)


def removal_notice(card: StandardCard) -> str:
    deadline = card.deadline_text.strip()
    if deadline:
        return f"{NOTICE_TEXT}; it will be taken down by {deadline} at the latest."
    return f"{NOTICE_TEXT}."
