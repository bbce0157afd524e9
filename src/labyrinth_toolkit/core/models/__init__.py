"""
Core Models Package

Immutable, validated data models shared by the generator and the renderers.

All models in this package are frozen dataclasses. Wiring a card creates
a new StandardCard instead of mutating the old one, so a Scheme handed to
the renderers cannot change underneath them.
"""

from .records import QuestionRecord
from .cards import (
    Card,
    CardKind,
    DEFAULT_FINISH_MESSAGE,
    FinishCard,
    StandardCard,
    card_from_dict,
    is_valid_code,
)
from .scheme import Layer, Scheme

__all__ = [
    "QuestionRecord",
    "Card",
    "CardKind",
    "DEFAULT_FINISH_MESSAGE",
    "FinishCard",
    "StandardCard",
    "card_from_dict",
    "is_valid_code",
    "Layer",
    "Scheme",
]
