"""
Labyrinth Builder Core Package

Shared data models and serialization utilities. Nothing in this package
performs randomness or rendering; it only describes and stores schemes.
"""

from .models import QuestionRecord, StandardCard, FinishCard, Card, CardKind, Scheme

__all__ = [
    "QuestionRecord",
    "StandardCard",
    "FinishCard",
    "Card",
    "CardKind",
    "Scheme",
]
