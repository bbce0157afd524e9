"""
Module: scheme

Purpose:
    Provides the Scheme dataclass - the finished layered graph of cards
    handed from the generator to the renderers. Layers run from the start
    of the hunt to the finish layer.

Key Functions:
    - Scheme.all_cards / standard_cards / finish_card: Card views
    - Scheme.get_card(code): Lookup by code
    - Scheme.validate(): Check every structural invariant
    - Scheme.to_dict() / Scheme.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .cards

Used By:
    - builder.scheme.generator: Produces Scheme
    - builder.output: Rendering
    - core.utils.serialization: JSON manifest
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import LINK_COUNT, Card, CardKind, FinishCard, StandardCard, card_from_dict

Layer = Tuple[Card, ...]


@dataclass(frozen=True)
class Scheme:
    """
    Layered graph of cards (immutable).

    Attributes:
        layers: Ordered layers, first = start of the hunt, last = finish
        layer_size: Configured cards per full layer
        seed: Random seed the scheme was generated with

    Invariants (see validate()):
        - Codes unique across the scheme
        - Exactly one FinishCard, alone in the final layer
        - Standard links: [0] in the next layer, [1] and [2] in the same layer

    Example:
        >>> scheme = generate_scheme(5, ten_records, "31 July")
        >>> scheme.layer_sizes
        (5, 5, 1)
    """

    layers: Tuple[Layer, ...]
    layer_size: int
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Freeze nested sequences on construction."""
        object.__setattr__(self, "layers", tuple(tuple(layer) for layer in self.layers))
        if not self.layers:
            raise ValueError("scheme must contain at least the finish layer")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def all_cards(self) -> Tuple[Card, ...]:
        """Every card in layer order."""
        return tuple(card for layer in self.layers for card in layer)

    @cached_property
    def standard_cards(self) -> Tuple[StandardCard, ...]:
        return tuple(c for c in self.all_cards if c.kind is CardKind.STANDARD)

    @property
    def finish_card(self) -> FinishCard:
        return self.layers[-1][0]

    @property
    def card_count(self) -> int:
        return len(self.all_cards)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(c.code for c in self.all_cards)

    @property
    def layer_sizes(self) -> Tuple[int, ...]:
        return tuple(len(layer) for layer in self.layers)

    @cached_property
    def _layer_by_code(self) -> Dict[str, int]:
        return {card.code: i for i, layer in enumerate(self.layers) for card in layer}

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def get_card(self, code: str) -> Optional[Card]:
        index = self._layer_by_code.get(code)
        if index is None:
            return None
        return next(c for c in self.layers[index] if c.code == code)

    def layer_index_of(self, code: str) -> Optional[int]:
        return self._layer_by_code.get(code)

    def validate(self) -> None:
        """
        Check every structural invariant of the scheme.

        Raises:
            ValueError: Describing the first violated invariant
        """
        codes = self.codes
        if len(set(codes)) != len(codes):
            raise ValueError("card codes are not unique")

        final = self.layers[-1]
        if len(final) != 1 or final[0].kind is not CardKind.FINISH:
            raise ValueError("final layer must hold exactly one finish card")

        for i, layer in enumerate(self.layers[:-1]):
            same_layer = {c.code for c in layer}
            next_layer = {c.code for c in self.layers[i + 1]}
            for card in layer:
                if card.kind is not CardKind.STANDARD:
                    raise ValueError(f"layer {i} holds a non-standard card {card.code}")
                links = card.outgoing_links
                if len(links) != LINK_COUNT:
                    raise ValueError(f"card {card.code} is not wired")
                if links[0] not in next_layer:
                    raise ValueError(f"card {card.code} correct link {links[0]} is not in layer {i + 1}")
                for decoy in links[1:]:
                    if decoy not in same_layer or decoy == card.code:
                        raise ValueError(f"card {card.code} decoy link {decoy} is not a sibling")

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "layer_size": self.layer_size,
            "seed": self.seed,
            "layers": [[card.to_dict() for card in layer] for layer in self.layers],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Scheme:
        layers: List[Sequence[Card]] = [
            [card_from_dict(card) for card in layer] for layer in data["layers"]
        ]
        return cls(layers=tuple(layers), layer_size=data["layer_size"], seed=data.get("seed"))
