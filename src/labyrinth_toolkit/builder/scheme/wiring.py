"""
Module: builder.scheme.wiring

Purpose:
    Assign each StandardCard its three outgoing links once layers are
    fixed: one forward link into the next layer and two decoy links to
    siblings in its own layer.

Key Functions:
    - wire_links(): Wire every card in place in its layer list
    - check_layers(): Structural pre-check run before any card changes

Invariants:
    - links[0] is a card of layer i + 1
    - links[1], links[2] are two distinct cards of layer i, never the source
    - Nothing is modified when a check fails

Used By:
    - builder.scheme.generator: Orchestration
"""

from __future__ import annotations

import logging
from typing import List, MutableSequence

from labyrinth_toolkit.core.models import Card, CardKind

from .context import GenerationContext
from .errors import DegenerateLayer, SchemeError

logger = logging.getLogger(__name__)

DECOY_COUNT = 2
MIN_WIRED_LAYER = DECOY_COUNT + 1


def check_layers(layers: List[MutableSequence[Card]]) -> None:
    """
    Verify the layer list can be wired.

    Raises:
        SchemeError: If the last layer is not a lone finish card, or a
            finish card appears before it
        DegenerateLayer: If a non-final layer has fewer than 3 cards
    """
    if not layers:
        raise SchemeError("No layers to wire")

    final = layers[-1]
    if len(final) != 1 or final[0].kind is not CardKind.FINISH:
        raise SchemeError("Final layer must hold exactly one finish card")

    for index, layer in enumerate(layers[:-1]):
        for card in layer:
            if card.kind is CardKind.FINISH:
                raise SchemeError(f"Finish card {card.code} found in layer {index}")
        if len(layer) < MIN_WIRED_LAYER:
            raise DegenerateLayer(index, len(layer), MIN_WIRED_LAYER)


def wire_links(layers: List[MutableSequence[Card]], context: GenerationContext) -> None:
    """
    Wire every StandardCard, replacing it in its layer with a wired copy.

    The finish layer is never a source; every other layer links forward
    into the one after it.

    Args:
        layers: Layers from assign_layers(), modified in place
        context: Generation context supplying the random source

    Raises:
        DegenerateLayer: If a non-final layer has fewer than 3 cards
        SchemeError: If the finish card is misplaced
    """
    check_layers(layers)
    rng = context.rng

    for index in range(len(layers) - 1):
        layer = layers[index]
        targets = layers[index + 1]

        for position, card in enumerate(layer):
            forward = rng.choice(targets).code
            siblings = [i for i in range(len(layer)) if i != position]
            decoys = [layer[i].code for i in rng.sample(siblings, DECOY_COUNT)]
            layer[position] = card.with_links((forward, *decoys))

        logger.debug(f"Wired layer {index} ({len(layer)} cards) into layer {index + 1}")
