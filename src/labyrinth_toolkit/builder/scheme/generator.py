"""
Module: builder.scheme.generator

Purpose:
    Orchestrate scheme generation: validate the layer size, assign
    records to layers, wire the links and freeze the result.
    Validate → Context → Assign → Wire → Scheme

Key Functions:
    - generate_scheme(): Main entry point

Key Classes:
    - SchemeGenerator: Reusable generator bound to one layer size

Dependencies:
    - builder.scheme.layering: assign_layers
    - builder.scheme.wiring: wire_links
    - core.models: QuestionRecord, Scheme

Used By:
    - builder.controller: Build pipeline
    - labyrinth_toolkit.cli: `scheme` command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from labyrinth_toolkit.core.models import QuestionRecord, Scheme

from .context import GenerationContext
from .errors import InvalidConfiguration
from .layering import assign_layers
from .wiring import wire_links

logger = logging.getLogger(__name__)

MIN_LAYER_SIZE = 3
MAX_LAYER_SIZE = 20


def validate_layer_size(layer_size: object) -> int:
    """
    Check layer size is an integer in [3, 20].

    Raises:
        InvalidConfiguration: If the value is not an int or out of range
    """
    if isinstance(layer_size, bool) or not isinstance(layer_size, int):
        raise InvalidConfiguration(f"layer_size must be an integer: {layer_size!r}")
    if not (MIN_LAYER_SIZE <= layer_size <= MAX_LAYER_SIZE):
        raise InvalidConfiguration(
            f"layer_size must be between {MIN_LAYER_SIZE} and {MAX_LAYER_SIZE}: {layer_size}"
        )
    return layer_size


def validate_seed(seed: object) -> Optional[int]:
    """
    Check seed is None or a non-negative integer.

    Raises:
        InvalidConfiguration: If the seed is not an int or is negative
    """
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidConfiguration(f"seed must be an integer: {seed!r}")
    if seed < 0:
        raise InvalidConfiguration(f"seed must be non-negative: {seed}")
    return seed


def generate_scheme(
    layer_size: int,
    records: Sequence[QuestionRecord],
    deadline_text: str = "",
    *,
    seed: Optional[int] = None,
    finish_message: Optional[str] = None,
) -> Scheme:
    """
    Generate a fully wired scheme.

    Args:
        layer_size: Cards per full layer, 3 to 20
        records: Question records in input order
        deadline_text: Display-only text copied onto each StandardCard
        seed: Random seed; a fresh one is drawn (and stored on the scheme)
            when None
        finish_message: Optional override for the finish card text

    Returns:
        Frozen Scheme, start layer first, finish layer last

    Raises:
        InvalidConfiguration: Bad layer size, seed or records, before allocation
        DegenerateLayer: A non-final layer has fewer than 3 cards
        CapacityExhausted: More cards than two-letter codes

    Invariants:
        - len(result.all_cards) == len(records) + 1
        - Same records, layer size and seed give an identical scheme

    Example:
        >>> scheme = generate_scheme(3, nine_records, "1 August", seed=42)
        >>> scheme.layer_sizes
        (3, 3, 3, 1)
    """
    validate_layer_size(layer_size)
    validate_seed(seed)
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise InvalidConfiguration(f"records must be a sequence: {type(records).__name__}")
    for i, record in enumerate(records):
        if not isinstance(record, QuestionRecord):
            raise InvalidConfiguration(f"record {i} is not a QuestionRecord: {type(record).__name__}")

    context = GenerationContext(seed=seed)
    logger.info(
        f"Generating scheme for {len(records)} records, layer size {layer_size}, seed {context.seed}"
    )

    layers = assign_layers(
        records,
        layer_size,
        context,
        deadline_text=deadline_text,
        finish_message=finish_message,
    )
    wire_links(layers, context)

    scheme = Scheme(layers=tuple(layers), layer_size=layer_size, seed=context.seed)
    logger.info(f"Generated {scheme.card_count} cards in {len(scheme.layers)} layers {list(scheme.layer_sizes)}")
    return scheme


@dataclass(frozen=True)
class SchemeGenerator:
    """
    Scheme generator bound to one layer size.

    Attributes:
        layer_size: Cards per full layer
        seed: Seed for every generate() call (None = fresh per call)
        finish_message: Optional finish card text

    Example:
        >>> generator = SchemeGenerator(layer_size=5, seed=1)
        >>> generator.generate(ten_records, "31 July").layer_sizes
        (5, 5, 1)
    """

    layer_size: int
    seed: Optional[int] = None
    finish_message: Optional[str] = None

    def validate(self) -> None:
        validate_layer_size(self.layer_size)

    def generate(self, records: Sequence[QuestionRecord], deadline_text: str = "") -> Scheme:
        return generate_scheme(
            self.layer_size,
            records,
            deadline_text,
            seed=self.seed,
            finish_message=self.finish_message,
        )
