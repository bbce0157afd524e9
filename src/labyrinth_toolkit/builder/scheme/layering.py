"""
Module: builder.scheme.layering

Purpose:
    Group question records into layers and create one card per record.

Key Functions:
    - assign_layers(): Records -> layers of StandardCards plus finish layer

Algorithm:
    1. Consume records in input order, layer_size at a time
    2. Leftover records (fewer than layer_size) form one partial layer
    3. Reverse the layers so the partial one opens the hunt and the
       earliest records sit right before the finish
    4. Append a layer holding a single FinishCard

Used By:
    - builder.scheme.generator: Orchestration
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from labyrinth_toolkit.core.models import (
    DEFAULT_FINISH_MESSAGE,
    Card,
    FinishCard,
    QuestionRecord,
    StandardCard,
)

from .context import GenerationContext

logger = logging.getLogger(__name__)


def assign_layers(
    records: Sequence[QuestionRecord],
    layer_size: int,
    context: GenerationContext,
    *,
    deadline_text: str = "",
    finish_message: Optional[str] = None,
) -> List[List[Card]]:
    """
    Partition records into layers of unwired cards.

    Args:
        records: Question records in input order
        layer_size: Cards per full layer (validated by the caller)
        context: Generation context supplying codes
        deadline_text: Display text copied onto every StandardCard
        finish_message: Finish card text (default message if None)

    Returns:
        Mutable list of layers, start of hunt first, finish layer last

    Example:
        >>> layers = assign_layers(ten_records, 4, GenerationContext(seed=1))
        >>> [len(layer) for layer in layers]
        [2, 4, 4, 1]
    """
    walked: List[List[Card]] = []

    for start in range(0, len(records), layer_size):
        group = records[start:start + layer_size]
        walked.append([
            StandardCard(code=context.codes.next(), record=record, deadline_text=deadline_text)
            for record in group
        ])

    if walked and len(walked[-1]) < layer_size:
        logger.debug(f"Partial layer of {len(walked[-1])} card(s) moves to the start")

    layers = list(reversed(walked))
    finish = FinishCard(
        code=context.codes.next(),
        message=finish_message if finish_message is not None else DEFAULT_FINISH_MESSAGE,
    )
    layers.append([finish])

    logger.debug(f"Assigned {len(records)} records to {len(layers)} layers: {[len(l) for l in layers]}")
    return layers
