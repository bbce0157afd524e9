"""
Module: builder.scheme

Purpose:
    Scheme generation: partition question records into layers, give each
    card a unique code, and wire the answer links between cards.

Key Functions:
    - generate_scheme(): Main entry point
    - assign_layers(): Records -> layers
    - wire_links(): Layers -> wired layers

Key Classes:
    - SchemeGenerator: Generator bound to a layer size
    - CodeAllocator: Unique two-letter codes
    - GenerationContext: Per-call rng and allocator

Used By:
    - builder.controller: Build pipeline
"""

from .errors import SchemeError, InvalidConfiguration, DegenerateLayer, CapacityExhausted
from .codes import CodeAllocator, CODE_CAPACITY
from .context import GenerationContext
from .layering import assign_layers
from .wiring import wire_links
from .generator import (
    generate_scheme,
    SchemeGenerator,
    validate_layer_size,
    validate_seed,
    MIN_LAYER_SIZE,
    MAX_LAYER_SIZE,
)

__all__ = [
    "SchemeError",
    "InvalidConfiguration",
    "DegenerateLayer",
    "CapacityExhausted",
    "CodeAllocator",
    "CODE_CAPACITY",
    "GenerationContext",
    "assign_layers",
    "wire_links",
    "generate_scheme",
    "SchemeGenerator",
    "validate_layer_size",
    "validate_seed",
    "MIN_LAYER_SIZE",
    "MAX_LAYER_SIZE",
]
