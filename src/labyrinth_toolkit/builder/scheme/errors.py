"""
Module: builder.scheme.errors

Purpose:
    Exception hierarchy for scheme generation. Every error is terminal for
    the generate call that raised it; no partial scheme is returned.

Key Classes:
    - SchemeError: Base class
    - InvalidConfiguration: Layer size or inputs rejected before allocation
    - DegenerateLayer: A non-final layer is too small to wire
    - CapacityExhausted: All two-letter codes have been issued
"""

from __future__ import annotations


class SchemeError(Exception):
    """Error during scheme generation."""
    pass


class InvalidConfiguration(SchemeError, ValueError):
    """Configuration rejected before any code is allocated."""
    pass


class DegenerateLayer(SchemeError):
    """A non-final layer has fewer cards than wiring needs."""

    def __init__(self, layer_index: int, layer_size: int, minimum: int):
        super().__init__(
            f"Layer {layer_index} has {layer_size} card(s); every layer before the "
            f"finish needs at least {minimum} to route wrong answers to two siblings"
        )
        self.layer_index = layer_index
        self.layer_size = layer_size
        self.minimum = minimum


class CapacityExhausted(SchemeError):
    """No unused card code is left."""

    def __init__(self, capacity: int):
        super().__init__(f"All {capacity} card codes have been issued")
        self.capacity = capacity
