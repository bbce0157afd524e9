"""
Module: builder.scheme.context

Purpose:
    Per-generation state: the random source and the code allocator.
    A fresh context is built for every generate call so no codes or rng
    state carry over between schemes.
"""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass, field
from typing import Optional

from .codes import CodeAllocator


def draw_seed() -> int:
    """Fresh 32-bit seed for runs where the caller gave none."""
    return secrets.randbits(32)


@dataclass
class GenerationContext:
    """
    Random source and code allocator for one scheme.

    Attributes:
        seed: Seed the rng was created from (drawn if None was given)
        rng: Random source used by layering and wiring
        codes: Code allocator sharing rng

    Example:
        >>> ctx = GenerationContext(seed=7)
        >>> ctx.codes.next() == GenerationContext(seed=7).codes.next()
        True
    """

    seed: Optional[int] = None
    rng: random.Random = field(init=False)
    codes: CodeAllocator = field(init=False)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = draw_seed()
        self.rng = random.Random(self.seed)
        self.codes = CodeAllocator(self.rng)
