"""
Module: builder.scheme.codes

Purpose:
    Allocate short unique card codes for one scheme.

Key Classes:
    - CodeAllocator: Issues two-letter codes without repeats

Algorithm:
    Draw two independent uniform letters. If that code was already issued,
    draw uniformly from the codes still free instead of retrying, so every
    call finishes in bounded time even when the code space is nearly full.

Used By:
    - builder.scheme.context: One allocator per generation
"""

from __future__ import annotations

import logging
import random
import string
from itertools import product
from typing import FrozenSet, Iterator, Set

from .errors import CapacityExhausted

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
CODE_CAPACITY = len(ALPHABET) ** 2  # 676


class CodeAllocator:
    """
    Issues two-letter codes, each at most once.

    Args:
        rng: Random source; share the generation's rng for reproducibility

    Example:
        >>> allocator = CodeAllocator(random.Random(1))
        >>> code = allocator.next()
        >>> len(code), code in allocator.issued
        (2, True)
    """

    def __init__(self, rng: random.Random):
        self._rng = rng
        self._issued: Set[str] = set()

    @property
    def capacity(self) -> int:
        return CODE_CAPACITY

    @property
    def issued(self) -> FrozenSet[str]:
        return frozenset(self._issued)

    @property
    def remaining(self) -> int:
        return CODE_CAPACITY - len(self._issued)

    def next(self) -> str:
        """
        Issue a new code.

        Returns:
            Two uppercase letters never returned before by this allocator

        Raises:
            CapacityExhausted: If all 676 codes were issued
        """
        if self.remaining == 0:
            raise CapacityExhausted(CODE_CAPACITY)

        code = self._rng.choice(ALPHABET) + self._rng.choice(ALPHABET)
        if code in self._issued:
            free = [a + b for a, b in product(ALPHABET, repeat=2) if a + b not in self._issued]
            code = self._rng.choice(free)
            logger.debug(f"Code collision, drew {code} from {len(free)} free codes")

        self._issued.add(code)
        return code

    def __next__(self) -> str:
        return self.next()

    def __iter__(self) -> Iterator[str]:
        return self

    def __len__(self) -> int:
        return len(self._issued)
