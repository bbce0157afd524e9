"""
Unit tests for CodeAllocator.
"""

import random

import pytest

from labyrinth_toolkit.builder.scheme import CODE_CAPACITY, CapacityExhausted, CodeAllocator
from labyrinth_toolkit.core.models import is_valid_code


class TestCodeAllocator:

    def test_next_when_called_then_returns_two_uppercase_letters(self):
        allocator = CodeAllocator(random.Random(1))

        code = allocator.next()

        assert is_valid_code(code)
        assert code in allocator.issued
        assert len(allocator) == 1

    def test_next_when_full_capacity_drawn_then_all_unique(self):
        allocator = CodeAllocator(random.Random(3))

        codes = [allocator.next() for _ in range(CODE_CAPACITY)]

        assert len(set(codes)) == CODE_CAPACITY == 676
        assert allocator.remaining == 0

    def test_next_when_exhausted_then_raises(self):
        allocator = CodeAllocator(random.Random(3))
        for _ in range(CODE_CAPACITY):
            allocator.next()

        with pytest.raises(CapacityExhausted) as exc_info:
            allocator.next()
        assert exc_info.value.capacity == 676

    def test_next_when_same_seed_then_same_sequence(self):
        a = CodeAllocator(random.Random(42))
        b = CodeAllocator(random.Random(42))

        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_iter_when_used_then_yields_codes(self):
        allocator = CodeAllocator(random.Random(0))

        first_three = [code for _, code in zip(range(3), allocator)]

        assert len(set(first_three)) == 3
        assert allocator.remaining == CODE_CAPACITY - 3

    def test_allocators_when_separate_then_independent(self):
        """Issued codes are scoped to one allocator."""
        a = CodeAllocator(random.Random(9))
        b = CodeAllocator(random.Random(9))
        a.next()

        assert len(b.issued) == 0
