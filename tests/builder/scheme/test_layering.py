"""
Unit tests for assign_layers.
"""

import pytest

from labyrinth_toolkit.builder.scheme import GenerationContext, assign_layers
from labyrinth_toolkit.core.models import CardKind, DEFAULT_FINISH_MESSAGE


class TestAssignLayers:

    @pytest.mark.parametrize("count, size, expected", [
        (10, 4, [2, 4, 4, 1]),
        (9, 3, [3, 3, 3, 1]),
        (7, 5, [2, 5, 1]),
        (3, 3, [3, 1]),
        (2, 5, [2, 1]),
        (41, 20, [1, 20, 20, 1]),
    ])
    def test_assign_when_sizes_then_partial_layer_first(self, records_factory, count, size, expected):
        layers = assign_layers(records_factory(count), size, GenerationContext(seed=0))

        assert [len(layer) for layer in layers] == expected

    def test_assign_when_empty_then_only_finish_layer(self):
        layers = assign_layers([], 5, GenerationContext(seed=0))

        assert len(layers) == 1
        assert layers[0][0].kind is CardKind.FINISH

    def test_assign_when_reversed_then_earliest_records_before_finish(self, ten_records):
        layers = assign_layers(ten_records, 4, GenerationContext(seed=0))

        assert [c.record for c in layers[-2]] == ten_records[0:4]
        assert [c.record for c in layers[1]] == ten_records[4:8]
        assert [c.record for c in layers[0]] == ten_records[8:10]

    def test_assign_when_called_then_cards_unwired_with_deadline(self, ten_records):
        layers = assign_layers(ten_records, 4, GenerationContext(seed=0), deadline_text="1 Aug")

        for layer in layers[:-1]:
            for card in layer:
                assert card.kind is CardKind.STANDARD
                assert card.is_wired is False
                assert card.deadline_text == "1 Aug"

    def test_assign_when_called_then_codes_unique(self, records_factory):
        layers = assign_layers(records_factory(200), 20, GenerationContext(seed=4))

        codes = [card.code for layer in layers for card in layer]
        assert len(codes) == len(set(codes)) == 201

    def test_assign_when_finish_message_given_then_used(self, ten_records):
        layers = assign_layers(ten_records, 4, GenerationContext(seed=0), finish_message="Well done")

        assert layers[-1][0].message == "Well done"

    def test_assign_when_no_finish_message_then_default(self, ten_records):
        layers = assign_layers(ten_records, 4, GenerationContext(seed=0))

        assert layers[-1][0].message == DEFAULT_FINISH_MESSAGE
