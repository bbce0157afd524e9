"""
Unit tests for wire_links.
"""

import pytest

from labyrinth_toolkit.builder.scheme import (
    DegenerateLayer,
    GenerationContext,
    SchemeError,
    assign_layers,
    wire_links,
)
from labyrinth_toolkit.core.models import FinishCard, QuestionRecord, StandardCard


def _layers(records_factory, count, size, seed=0):
    ctx = GenerationContext(seed=seed)
    return assign_layers(records_factory(count), size, ctx), ctx


class TestWireLinks:

    def test_wire_when_valid_then_every_card_wired(self, records_factory):
        layers, ctx = _layers(records_factory, 12, 4)

        wire_links(layers, ctx)

        for layer in layers[:-1]:
            assert all(card.is_wired for card in layer)

    def test_wire_when_valid_then_forward_link_in_next_layer(self, records_factory):
        layers, ctx = _layers(records_factory, 15, 5)

        wire_links(layers, ctx)

        for i, layer in enumerate(layers[:-1]):
            next_codes = {c.code for c in layers[i + 1]}
            for card in layer:
                assert card.outgoing_links[0] in next_codes

    def test_wire_when_valid_then_decoys_are_distinct_siblings(self, records_factory):
        layers, ctx = _layers(records_factory, 15, 5)

        wire_links(layers, ctx)

        for layer in layers[:-1]:
            codes = {c.code for c in layer}
            for card in layer:
                decoys = card.outgoing_links[1:]
                assert len(set(decoys)) == 2
                assert card.code not in decoys
                assert set(decoys) <= codes

    def test_wire_when_three_card_layer_then_decoys_are_other_two(self, records_factory):
        layers, ctx = _layers(records_factory, 3, 3)

        wire_links(layers, ctx)

        layer = layers[0]
        for card in layer:
            others = {c.code for c in layer} - {card.code}
            assert set(card.outgoing_links[1:]) == others

    def test_wire_when_last_standard_layer_then_links_to_finish(self, records_factory):
        layers, ctx = _layers(records_factory, 8, 4)

        wire_links(layers, ctx)

        finish_code = layers[-1][0].code
        assert all(card.outgoing_links[0] == finish_code for card in layers[-2])

    def test_wire_when_finish_only_then_nothing_to_do(self):
        ctx = GenerationContext(seed=0)
        layers = [[FinishCard("ZZ")]]

        wire_links(layers, ctx)

        assert layers == [[FinishCard("ZZ")]]

    @pytest.mark.parametrize("count, size, bad_size", [(5, 3, 2), (4, 3, 1), (9, 4, 1), (2, 3, 2)])
    def test_wire_when_small_first_layer_then_raises_degenerate(self, records_factory, count, size, bad_size):
        layers, ctx = _layers(records_factory, count, size)

        with pytest.raises(DegenerateLayer) as exc_info:
            wire_links(layers, ctx)

        assert exc_info.value.layer_index == 0
        assert exc_info.value.layer_size == bad_size

    def test_wire_when_degenerate_then_no_card_modified(self, records_factory):
        layers, ctx = _layers(records_factory, 5, 3)

        with pytest.raises(DegenerateLayer):
            wire_links(layers, ctx)

        assert not any(card.is_wired for layer in layers[:-1] for card in layer)

    def test_wire_when_finish_missing_then_raises(self):
        record = QuestionRecord("Q?", "a", ("b", "c"))
        layers = [[StandardCard(code, record) for code in ("AA", "AB", "AC")]]

        with pytest.raises(SchemeError, match="finish card"):
            wire_links(layers, GenerationContext(seed=0))

    def test_wire_when_finish_in_middle_then_raises(self, records_factory):
        layers, ctx = _layers(records_factory, 6, 3)
        layers[0][1] = FinishCard("ZY") if layers[0][1].code != "ZY" else FinishCard("ZX")

        with pytest.raises(SchemeError, match="found in layer 0"):
            wire_links(layers, ctx)

    def test_wire_when_empty_then_raises(self):
        with pytest.raises(SchemeError, match="No layers"):
            wire_links([], GenerationContext(seed=0))
