"""
Tests for the ReportLab card renderer.

Uses pypdf to inspect generated PDFs.
"""

import pytest

from labyrinth_toolkit.builder.output import RenderError, register_font, render_card_pdfs, render_cards_pdf
from labyrinth_toolkit.builder.scheme import generate_scheme

pypdf = pytest.importorskip("pypdf")


@pytest.fixture
def scheme(ten_records):
    return generate_scheme(5, ten_records, "31 July", seed=5)


class TestRenderCardsPdf:

    def test_render_when_scheme_then_one_page_per_card(self, scheme, tmp_path):
        path = render_cards_pdf(scheme, tmp_path / "cards.pdf")

        reader = pypdf.PdfReader(path)
        assert len(reader.pages) == scheme.card_count == 11

    def test_render_when_scheme_then_pages_follow_scheme_order(self, scheme, tmp_path):
        path = render_cards_pdf(scheme, tmp_path / "cards.pdf")

        reader = pypdf.PdfReader(path)
        for page, card in zip(reader.pages, scheme.all_cards):
            assert card.code in page.extract_text()

    def test_render_when_standard_card_then_question_and_links_printed(self, scheme, tmp_path):
        path = render_cards_pdf(scheme, tmp_path / "cards.pdf")

        text = pypdf.PdfReader(path).pages[0].extract_text()
        card = scheme.layers[0][0]
        assert card.record.question in text
        for link in card.outgoing_links:
            assert link in text
        assert "July" in text

    def test_render_when_finish_card_then_message_on_last_page(self, ten_records, tmp_path):
        scheme = generate_scheme(5, ten_records, seed=5, finish_message="Well done")

        path = render_cards_pdf(scheme, tmp_path / "cards.pdf")

        last = pypdf.PdfReader(path).pages[-1].extract_text()
        assert "Well done" in last
        assert scheme.finish_card.code in last

    def test_render_when_parent_missing_then_created(self, scheme, tmp_path):
        path = render_cards_pdf(scheme, tmp_path / "a" / "b" / "cards.pdf")

        assert path.exists()


class TestRenderCardPdfs:

    def test_render_when_called_then_file_per_code(self, scheme, tmp_path):
        paths = render_card_pdfs(scheme, tmp_path / "cards")

        assert [p.stem for p in paths] == list(scheme.codes)
        for p in paths:
            assert len(pypdf.PdfReader(p).pages) == 1


class TestRegisterFont:

    def test_register_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(RenderError, match="Cannot load font"):
            register_font(tmp_path / "nope.ttf")
