"""
Module: builder.output.renderer

Purpose:
    Render scheme cards to PDF using ReportLab. Each card becomes one A4
    page: the card code in large type, the question, and the three
    answers printed under the codes they lead to. The finish card shows
    its code and message.

Key Functions:
    - render_cards_pdf(): All cards in one multi-page PDF
    - render_card_pdfs(): One PDF per card, named <CODE>.pdf
    - register_font(): Use a TrueType font for non-Latin-1 text

Dependencies:
    - reportlab: PDF generation
    - builder.output.answers: Answer order and removal notice

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from labyrinth_toolkit.core.models import Card, CardKind, FinishCard, Scheme, StandardCard

from .answers import printed_routes, removal_notice

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH_PT, A4_HEIGHT_PT = A4
MARGIN_PT = 2 * cm

CODE_FONT_SIZE = 96
QUESTION_FONT_SIZE = 28
ANSWER_FONT_SIZE = 20
NOTICE_FONT_SIZE = 9

DEFAULT_FONT = "Helvetica"
DEFAULT_BOLD_FONT = "Helvetica-Bold"


class RenderError(Exception):
    """Error rendering cards."""
    pass


def register_font(font_path: Path, name: str = "CardFont") -> str:
    """
    Register a TrueType font with ReportLab.

    The built-in Helvetica only covers Latin-1; question files in other
    scripts need a TTF font with the right glyphs.

    Args:
        font_path: Path to a .ttf file
        name: Name to register the font under

    Returns:
        Registered font name

    Raises:
        RenderError: If the font cannot be loaded
    """
    try:
        pdfmetrics.registerFont(TTFont(name, str(font_path)))
    except Exception as e:
        raise RenderError(f"Cannot load font {font_path}: {e}") from e
    logger.debug(f"Registered font {name} from {font_path}")
    return name


def render_cards_pdf(
    scheme: Scheme,
    output_path: Path,
    *,
    shuffle_answers: bool = True,
    font_name: Optional[str] = None,
) -> Path:
    """
    Render every card of a scheme into one PDF, one page per card.

    Pages follow scheme order: start layer first, finish card last.

    Args:
        scheme: Wired scheme
        output_path: Path to write the PDF
        shuffle_answers: Print answers in a per-card shuffled order
        font_name: Registered font to use instead of Helvetica

    Returns:
        output_path

    Example:
        >>> render_cards_pdf(scheme, Path("output/cards.pdf"))
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fonts = _font_pair(font_name)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle("Treasure hunt cards")
    for card in scheme.all_cards:
        _render_card(c, card, scheme.seed, shuffle_answers, fonts)
        c.showPage()
    c.save()

    logger.info(f"Rendered {scheme.card_count} cards to {output_path}")
    return output_path


def render_card_pdfs(
    scheme: Scheme,
    output_dir: Path,
    *,
    shuffle_answers: bool = True,
    font_name: Optional[str] = None,
) -> List[Path]:
    """
    Render each card to its own single-page PDF named after its code.

    Returns:
        Paths of written PDFs in scheme order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    fonts = _font_pair(font_name)
    paths: List[Path] = []

    for card in scheme.all_cards:
        path = output_dir / f"{card.code}.pdf"
        c = canvas.Canvas(str(path), pagesize=A4)
        c.setTitle(f"Card {card.code}")
        _render_card(c, card, scheme.seed, shuffle_answers, fonts)
        c.showPage()
        c.save()
        paths.append(path)

    logger.info(f"Rendered {len(paths)} card PDFs to {output_dir}")
    return paths


def _font_pair(font_name: Optional[str]) -> Tuple[str, str]:
    """(regular, bold) font names."""
    if font_name:
        return font_name, font_name
    return DEFAULT_FONT, DEFAULT_BOLD_FONT


def _render_card(
    c: canvas.Canvas,
    card: Card,
    seed: Optional[int],
    shuffle_answers: bool,
    fonts: Tuple[str, str],
) -> None:
    """Draw a single card of either kind on the current page."""
    _, bold = fonts
    y = A4_HEIGHT_PT - MARGIN_PT - CODE_FONT_SIZE
    _draw_centered(c, card.code, bold, CODE_FONT_SIZE, y)
    y -= 2 * cm

    if card.kind is CardKind.FINISH:
        _draw_finish(c, card, y, bold)
        return

    _draw_standard(c, card, y, seed, shuffle_answers, fonts)


def _draw_finish(c: canvas.Canvas, card: FinishCard, y: float, bold: str) -> None:
    _draw_wrapped(c, card.message, bold, QUESTION_FONT_SIZE, y, centered=True)


def _draw_standard(
    c: canvas.Canvas,
    card: StandardCard,
    y: float,
    seed: Optional[int],
    shuffle_answers: bool,
    fonts: Tuple[str, str],
) -> None:
    regular, bold = fonts
    y = _draw_wrapped(c, card.record.question, bold, QUESTION_FONT_SIZE, y, centered=True)
    y -= 0.5 * cm

    for code, answer in printed_routes(card, shuffle=shuffle_answers, seed=seed):
        y = _draw_wrapped(c, f"{code}: {answer}", bold, ANSWER_FONT_SIZE, y, centered=False)
        y -= 0.5 * cm

    if y < MARGIN_PT + 3 * NOTICE_FONT_SIZE:
        logger.warning(f"Card {card.code} text reaches the removal notice; consider shorter answers")

    # Removal notice sits at the bottom of the page like a footer
    c.saveState()
    c.setFillColorRGB(0.3, 0.3, 0.3)
    _draw_wrapped(c, removal_notice(card), regular, NOTICE_FONT_SIZE, MARGIN_PT, centered=True)
    c.restoreState()


def _draw_centered(c: canvas.Canvas, text: str, font: str, size: float, y: float) -> None:
    c.setFont(font, size)
    c.drawCentredString(A4_WIDTH_PT / 2, y, text)


def _draw_wrapped(
    c: canvas.Canvas,
    text: str,
    font: str,
    size: float,
    y: float,
    *,
    centered: bool,
) -> float:
    """
    Draw text wrapped to the printable width, first baseline at y.

    Returns:
        Baseline y below the last drawn line
    """
    width = A4_WIDTH_PT - 2 * MARGIN_PT
    leading = size * 1.25
    c.setFont(font, size)

    for line in simpleSplit(text, font, size, width):
        if centered:
            c.drawCentredString(A4_WIDTH_PT / 2, y, line)
        else:
            c.drawString(MARGIN_PT, y, line)
        y -= leading

    return y
