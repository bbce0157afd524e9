"""
Module: builder.output

Purpose:
    Card rendering and output generation.
    ReportLab PDFs by default, LaTeX sources and compilation on request.

Key Functions:
    - render_cards_pdf(): All cards in one PDF
    - render_card_pdfs(): One PDF per card
    - write_tex_files(): LaTeX source per card
    - compile_all(): Compile LaTeX sources

Dependencies:
    - reportlab: PDF generation

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_cards_pdf, render_card_pdfs, register_font, RenderError
from .tex import render_card_tex, write_tex_files, escape_latex
from .compiler import compile_tex, compile_all, CompileError

__all__ = [
    "render_cards_pdf",
    "render_card_pdfs",
    "register_font",
    "RenderError",
    "render_card_tex",
    "write_tex_files",
    "escape_latex",
    "compile_tex",
    "compile_all",
    "CompileError",
]
