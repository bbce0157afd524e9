"""
Module: builder.output.tex

Purpose:
    Produce LaTeX sources for cards, for organisers who typeset with their
    own TeX installation instead of the built-in ReportLab renderer.
    One standalone document per card, compiled by builder.output.compiler.

Key Functions:
    - render_card_tex(): LaTeX source for one card
    - write_tex_files(): Write <CODE>.tex for every card
    - escape_latex(): Escape LaTeX special characters
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from labyrinth_toolkit.core.models import Card, CardKind, FinishCard, Scheme, StandardCard

from .answers import printed_routes, removal_notice

logger = logging.getLogger(__name__)

_LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_PREAMBLE = r"""\documentclass[a4paper]{article}
\usepackage[margin=2cm]{geometry}
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{fix-cm}

\begin{document}

\pagestyle{empty}

\begin{center}
    \textbf{\fontsize{3cm}{4cm}\selectfont %(code)s}
    \vspace{2cm}
\end{center}
"""

_HEADLINE = r"""
\begin{center}
    \textbf{\fontsize{1.5cm}{2cm}\selectfont %(text)s}
    \vspace{0.5cm}
\end{center}
"""

_ANSWER = r"    \textbf{\fontsize{1cm}{2cm}\selectfont %(code)s: %(answer)s}"

_END = r"""
\end{document}
"""


def escape_latex(text: str) -> str:
    return "".join(_LATEX_SPECIALS.get(ch, ch) for ch in text)


def render_card_tex(card: Card, *, seed: Optional[int] = None, shuffle_answers: bool = True) -> str:
    """
    LaTeX document for a single card.

    Args:
        card: StandardCard (wired) or FinishCard
        seed: Scheme seed, for answer order
        shuffle_answers: Print answers in a per-card shuffled order

    Returns:
        Complete LaTeX source
    """
    parts = [_PREAMBLE % {"code": card.code}]

    if card.kind is CardKind.FINISH:
        parts.append(_finish_body(card))
    else:
        parts.append(_standard_body(card, seed, shuffle_answers))

    parts.append(_END)
    return "".join(parts)


def _finish_body(card: FinishCard) -> str:
    return _HEADLINE % {"text": escape_latex(card.message)}


def _standard_body(card: StandardCard, seed: Optional[int], shuffle_answers: bool) -> str:
    answers = [
        _ANSWER % {"code": code, "answer": escape_latex(answer)}
        for code, answer in printed_routes(card, shuffle=shuffle_answers, seed=seed)
    ]
    return (
        _HEADLINE % {"text": escape_latex(card.record.question)}
        + "\n\\begin{flushleft}\n"
        + " \\\\\n    \\vspace{0.5cm}\n".join(answers)
        + "\n\\end{flushleft}\n\n\\vfill\n\n\\begin{center}\n"
        + escape_latex(removal_notice(card))
        + "\n\\end{center}\n"
    )


def write_tex_files(
    scheme: Scheme,
    output_dir: Path,
    *,
    shuffle_answers: bool = True,
) -> List[Path]:
    """
    Write one <CODE>.tex file per card.

    Returns:
        Paths of written files in scheme order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    paths: List[Path] = []

    for card in scheme.all_cards:
        path = output_dir / f"{card.code}.tex"
        path.write_text(
            render_card_tex(card, seed=scheme.seed, shuffle_answers=shuffle_answers),
            encoding="utf-8",
        )
        paths.append(path)

    logger.info(f"Wrote {len(paths)} LaTeX sources to {output_dir}")
    return paths
