"""
Module: builder.output.compiler

Purpose:
    Compile LaTeX card sources to PDF with an external TeX engine.

Key Functions:
    - compile_tex(): Compile one .tex file
    - compile_all(): Compile several files, stopping at the first failure

Key Classes:
    - CompileError: Missing engine, non-zero exit or timeout
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "pdflatex"
DEFAULT_TIMEOUT = 30.0


class CompileError(Exception):
    """Error compiling a LaTeX source."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


def compile_tex(
    tex_path: Path,
    output_dir: Path,
    *,
    command: str = DEFAULT_COMMAND,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """
    Compile a LaTeX file to PDF.

    Args:
        tex_path: Source file
        output_dir: Directory for the PDF and auxiliary files
        command: TeX engine executable
        timeout: Seconds before the engine is killed

    Returns:
        Path to the produced PDF

    Raises:
        CompileError: If the engine is missing, fails, or times out
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    args = [
        command,
        "-interaction=nonstopmode",
        "-halt-on-error",
        f"-output-directory={output_dir}",
        str(tex_path),
    ]
    logger.debug(f"Running {' '.join(args)}")

    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise CompileError(f"LaTeX engine not found: {command}") from e
    except subprocess.TimeoutExpired as e:
        output = e.stdout if isinstance(e.stdout, str) else ""
        raise CompileError(f"Compilation of {tex_path.name} took longer than {timeout}s", output) from e

    if result.returncode != 0:
        logger.debug(result.stdout)
        raise CompileError(
            f"{command} exited with {result.returncode} for {tex_path.name}",
            result.stdout + result.stderr,
        )

    pdf_path = output_dir / f"{tex_path.stem}.pdf"
    logger.debug(f"Compiled {tex_path.name} -> {pdf_path}")
    return pdf_path


def compile_all(
    tex_paths: Iterable[Path],
    output_dir: Path,
    *,
    command: str = DEFAULT_COMMAND,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Path]:
    pdfs = [compile_tex(p, output_dir, command=command, timeout=timeout) for p in tex_paths]
    logger.info(f"Compiled {len(pdfs)} LaTeX cards into {output_dir}")
    return pdfs
