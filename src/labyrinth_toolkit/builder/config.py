"""
Module: builder.config

Purpose:
    Configuration dataclass for the build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a hunt

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - labyrinth_toolkit.cli: Command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from labyrinth_toolkit.builder.scheme import validate_layer_size, validate_seed


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a treasure hunt (immutable).

    Attributes:
        input_path: Question file to read
        layer_size: Cards per full layer (3-20)
        deadline_text: Date printed in each card's removal notice
        seed: Random seed for reproducible schemes (None = random)
        finish_message: Custom finish card text
        output_dir: Base output directory (timestamped subfolder created inside)
        combined_pdf: Write all cards to cards.pdf
        single_card_pdfs: Write one <CODE>.pdf per card into cards/
        shuffle_answers: Print answers in shuffled order per card
        font_path: TrueType font for text outside Latin-1
        write_tex: Write <CODE>.tex sources into tex/
        compile_tex: Compile the LaTeX sources (requires write_tex)
        latex_command: TeX engine executable
        compile_timeout: Seconds allowed per compilation

    Example:
        >>> config = BuilderConfig(
        ...     input_path=Path("questions.txt"),
        ...     layer_size=4,
        ...     deadline_text="31 July",
        ... )
    """

    # Required
    input_path: Path
    layer_size: int

    # Scheme
    deadline_text: str = ""
    seed: Optional[int] = None
    finish_message: Optional[str] = None

    # Output
    output_dir: Optional[Path] = None
    combined_pdf: bool = True
    single_card_pdfs: bool = False
    shuffle_answers: bool = True
    font_path: Optional[Path] = None

    # LaTeX
    write_tex: bool = False
    compile_tex: bool = False
    latex_command: str = "pdflatex"
    compile_timeout: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        validate_layer_size(self.layer_size)
        validate_seed(self.seed)
        if self.compile_timeout <= 0:
            raise ValueError(f"compile_timeout must be positive: {self.compile_timeout}")
        if self.compile_tex and not self.write_tex:
            raise ValueError("compile_tex requires write_tex")
        if not (self.combined_pdf or self.single_card_pdfs or self.write_tex):
            raise ValueError("at least one output (combined_pdf, single_card_pdfs, write_tex) is required")
