"""
Module: builder.controller

Purpose:
    Orchestrate the complete hunt building pipeline.
    Parse → Generate → Render → (LaTeX) → Manifest

Key Functions:
    - build_hunt(): Main entry point for building a hunt

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.loading: Question parsing
    - builder.scheme: Scheme generation
    - builder.output: PDF and LaTeX rendering
    - core.utils.serialization: Scheme manifest

Used By:
    - labyrinth_toolkit.cli: Command-line interface
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from labyrinth_toolkit.core.models import QuestionRecord, Scheme
from labyrinth_toolkit.core.utils import format_scheme_text, write_scheme_json

from .config import BuilderConfig
from .loading import parse_questions_file, ParseError
from .output import (
    compile_all,
    register_font,
    render_card_pdfs,
    render_cards_pdf,
    write_tex_files,
    CompileError,
    RenderError,
)
from .scheme import generate_scheme, SchemeError
from .scheme.wiring import MIN_WIRED_LAYER

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_BASE = Path("workspace") / "output"


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        scheme: Generated scheme
        output_dir: Timestamped folder holding every output
        cards_pdf: Combined PDF (if generated)
        card_pdfs: Per-card PDFs (if generated)
        tex_files: LaTeX sources (if generated)
        compiled_pdfs: PDFs compiled from LaTeX (if compiled)
        manifest_path: scheme.json path
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_hunt(config)
        >>> print(f"Generated {result.scheme.card_count} cards in {result.output_dir}")
    """
    scheme: Scheme
    output_dir: Path
    cards_pdf: Optional[Path]
    card_pdfs: tuple[Path, ...]
    tex_files: tuple[Path, ...]
    compiled_pdfs: tuple[Path, ...]
    manifest_path: Path
    metadata: dict
    warnings: tuple[str, ...]


def build_hunt(config: BuilderConfig) -> BuildResult:
    """
    Build a treasure hunt from start to finish.

    Pipeline:
    1. Parse question file
    2. Check layer sizing
    3. Generate and wire the scheme
    4. Render cards to PDF
    5. (Optional) Write and compile LaTeX sources
    6. Write scheme manifest and metadata

    Args:
        config: Build configuration

    Returns:
        BuildResult with paths and metadata

    Raises:
        BuildError: If any step fails; the original error is chained

    Example:
        >>> config = BuilderConfig(
        ...     input_path=Path("questions.txt"),
        ...     layer_size=5,
        ...     deadline_text="31 July",
        ...     output_dir=Path("output"),
        ... )
        >>> result = build_hunt(config)
        >>> result.scheme.layer_sizes
        (5, 5, 1)
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    logger.info(f"Starting build from {config.input_path} with layer size {config.layer_size}")

    # 1. Parse questions
    try:
        records = parse_questions_file(config.input_path)
    except ParseError as e:
        raise BuildError(f"Failed to read questions: {e}") from e

    if not records:
        error = ParseError("no questions found", path=Path(config.input_path))
        raise BuildError(f"Failed to read questions: {error}") from error

    # 2. Check layer sizing before any generation
    warnings.extend(_check_sizing(records, config.layer_size))
    for warning in warnings:
        logger.warning(warning)

    # 3. Generate scheme
    try:
        scheme = generate_scheme(
            config.layer_size,
            records,
            config.deadline_text,
            seed=config.seed,
            finish_message=config.finish_message,
        )
    except SchemeError as e:
        raise BuildError(f"Failed to generate scheme: {e}") from e

    # 4. Determine output directory
    output_dir = _generate_timestamped_subfolder(
        Path(config.output_dir) if config.output_dir else DEFAULT_OUTPUT_BASE,
        config,
        scheme,
    )
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")

    # 5. Render PDFs
    cards_pdf: Optional[Path] = None
    card_pdfs: List[Path] = []
    try:
        font_name = register_font(config.font_path) if config.font_path else None
        if config.combined_pdf:
            cards_pdf = render_cards_pdf(
                scheme,
                output_dir / "cards.pdf",
                shuffle_answers=config.shuffle_answers,
                font_name=font_name,
            )
        if config.single_card_pdfs:
            card_pdfs = render_card_pdfs(
                scheme,
                output_dir / "cards",
                shuffle_answers=config.shuffle_answers,
                font_name=font_name,
            )
    except (RenderError, OSError) as e:
        raise BuildError(f"Failed to render cards: {e}") from e

    # 6. LaTeX sources (optional)
    tex_files: List[Path] = []
    compiled: List[Path] = []
    if config.write_tex:
        tex_dir = output_dir / "tex"
        try:
            tex_files = write_tex_files(scheme, tex_dir, shuffle_answers=config.shuffle_answers)
            if config.compile_tex:
                compiled = compile_all(
                    tex_files,
                    tex_dir,
                    command=config.latex_command,
                    timeout=config.compile_timeout,
                )
        except CompileError as e:
            raise BuildError(f"Failed to compile LaTeX cards: {e}") from e
        except OSError as e:
            raise BuildError(f"Failed to write LaTeX cards: {e}") from e

    # 7. Manifest and metadata
    try:
        manifest_path = write_scheme_json(scheme, output_dir / "scheme.json")
        (output_dir / "scheme.txt").write_text(format_scheme_text(scheme), encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Failed to write scheme manifest: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Hunt generation completed in {elapsed:.2f}s")

    metadata = _build_metadata(config, scheme, elapsed, warnings)
    _write_metadata(output_dir, metadata)

    return BuildResult(
        scheme=scheme,
        output_dir=output_dir,
        cards_pdf=cards_pdf,
        card_pdfs=tuple(card_pdfs),
        tex_files=tuple(tex_files),
        compiled_pdfs=tuple(compiled),
        manifest_path=manifest_path,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _check_sizing(records: Sequence[QuestionRecord], layer_size: int) -> List[str]:
    """
    Describe layer-size problems that do not stop generation by themselves.

    A remainder of 1 or 2 is not reported here: generation rejects it
    with DegenerateLayer.
    """
    warnings: List[str] = []
    remainder = len(records) % layer_size

    if len(records) < layer_size:
        warnings.append(
            f"Only {len(records)} questions for layer size {layer_size}: the hunt has a single layer"
        )
    elif remainder >= MIN_WIRED_LAYER:
        warnings.append(
            f"{len(records)} questions do not fill layers of {layer_size}: "
            f"the first layer has {remainder} cards"
        )
    return warnings


def _generate_timestamped_subfolder(base_dir: Path, config: BuilderConfig, scheme: Scheme) -> Path:
    """
    Create timestamped subfolder path inside base directory.

    Returns:
        Path like base/20260718-103045__questions__l4__s42__q10
    """
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    stem = re.sub(r"[^A-Za-z0-9]+", "-", Path(config.input_path).stem).strip("-").lower() or "hunt"
    folder_name = (
        f"{timestamp}__{stem}__l{config.layer_size}__s{scheme.seed}"
        f"__q{len(scheme.standard_cards)}"
    )

    # Handle collisions (unlikely but possible)
    output_path = base_dir / folder_name
    if output_path.exists():
        counter = 1
        while (base_dir / f"{folder_name}({counter})").exists():
            counter += 1
        output_path = base_dir / f"{folder_name}({counter})"

    return output_path


def _build_metadata(
    config: BuilderConfig,
    scheme: Scheme,
    elapsed: float,
    warnings: Sequence[str],
) -> dict:
    """Metadata dictionary ready for JSON serialization."""
    from labyrinth_toolkit import __version__

    return {
        "generated_at": datetime.now().isoformat(),
        "builder_version": __version__,
        "input_path": str(config.input_path),
        "layer_size": config.layer_size,
        "seed": scheme.seed,
        "question_count": len(scheme.standard_cards),
        "card_count": scheme.card_count,
        "layer_sizes": list(scheme.layer_sizes),
        "start_codes": [card.code for card in scheme.layers[0]],
        "finish_code": scheme.finish_card.code,
        "deadline_text": config.deadline_text,
        "shuffle_answers": config.shuffle_answers,
        "outputs": {
            "combined_pdf": config.combined_pdf,
            "single_card_pdfs": config.single_card_pdfs,
            "write_tex": config.write_tex,
            "compile_tex": config.compile_tex,
        },
        "elapsed_seconds": round(elapsed, 3),
        "warnings": list(warnings),
    }


def _write_metadata(output_dir: Path, metadata: dict) -> None:
    """
    Write metadata JSON file to output directory.

    Raises:
        BuildError: If writing fails
    """
    metadata_path = output_dir / "build_metadata.json"

    try:
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)
        logger.debug(f"Wrote metadata to {metadata_path}")
    except OSError as e:
        raise BuildError(f"Failed to write metadata: {e}") from e
