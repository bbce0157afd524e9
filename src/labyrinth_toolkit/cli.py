"""
Command-line interface for the Labyrinth Builder.

Commands:
    build   Generate a scheme and render the cards
    scheme  Generate a scheme and print it (text or JSON) without rendering

Exit codes:
    0  success
    1  build failure (rendering, compilation, file output)
    2  bad configuration or question file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from labyrinth_toolkit import __version__
from labyrinth_toolkit.builder import (
    BuilderConfig,
    BuildError,
    ParseError,
    SchemeError,
    build_hunt,
    generate_scheme,
    parse_questions_file,
)
from labyrinth_toolkit.builder.scheme import MAX_LAYER_SIZE, MIN_LAYER_SIZE
from labyrinth_toolkit.core.utils import format_scheme_text, serialize_scheme

logger = logging.getLogger("labyrinth_toolkit")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth-builder",
        description="Generate printable treasure-hunt cards from a question file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", type=Path, help="Question file (question + 3 answers per block)")
        p.add_argument(
            "-l", "--layer-size", type=int, required=True,
            help=f"Cards per layer ({MIN_LAYER_SIZE}-{MAX_LAYER_SIZE})",
        )
        p.add_argument("-d", "--deadline", default="", help="Removal deadline printed on cards")
        p.add_argument("-s", "--seed", type=int, default=None, help="Random seed")
        p.add_argument("--finish-message", default=None, help="Custom finish card text")

    build = sub.add_parser("build", help="Generate and render cards")
    add_common(build)
    build.add_argument("-o", "--output", type=Path, default=None, help="Base output directory")
    build.add_argument("--no-combined", action="store_true", help="Skip the combined cards.pdf")
    build.add_argument("--single", action="store_true", help="Also write one PDF per card")
    build.add_argument("--no-shuffle", action="store_true", help="Print the correct answer first")
    build.add_argument("--font", type=Path, default=None, help="TrueType font for card text")
    build.add_argument("--tex", action="store_true", help="Write LaTeX sources")
    build.add_argument("--compile", action="store_true", help="Compile LaTeX sources (implies --tex)")
    build.add_argument("--latex-command", default="pdflatex", help="TeX engine")
    build.add_argument("--timeout", type=float, default=30.0, help="Seconds per LaTeX compilation")

    scheme = sub.add_parser("scheme", help="Print the generated scheme")
    add_common(scheme)
    scheme.add_argument("--json", action="store_true", help="Print JSON instead of text")

    return parser


def _run_build(args: argparse.Namespace) -> int:
    try:
        config = BuilderConfig(
            input_path=args.input,
            layer_size=args.layer_size,
            deadline_text=args.deadline,
            seed=args.seed,
            finish_message=args.finish_message,
            output_dir=args.output,
            combined_pdf=not args.no_combined,
            single_card_pdfs=args.single,
            shuffle_answers=not args.no_shuffle,
            font_path=args.font,
            write_tex=args.tex or args.compile,
            compile_tex=args.compile,
            latex_command=args.latex_command,
            compile_timeout=args.timeout,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    try:
        result = build_hunt(config)
    except BuildError as e:
        logger.error(str(e))
        if isinstance(e.__cause__, (ParseError, SchemeError)):
            return EXIT_USAGE
        return EXIT_FAILURE

    print(f"Generated {result.scheme.card_count} cards (seed {result.scheme.seed}) in {result.output_dir}")
    return EXIT_OK


def _run_scheme(args: argparse.Namespace) -> int:
    try:
        records = parse_questions_file(args.input)
        scheme = generate_scheme(
            args.layer_size,
            records,
            args.deadline,
            seed=args.seed,
            finish_message=args.finish_message,
        )
    except (ParseError, SchemeError) as e:
        logger.error(str(e))
        return EXIT_USAGE

    if args.json:
        print(json.dumps(serialize_scheme(scheme), indent=2, ensure_ascii=False))
    else:
        print(format_scheme_text(scheme), end="")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "build":
        return _run_build(args)
    return _run_scheme(args)


if __name__ == "__main__":
    raise SystemExit(main())
