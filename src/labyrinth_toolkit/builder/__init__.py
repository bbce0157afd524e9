"""
Module: builder

Purpose:
    Building pipeline for treasure hunts. Reads question files, generates
    the layered card scheme, and renders the cards to PDF or LaTeX.

Key Functions:
    - parse_questions_file(): Read question records
    - generate_scheme(): Generate the wired scheme
    - build_hunt(): Main entry point for the full pipeline

Key Classes:
    - BuilderConfig: Configuration for building
    - SchemeGenerator: Generator bound to a layer size

Dependencies:
    - reportlab: PDF rendering
    - labyrinth_toolkit.core.models: Cards and schemes

Used By:
    - labyrinth_toolkit.cli: Command-line interface
"""

from .config import BuilderConfig
from .loading import parse_questions_file, parse_questions_text, ParseError
from .scheme import (
    generate_scheme,
    SchemeGenerator,
    SchemeError,
    InvalidConfiguration,
    DegenerateLayer,
    CapacityExhausted,
)
from .controller import build_hunt, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    # Loading
    "parse_questions_file",
    "parse_questions_text",
    "ParseError",
    # Scheme
    "generate_scheme",
    "SchemeGenerator",
    "SchemeError",
    "InvalidConfiguration",
    "DegenerateLayer",
    "CapacityExhausted",
    # Controller
    "build_hunt",
    "BuildResult",
    "BuildError",
]
