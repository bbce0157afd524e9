"""
Serialization Utilities

Provides to/from JSON utilities for schemes, plus a plain-text listing
organisers can print next to the cards to check where each route leads.

The JSON manifest carries a schema version; reading a manifest with a
different version fails instead of guessing at missing fields.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.cards import CardKind
from ..models.scheme import Scheme

logger = logging.getLogger(__name__)

SCHEME_SCHEMA_VERSION = 1


class SerializationError(Exception):
    """Raised when a scheme manifest cannot be read."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Scheme Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_scheme(scheme: Scheme) -> dict[str, Any]:
    """
    Serialize a Scheme to a dictionary with schema version.

    Args:
        scheme: Scheme instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    data = scheme.to_dict()
    data["schema_version"] = SCHEME_SCHEMA_VERSION
    data["layer_sizes"] = list(scheme.layer_sizes)
    return data


def deserialize_scheme(data: dict[str, Any], *, validate: bool = True) -> Scheme:
    """
    Deserialize a Scheme from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to check scheme invariants after loading

    Returns:
        Scheme instance

    Raises:
        SerializationError: If the version is unsupported or data is invalid
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Invalid scheme data: expected an object, got {type(data).__name__}")

    version = data.get("schema_version")
    if version != SCHEME_SCHEMA_VERSION:
        raise SerializationError(
            f"Unsupported scheme schema version: {version} (expected {SCHEME_SCHEMA_VERSION})"
        )

    try:
        scheme = Scheme.from_dict(data)
        if validate:
            scheme.validate()
    except (KeyError, TypeError, ValueError) as e:
        raise SerializationError(f"Invalid scheme data: {e}") from e

    return scheme


def write_scheme_json(scheme: Scheme, path: Path) -> Path:
    """Write scheme manifest JSON to path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_scheme(scheme), f, indent=2, ensure_ascii=False)
    logger.debug(f"Wrote scheme manifest to {path}")
    return path


def read_scheme_json(path: Path, *, validate: bool = True) -> Scheme:
    """
    Read a scheme manifest written by write_scheme_json().

    Raises:
        SerializationError: If the file is missing or invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SerializationError(f"Scheme manifest not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SerializationError(f"Malformed scheme manifest {path}: {e}") from e
    return deserialize_scheme(data, validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# Text Listing
# ─────────────────────────────────────────────────────────────────────────────

def format_scheme_text(scheme: Scheme) -> str:
    """
    Render a scheme as a readable listing.

    Example output:
        Layer 1 (3 cards)
          QX  What is 2 + 2?
              -> KB  4  [correct]
              -> ZD  3
              -> PL  5
        Finish
          MT  You have reached the finish...
    """
    lines = [f"Scheme: {scheme.card_count} cards, layer size {scheme.layer_size}, seed {scheme.seed}"]
    last = len(scheme.layers) - 1

    for i, layer in enumerate(scheme.layers):
        lines.append("")
        lines.append("Finish" if i == last else f"Layer {i + 1} ({len(layer)} cards)")
        for card in layer:
            if card.kind is CardKind.FINISH:
                lines.append(f"  {card.code}  {card.message}")
                continue
            lines.append(f"  {card.code}  {card.record.question}")
            if not card.is_wired:
                lines.append("      (not wired)")
                continue
            for n, (code, answer) in enumerate(card.answer_routes()):
                marker = "  [correct]" if n == 0 else ""
                lines.append(f"      -> {code}  {answer}{marker}")

    return "\n".join(lines) + "\n"
