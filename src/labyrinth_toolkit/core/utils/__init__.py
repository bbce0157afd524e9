"""Serialization helpers for core models."""

from .serialization import (
    SCHEME_SCHEMA_VERSION,
    SerializationError,
    deserialize_scheme,
    format_scheme_text,
    read_scheme_json,
    serialize_scheme,
    write_scheme_json,
)

__all__ = [
    "SCHEME_SCHEMA_VERSION",
    "SerializationError",
    "deserialize_scheme",
    "format_scheme_text",
    "read_scheme_json",
    "serialize_scheme",
    "write_scheme_json",
]
