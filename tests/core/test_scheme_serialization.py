"""
Tests for scheme JSON manifest and text listing.
"""

import json

import pytest

from labyrinth_toolkit.builder.scheme import generate_scheme
from labyrinth_toolkit.core.utils import (
    SCHEME_SCHEMA_VERSION,
    SerializationError,
    deserialize_scheme,
    format_scheme_text,
    read_scheme_json,
    serialize_scheme,
    write_scheme_json,
)


@pytest.fixture
def scheme(ten_records):
    return generate_scheme(5, ten_records, "31 July", seed=11)


class TestSerializeScheme:

    def test_serialize_when_called_then_includes_version_and_sizes(self, scheme):
        data = serialize_scheme(scheme)

        assert data["schema_version"] == SCHEME_SCHEMA_VERSION
        assert data["layer_sizes"] == [5, 5, 1]
        assert data["seed"] == 11

    def test_json_file_when_written_then_read_back_identical(self, scheme, tmp_path):
        path = write_scheme_json(scheme, tmp_path / "out" / "scheme.json")

        restored = read_scheme_json(path)

        assert restored.layers == scheme.layers
        assert restored.seed == scheme.seed

    def test_deserialize_when_wrong_version_then_raises(self, scheme):
        data = serialize_scheme(scheme)
        data["schema_version"] = 99

        with pytest.raises(SerializationError, match="Unsupported scheme schema version"):
            deserialize_scheme(data)

    def test_deserialize_when_links_corrupted_then_raises(self, scheme):
        data = serialize_scheme(scheme)
        first = data["layers"][0][0]
        first["outgoing_links"][0] = data["layers"][-1][0]["code"]  # Skip to finish

        with pytest.raises(SerializationError, match="Invalid scheme data"):
            deserialize_scheme(data)

    @pytest.mark.parametrize("data", [[1, 2], "scheme", None, 3])
    def test_deserialize_when_not_object_then_raises(self, data):
        with pytest.raises(SerializationError, match="expected an object"):
            deserialize_scheme(data)

    def test_read_when_json_array_then_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(SerializationError, match="Invalid scheme data"):
            read_scheme_json(path)

    def test_read_when_missing_file_then_raises(self, tmp_path):
        with pytest.raises(SerializationError, match="not found"):
            read_scheme_json(tmp_path / "nope.json")

    def test_read_when_malformed_json_then_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SerializationError, match="Malformed"):
            read_scheme_json(path)

    def test_json_when_dumped_then_plain_types(self, scheme):
        # Must not raise
        json.dumps(serialize_scheme(scheme))


class TestFormatSchemeText:

    def test_format_when_scheme_then_lists_every_card(self, scheme):
        text = format_scheme_text(scheme)

        for code in scheme.codes:
            assert code in text
        assert "Layer 1 (5 cards)" in text
        assert "Finish" in text
        assert text.count("[correct]") == 10
