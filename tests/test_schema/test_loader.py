"""Tests for reading schema files (sensormaker.schema.loader)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from sensormaker.errors import ExitCode, NotARecord, SchemaInvalid, SchemaParseError, SchemaUnreadable
from sensormaker.schema import load_schema, parse_schema


class TestParseSchema:
    @pytest.mark.unit
    def test_object_root(self, minimal_document: dict[str, Any]):
        assert parse_schema(minimal_document).name == "temp"

    @pytest.mark.unit
    @pytest.mark.parametrize("document", [[], "temp", 42, None])
    def test_non_object_root(self, document: Any):
        with pytest.raises(NotARecord) as exc_info:
            parse_schema(document)
        assert exc_info.value.code == ExitCode.NOT_A_RECORD

    @pytest.mark.unit
    def test_field_list_of_wrong_shape(self):
        with pytest.raises(SchemaInvalid) as exc_info:
            parse_schema({"namespace": "com.x", "name": "temp", "valuePaths": "celsius"})
        assert exc_info.value.code == ExitCode.SCHEMA_PARSE
        assert "valuePaths" in exc_info.value.detail

    @pytest.mark.unit
    def test_cuckoo_must_be_boolean_like(self):
        with pytest.raises(SchemaInvalid):
            parse_schema({"namespace": "com.x", "name": "temp", "valuePaths": [], "cuckoo": "maybe"})


class TestLoadSchema:
    @pytest.mark.unit
    def test_loads_file(self, write_schema: Callable[..., Path], minimal_document: dict[str, Any]):
        path = write_schema(minimal_document)
        schema = load_schema(path)
        assert schema.authority == "com.x.temp"

    @pytest.mark.unit
    def test_accepts_string_path(self, write_schema: Callable[..., Path], minimal_document: dict[str, Any]):
        path = write_schema(minimal_document)
        assert load_schema(str(path)).name == "temp"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SchemaUnreadable) as exc_info:
            load_schema(tmp_path / "absent.json")
        assert exc_info.value.code == ExitCode.SCHEMA_UNREADABLE

    @pytest.mark.unit
    def test_directory_is_unreadable(self, tmp_path: Path):
        with pytest.raises(SchemaUnreadable):
            load_schema(tmp_path)

    @pytest.mark.unit
    def test_invalid_json(self, write_schema: Callable[..., Path]):
        path = write_schema('{"namespace": "com.x",')
        with pytest.raises(SchemaParseError) as exc_info:
            load_schema(path)
        assert exc_info.value.code == ExitCode.PARSING_SCHEMA

    @pytest.mark.unit
    def test_array_root(self, write_schema: Callable[..., Path]):
        path = write_schema(json.dumps([{"name": "temp"}]))
        with pytest.raises(NotARecord):
            load_schema(path)

    @pytest.mark.unit
    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "sensor.json"
        path.write_bytes(b'{"namespace": "com.x", "name": "\xff"}')
        with pytest.raises(SchemaParseError) as exc_info:
            load_schema(path)
        assert exc_info.value.code == ExitCode.PARSING_SCHEMA
