"""Shared pytest fixtures for the sensormaker test suite.

Provides reusable fixtures for:
- Sample schema documents (minimal, standard, cuckoo)
- Writing schema documents to a temporary project directory
- Parsed ``SensorSchema`` instances
- A ``ProjectWriter`` with a fixed clock and recorded notices
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from sensormaker.schema import SensorSchema, parse_schema
from sensormaker.scaffolder import ProjectWriter

FIXED_MILLIS = 1_700_000_000_123


# ---------------------------------------------------------------------------
# Schema documents
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """The smallest schema that generates a full project."""
    return {
        "namespace": "com.x",
        "name": "temp",
        "valuePaths": [{"name": "celsius", "type": "float"}],
    }


@pytest.fixture
def standard_document() -> dict[str, Any]:
    """A standard-lineage schema using every optional section."""
    return {
        "namespace": "com.example.sensors",
        "name": "weather",
        "doc": "Local weather readings.",
        "author": "Sensor Team",
        "valuePaths": [
            {"name": "temperature", "type": "float"},
            {"name": "humidity", "type": "int"},
            {"name": "station", "type": "String"},
        ],
        "units": [
            {"name": "temperature", "unit": "C"},
            {"name": "humidity", "unit": "%"},
        ],
        "configs": [
            {
                "name": "sample_rate",
                "class": "EditTextPreference",
                "type": "long",
                "default": 1000,
                "android:title": "Sample rate",
                "android:numeric": "integer",
                "summary": "not copied",
            },
            {
                "name": "mode",
                "class": "ListPreference",
                "type": "String",
                "default": "fast",
                "android:entries": "@array/modes",
                "android:entryValues": "@array/modes",
            },
            {
                "name": "threshold",
                "class": "EditTextPreference",
                "type": "double",
                "default": 0.5,
            },
            {"name": "station_id", "class": "EditTextPreference"},
        ],
        "values": [
            {"name": "modes", "type": "string-array", "items": ["fast", "slow"]},
            {"name": "rates", "type": "integer-array", "items": [100, 1000, 10000]},
        ],
    }


@pytest.fixture
def cuckoo_document(standard_document: dict[str, Any]) -> dict[str, Any]:
    """The standard document switched to the cuckoo lineage."""
    return {**standard_document, "cuckoo": True}


# ---------------------------------------------------------------------------
# Parsed schemas
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_schema(minimal_document: dict[str, Any]) -> SensorSchema:
    return parse_schema(minimal_document)


@pytest.fixture
def standard_schema(standard_document: dict[str, Any]) -> SensorSchema:
    return parse_schema(standard_document)


@pytest.fixture
def cuckoo_schema(cuckoo_document: dict[str, Any]) -> SensorSchema:
    return parse_schema(cuckoo_document)


# ---------------------------------------------------------------------------
# Files & Writers
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory the schema file (and so the project) lives in."""
    project_dir = tmp_path / "sensor-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def write_schema(tmp_project_dir: Path) -> Callable[..., Path]:
    """Factory writing a schema document into the project directory.

    Usage:
        def test_something(write_schema, minimal_document):
            path = write_schema(minimal_document)
    """

    def _write(document: Any, filename: str = "sensor.json") -> Path:
        path = tmp_project_dir / filename
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def notices() -> list[str]:
    """Collects the messages a writer emits."""
    return []


@pytest.fixture
def fixed_writer(notices: list[str]) -> ProjectWriter:
    """ProjectWriter with a constant clock that records its notices."""
    return ProjectWriter(clock=lambda: FIXED_MILLIS, notify=notices.append)
