"""Integration tests for the schema-file-to-project pipeline.

These tests write a schema file, run the real CLI entry point against it and
inspect the generated project directory: file layout, well-formed XML, and
the identifiers each artifact shares with the others.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import pytest

from sensormaker.pipeline import main

ANDROID = "{http://schemas.android.com/apk/res/android}"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _generate(project_dir: Path, document: dict[str, Any]) -> Path:
    """Write *document* as ``sensor.json`` in *project_dir* and run the CLI."""
    schema_path = project_dir / "sensor.json"
    schema_path.write_text(json.dumps(document), encoding="utf-8")
    main([str(schema_path)])
    return project_dir


def _files(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def temp_project(tmp_project_dir: Path, minimal_document: dict[str, Any]) -> Path:
    return _generate(tmp_project_dir, minimal_document)


@pytest.fixture
def cuckoo_project(tmp_project_dir: Path, cuckoo_document: dict[str, Any]) -> Path:
    return _generate(tmp_project_dir, cuckoo_document)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestTemperatureSensor:
    def test_layout(self, temp_project: Path):
        assert _files(temp_project) == {
            "sensor.json",
            "AndroidManifest.xml",
            "res/values/temp_values.xml",
            "res/xml/temp_preferences.xml",
            "src/com/x/TempSensor.java",
        }

    def test_arrays_list_the_field(self, temp_project: Path):
        root = ET.parse(temp_project / "res/values/temp_values.xml").getroot()
        assert [item.text for item in root.find("string-array")] == ["celsius"]

    def test_sensor_class(self, temp_project: Path):
        text = (temp_project / "src/com/x/TempSensor.java").read_text(encoding="utf-8")
        assert "public class TempSensor extends AbstractVdbSensor {" in text
        assert text.count("public static final String CELSIUS_FIELD = \"celsius\";") == 1

    def test_no_poller(self, temp_project: Path):
        assert not (temp_project / "src/com/x/TempPoller.java").exists()

    def test_shared_identifiers(self, temp_project: Path):
        manifest = ET.parse(temp_project / "AndroidManifest.xml").getroot()
        prefs = ET.parse(temp_project / "res/xml/temp_preferences.xml").getroot()
        provider = manifest.find("application/provider")
        assert provider.get(f"{ANDROID}authorities") == "com.x.temp"
        picker = prefs.find("PreferenceCategory/ListPreference")
        assert picker.get(f"{ANDROID}entries") == "@array/temp_valuepaths"

    def test_regeneration_is_identical_and_backed_up(self, temp_project: Path):
        first = {name: (temp_project / name).read_bytes() for name in _files(temp_project)}

        main([str(temp_project / "sensor.json")])

        files = _files(temp_project)
        backups = {name for name in files if name.endswith(".bak")}
        assert len(backups) == 4
        for name, content in first.items():
            assert (temp_project / name).read_bytes() == content
        for backup in backups:
            original = backup.rsplit(".", 2)[0]
            assert (temp_project / backup).read_bytes() == first[original]


@pytest.mark.integration
class TestCuckooSensor:
    def test_layout(self, cuckoo_project: Path):
        package = "src/com/example/sensors"
        assert {
            f"{package}/WeatherSensor.java",
            f"{package}/WeatherPoller.java",
            "res/values/weather_values.xml",
            "res/xml/weather_preferences.xml",
            "AndroidManifest.xml",
        } <= _files(cuckoo_project)

    def test_all_xml_is_well_formed(self, cuckoo_project: Path):
        for path in cuckoo_project.rglob("*.xml"):
            ET.parse(path)

    def test_sensor_hands_out_poller(self, cuckoo_project: Path):
        sensor = (cuckoo_project / "src/com/example/sensors/WeatherSensor.java").read_text(encoding="utf-8")
        assert "extends AbstractCuckooSensor" in sensor
        assert "return new WeatherPoller();" in sensor


@pytest.mark.integration
def test_generation_is_deterministic(tmp_path: Path, standard_document: dict[str, Any]):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _generate(first, standard_document)
    _generate(second, standard_document)

    names = _files(first)
    assert names == _files(second)
    for name in names:
        assert (first / name).read_bytes() == (second / name).read_bytes()
