"""sensormaker configuration.

Typed layout and naming settings for a generated sensor project, as a
pydantic v2 model validated at construction time.  The defaults describe the
standard sensor project layout; the CLI always uses them.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Layout of a generated sensor project.

    Directory names are relative to the project root; file suffixes are
    appended to names derived from the schema.
    """

    src_dir: str = Field(default="src")
    xml_dir: str = Field(default="res/xml")
    values_dir: str = Field(default="res/values")

    manifest_file: str = Field(default="AndroidManifest.xml")
    arrays_suffix: str = Field(default="_values.xml")
    prefs_suffix: str = Field(default="_preferences.xml")
    sensor_suffix: str = Field(default="Sensor.java")
    poller_suffix: str = Field(default="Poller.java")
    backup_extension: str = Field(default=".bak")

    passthrough_prefix: str = Field(
        default="android",
        description="Config keys with this prefix are copied into the preferences XML",
    )
    min_sdk_version: int = Field(default=7, ge=1)
    version_code: int = Field(default=1, ge=1)
    version_name: str = Field(default="1.0")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def src_path(self, root: Path) -> Path:
        """Root of the Java source tree."""
        return root / self.src_dir

    def class_path(self, root: Path, package_dir: PurePath) -> Path:
        """Directory holding the generated classes for *package_dir*."""
        return self.src_path(root) / package_dir

    def xml_path(self, root: Path) -> Path:
        """Directory holding the preferences XML."""
        return root / self.xml_dir

    def values_path(self, root: Path) -> Path:
        """Directory holding the arrays resource."""
        return root / self.values_dir

    def manifest_path(self, root: Path) -> Path:
        return root / self.manifest_file

    def arrays_path(self, root: Path, resource_name: str) -> Path:
        return self.values_path(root) / f"{resource_name}{self.arrays_suffix}"

    def prefs_path(self, root: Path, resource_name: str) -> Path:
        return self.xml_path(root) / f"{resource_name}{self.prefs_suffix}"

    def sensor_path(self, root: Path, package_dir: PurePath, class_prefix: str) -> Path:
        return self.class_path(root, package_dir) / f"{class_prefix}{self.sensor_suffix}"

    def poller_path(self, root: Path, package_dir: PurePath, class_prefix: str) -> Path:
        return self.class_path(root, package_dir) / f"{class_prefix}{self.poller_suffix}"
