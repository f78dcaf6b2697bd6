"""Component manifest generation.

Renders ``AndroidManifest.xml``: the configuration activity with its
discovery meta-data (entity id, value paths, units, authority, config
defaults), the sensor service, the content provider, and the permissions.
Cuckoo sensors additionally request the push-messaging permissions.
"""

from __future__ import annotations

from typing import Any

from ..schema.models import ConfigSpec, SensorSchema
from .context import ArtifactGenerator, ArtifactKind, Lineage, literal_text

# Manifest meta-data values carry a Java-style suffix for these types.
_TYPE_SUFFIXES: dict[str, str] = {
    "long": "L",
    "double": "D",
}


class ManifestGenerator(ArtifactGenerator):
    """Generates the component manifest."""

    kind = ArtifactKind.MANIFEST
    template = "manifest.xml.j2"

    def build_context(self, schema: SensorSchema, lineage: Lineage) -> dict[str, Any]:
        context = super().build_context(schema, lineage)
        context["configs"] = [
            {**base, "meta_value": _meta_value(config)}
            for base, config in zip(context["configs"], schema.configs)
        ]
        return context


def _meta_value(config: ConfigSpec) -> str:
    """Default value as announced in the manifest, ``null`` when there is none."""
    if not config.has_default:
        return "null"
    suffix = _TYPE_SUFFIXES.get(config.raw_type or "", "")
    return f"{literal_text(config.default_value)}{suffix}"
