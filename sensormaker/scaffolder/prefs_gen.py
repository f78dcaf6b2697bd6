"""Preference screen generation.

Renders ``res/xml/<name>_preferences.xml``: a value path picker bound to the
``<name>_valuepaths`` array, and one preference widget per config.  Config
keys starting with the passthrough prefix (``android`` by default) are
copied onto the widget verbatim.
"""

from __future__ import annotations

from typing import Any

from ..schema.models import SensorSchema
from .context import ArtifactGenerator, ArtifactKind, Lineage, literal_text


class PreferencesGenerator(ArtifactGenerator):
    """Generates the preferences descriptor."""

    kind = ArtifactKind.PREFERENCES
    template = "preferences.xml.j2"

    def build_context(self, schema: SensorSchema, lineage: Lineage) -> dict[str, Any]:
        context = super().build_context(schema, lineage)
        prefix = self.config.passthrough_prefix
        context["configs"] = [
            {
                **base,
                "widget": config.widget,
                "passthrough": [
                    (key, literal_text(value)) for key, value in config.passthrough(prefix)
                ],
            }
            for base, config in zip(context["configs"], schema.configs)
        ]
        return context
