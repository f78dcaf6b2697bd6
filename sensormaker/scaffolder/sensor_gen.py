"""Primary sensor class generation.

Renders ``<Title>Sensor.java``.  The lineage decides the base class and the
lifecycle methods:

* ``STANDARD`` extends ``AbstractVdbSensor`` and gets the ``onConnected``,
  ``register``, ``unregister`` and ``onDestroySensor`` hooks.
* ``CUCKOO`` extends ``AbstractCuckooSensor``, drops those hooks, and gets
  ``getPoller`` plus a push-message receiver that stores incoming readings.
"""

from __future__ import annotations

from typing import Any

from ..schema.models import ConfigSpec, SensorSchema
from .context import ArtifactGenerator, ArtifactKind, Lineage, config_constant, literal_text
from .identifiers import title_case
from .templates import java_string


class SensorGenerator(ArtifactGenerator):
    """Generates the primary sensor class."""

    kind = ArtifactKind.SENSOR
    template = "sensor.java.j2"

    def build_context(self, schema: SensorSchema, lineage: Lineage) -> dict[str, Any]:
        context = super().build_context(schema, lineage)
        context["fields"] = [
            {
                **base,
                "type": field.type,
                "accessor": title_case(field.type),
                "parameter": f"{field.type} {base['name']}",
            }
            for base, field in zip(context["fields"], schema.fields)
        ]
        context["defaults"] = [
            _default_entry(config) for config in schema.configs if config.has_default
        ]
        return context


def _default_entry(config: ConfigSpec) -> dict[str, str]:
    """One ``defaults.put<Type>(CONSTANT, literal)`` call."""
    type_name = title_case(config.type)
    if type_name == "String":
        literal = f'"{java_string(literal_text(config.default_value))}"'
    else:
        literal = literal_text(config.default_value)
    return {
        "method": f"put{type_name}",
        "constant": config_constant(config.name),
        "literal": literal,
    }
