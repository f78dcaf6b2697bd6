"""sensormaker scaffolder -- generates sensor project artifacts.

This package takes a ``SensorSchema`` and renders the manifest, the array
and preference resources, the sensor class and, for cuckoo sensors, the
poller class, then writes them with backup-on-overwrite.

Quick usage::

    from sensormaker.schema import load_schema
    from sensormaker.scaffolder import ProjectGenerator

    schema = load_schema("sensors/temperature.json")
    result = ProjectGenerator(schema).generate("sensors")
    for artifact in result.artifacts:
        print(artifact.kind, artifact.path)
"""

from sensormaker.scaffolder.context import ArtifactKind, Lineage
from sensormaker.scaffolder.generator import (
    GenerationResult,
    ProjectGenerator,
    ProjectLayout,
    WrittenArtifact,
)
from sensormaker.scaffolder.templates import TemplateRenderer
from sensormaker.scaffolder.writer import ProjectWriter

__all__ = [
    "ArtifactKind",
    "Lineage",
    "GenerationResult",
    "ProjectGenerator",
    "ProjectLayout",
    "WrittenArtifact",
    "TemplateRenderer",
    "ProjectWriter",
]
