"""Main scaffolding orchestrator.

Takes a ``SensorSchema`` and generates a sensor project directory in fixed
stages:

1. layout      -- project, source, class and resource directories
2. manifest    -- ``AndroidManifest.xml``
3. arrays      -- ``res/values/<name>_values.xml``
4. preferences -- ``res/xml/<name>_preferences.xml``
5. sensor      -- ``src/<namespace>/<Title>Sensor.java``
6. poller      -- ``src/<namespace>/<Title>Poller.java`` (cuckoo lineage only)

Each stage renders its text and writes it before the next stage starts.
There is no rollback: a failure leaves earlier artifacts on disk.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import GeneratorConfig
from ..schema.models import SensorSchema
from .arrays_gen import ArraysGenerator
from .context import ArtifactGenerator, ArtifactKind, Lineage
from .identifiers import namespace_path, resource_case, title_case
from .manifest_gen import ManifestGenerator
from .poller_gen import PollerGenerator
from .prefs_gen import PreferencesGenerator
from .sensor_gen import SensorGenerator
from .templates import TemplateRenderer
from .writer import ProjectWriter


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class WrittenArtifact(BaseModel):
    """One artifact written during a run."""

    kind: ArtifactKind
    path: Path
    backup: Optional[Path] = Field(default=None, description="Backup of the overwritten file")


class ProjectLayout(BaseModel):
    """Directories and artifact paths of one generated project."""

    model_config = ConfigDict(frozen=True)

    root: Path
    src_dir: Path
    class_dir: Path
    xml_dir: Path
    values_dir: Path
    artifacts: dict[ArtifactKind, Path]

    @property
    def directories(self) -> list[Path]:
        """Directories in creation order."""
        return [self.root, self.src_dir, self.class_dir, self.xml_dir, self.values_dir]


class GenerationResult(BaseModel):
    """Outcome of a successful run."""

    root: Path
    lineage: Lineage
    artifacts: list[WrittenArtifact] = Field(default_factory=list)

    def paths(self) -> dict[ArtifactKind, Path]:
        return {artifact.kind: artifact.path for artifact in self.artifacts}

    def as_summary(self) -> dict[str, str]:
        """Label -> value mapping for the console summary table."""
        summary = {"Project": str(self.root), "Lineage": self.lineage.value}
        for artifact in self.artifacts:
            value = str(artifact.path)
            if artifact.backup is not None:
                value += f" (backup: {artifact.backup.name})"
            summary[artifact.kind.value.capitalize()] = value
        return summary


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Generates every artifact of a sensor project from one schema.

    The lineage is read from the schema once, here, and passed to every
    renderer, so a run can never mix standard and cuckoo output.
    """

    def __init__(
        self,
        schema: SensorSchema,
        config: GeneratorConfig | None = None,
        *,
        renderer: TemplateRenderer | None = None,
        writer: ProjectWriter | None = None,
    ) -> None:
        self.schema = schema
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self.writer = writer or ProjectWriter(self.config)
        self.lineage = Lineage.for_schema(schema)
        self.generators: dict[ArtifactKind, ArtifactGenerator] = {
            ArtifactKind.MANIFEST: ManifestGenerator(self.renderer, self.config),
            ArtifactKind.ARRAYS: ArraysGenerator(self.renderer, self.config),
            ArtifactKind.PREFERENCES: PreferencesGenerator(self.renderer, self.config),
            ArtifactKind.SENSOR: SensorGenerator(self.renderer, self.config),
            ArtifactKind.POLLER: PollerGenerator(self.renderer, self.config),
        }

    # -- Public API --------------------------------------------------------

    def generate(self, project_root: str | Path) -> GenerationResult:
        """Generate the complete project under *project_root*.

        Raises:
            MissingRequiredField: If the schema has no namespace or name;
                raised before anything is created on disk.
            RenderError: If an artifact cannot be rendered.
            MaterializeError: If a directory or file cannot be written.
        """
        layout = self.plan_layout(project_root)

        # 1. Create the directory structure
        for directory in layout.directories:
            self.writer.ensure_directory(directory)

        # 2-6. Render and write each artifact in order
        result = GenerationResult(root=layout.root, lineage=self.lineage)
        for kind in self.artifact_kinds():
            text = self.render(kind)
            path = layout.artifacts[kind]
            backup = self.writer.write_artifact(path, text)
            result.artifacts.append(WrittenArtifact(kind=kind, path=path, backup=backup))
        return result

    def artifact_kinds(self) -> list[ArtifactKind]:
        """Artifacts produced for this schema, in generation order."""
        kinds = [
            ArtifactKind.MANIFEST,
            ArtifactKind.ARRAYS,
            ArtifactKind.PREFERENCES,
            ArtifactKind.SENSOR,
        ]
        if self.lineage.has_poller:
            kinds.append(ArtifactKind.POLLER)
        return kinds

    def render(self, kind: ArtifactKind) -> str:
        """Render one artifact without touching the filesystem."""
        return self.generators[kind].render(self.schema, self.lineage)

    def render_all(self) -> dict[ArtifactKind, str]:
        """Render every artifact of this schema without writing anything."""
        return {kind: self.render(kind) for kind in self.artifact_kinds()}

    # -- Layout ------------------------------------------------------------

    def plan_layout(self, project_root: str | Path) -> ProjectLayout:
        """Compute every directory and artifact path for *project_root*.

        Reads ``namespace`` before ``name``, so a schema missing both
        reports the namespace.
        """
        namespace = self.schema.namespace
        name = self.schema.name
        root = Path(project_root)
        package_dir: PurePath = namespace_path(namespace)
        class_prefix = title_case(name)
        resource_name = resource_case(name)
        cfg = self.config

        artifacts = {
            ArtifactKind.MANIFEST: cfg.manifest_path(root),
            ArtifactKind.ARRAYS: cfg.arrays_path(root, resource_name),
            ArtifactKind.PREFERENCES: cfg.prefs_path(root, resource_name),
            ArtifactKind.SENSOR: cfg.sensor_path(root, package_dir, class_prefix),
            ArtifactKind.POLLER: cfg.poller_path(root, package_dir, class_prefix),
        }
        return ProjectLayout(
            root=root,
            src_dir=cfg.src_path(root),
            class_dir=cfg.class_path(root, package_dir),
            xml_dir=cfg.xml_path(root),
            values_dir=cfg.values_path(root),
            artifacts=artifacts,
        )
