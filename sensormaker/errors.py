"""Exception hierarchy and exit codes for sensormaker.

Every failure the generator can hit is raised as a ``SensorMakerError``
subclass close to where it is detected.  Each subclass carries the stable
process exit code for its category, so the CLI can report and terminate in
exactly one place (:func:`sensormaker.pipeline.report_and_exit`).
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    """Stable process exit codes, one per failure category."""

    WRONG_ARGS = 1
    SCHEMA_UNREADABLE = 2
    PARSING_SCHEMA = 3
    NO_NAMESPACE = 4
    NO_NAME = 5
    NOT_A_RECORD = 6
    PROJECT_NOT_DIR = 7
    MKDIR = 8
    DIR_WRITE = 9
    FILE_NOT_WRITE = 10
    FILE_NOT_FILE = 11
    FILE_NOT_FOUND = 12
    UNABLE_TO_BACKUP = 13
    WRITING_ARRAYS = 14
    WRITING_PREFS = 15
    SCHEMA_PARSE = 16
    WRITING_MANIFEST = 17
    WRITING_CLASS = 18
    WRITING_CLASS_IMPL = 19


EXIT_MESSAGES: dict[ExitCode, str] = {
    ExitCode.WRONG_ARGS: "Incorrect number of arguments.",
    ExitCode.SCHEMA_UNREADABLE: "Schema file does not exist or is unreadable.",
    ExitCode.PARSING_SCHEMA: "Error parsing the schema:",
    ExitCode.NO_NAMESPACE: "Schema must have a namespace.",
    ExitCode.NO_NAME: "Schema must have a name.",
    ExitCode.NOT_A_RECORD: "Root schema must be a record.",
    ExitCode.PROJECT_NOT_DIR: "Unable to create project directory:",
    ExitCode.MKDIR: "Error making the project directory:",
    ExitCode.DIR_WRITE: "Unable to write to project directory:",
    ExitCode.FILE_NOT_WRITE: "File is not writable:",
    ExitCode.FILE_NOT_FILE: "File is not a file:",
    ExitCode.FILE_NOT_FOUND: "File not found:",
    ExitCode.UNABLE_TO_BACKUP: "Unable to backup file:",
    ExitCode.WRITING_ARRAYS: "Error writing arrays.",
    ExitCode.WRITING_PREFS: "Error writing preferences.",
    ExitCode.SCHEMA_PARSE: "Error parsing schema.",
    ExitCode.WRITING_MANIFEST: "Error writing the manifest",
    ExitCode.WRITING_CLASS: "Error writing sensor class",
    ExitCode.WRITING_CLASS_IMPL: "Error writing sensor implementation class",
}


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class SensorMakerError(Exception):
    """Base class for every error the generator reports to the user.

    Attributes:
        code: Process exit code for this failure.
        detail: Optional underlying cause, printed on its own line.
    """

    code: ExitCode = ExitCode.SCHEMA_PARSE

    def __init__(self, detail: Optional[str] = None, *, code: Optional[ExitCode] = None) -> None:
        if code is not None:
            self.code = code
        self.detail = detail
        super().__init__(self.summary if detail is None else f"{self.summary} {detail}")

    @property
    def summary(self) -> str:
        """The one-line description for this error's exit code."""
        return EXIT_MESSAGES[self.code]


# ---------------------------------------------------------------------------
# Usage errors
# ---------------------------------------------------------------------------


class UsageError(SensorMakerError):
    """Wrong command line."""

    code = ExitCode.WRONG_ARGS


class SchemaUnreadable(SensorMakerError):
    """The schema path does not exist or cannot be read."""

    code = ExitCode.SCHEMA_UNREADABLE


# ---------------------------------------------------------------------------
# Schema errors
# ---------------------------------------------------------------------------


class SchemaParseError(SensorMakerError):
    """The schema document is not valid JSON."""

    code = ExitCode.PARSING_SCHEMA


class NotARecord(SensorMakerError):
    """The root JSON value is not an object."""

    code = ExitCode.NOT_A_RECORD


class SchemaInvalid(SensorMakerError):
    """The document is JSON but its structure cannot be read as a schema."""

    code = ExitCode.SCHEMA_PARSE


class MissingRequiredField(SensorMakerError):
    """A REQUIRED schema property is absent or empty.

    ``namespace`` and ``name`` at the root map to their own exit codes; any
    other property falls back to the generic schema code.
    """

    _ROOT_CODES = {
        "namespace": ExitCode.NO_NAMESPACE,
        "name": ExitCode.NO_NAME,
    }

    def __init__(
        self,
        prop: str,
        schema_name: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> None:
        self.prop = prop
        self.schema_name = schema_name
        self.namespace = namespace
        where = ".".join(p for p in (namespace, schema_name) if p)
        detail = f"Missing required property '{prop}'"
        if where:
            detail += f" in schema '{where}'"
        super().__init__(detail, code=self._ROOT_CODES.get(prop, ExitCode.SCHEMA_PARSE))


class InvalidIdentifier(SensorMakerError, ValueError):
    """An identifier transform was given an empty string."""

    code = ExitCode.SCHEMA_PARSE


# ---------------------------------------------------------------------------
# Render errors
# ---------------------------------------------------------------------------


def _kind(artifact: object) -> str:
    return artifact.value if isinstance(artifact, Enum) else str(artifact)


# Artifact kind -> exit code of the stage that renders it.
ARTIFACT_CODES: dict[str, ExitCode] = {
    "manifest": ExitCode.WRITING_MANIFEST,
    "arrays": ExitCode.WRITING_ARRAYS,
    "preferences": ExitCode.WRITING_PREFS,
    "sensor": ExitCode.WRITING_CLASS,
    "poller": ExitCode.WRITING_CLASS_IMPL,
}


class RenderError(SensorMakerError):
    """Base for failures raised while rendering one artifact.

    The exit code is the one for the stage rendering *artifact*.

    Attributes:
        artifact: The artifact kind being rendered (e.g. ``"arrays"``).
    """

    def __init__(self, artifact: str, detail: str) -> None:
        self.artifact = _kind(artifact)
        super().__init__(detail, code=ARTIFACT_CODES.get(self.artifact, ExitCode.SCHEMA_PARSE))


class SchemaIncomplete(RenderError):
    """A renderer needed a REQUIRED property the schema does not have."""

    def __init__(self, artifact: str, prop: str, cause: Optional[MissingRequiredField] = None) -> None:
        artifact = _kind(artifact)
        self.prop = prop
        self.cause = cause
        detail = f"{artifact}: missing required property '{prop}'"
        if cause is not None and cause.detail:
            detail = f"{artifact}: {cause.detail}"
        super().__init__(artifact, detail)


class UnsupportedValueKind(RenderError):
    """An enumerated value set declares a type other than the supported arrays."""

    def __init__(self, value_name: str, kind: str) -> None:
        self.value_name = value_name
        self.kind = kind
        super().__init__("arrays", f"Unsupported values type: {kind} (value '{value_name}')")


class InvalidValueItem(RenderError):
    """An ``integer-array`` value set contains a non-integer item."""

    def __init__(self, value_name: str, item: object) -> None:
        self.value_name = value_name
        self.item = item
        super().__init__("arrays", f"Value '{value_name}' item {item!r} is not an integer")


# ---------------------------------------------------------------------------
# Filesystem errors
# ---------------------------------------------------------------------------


class MaterializeError(SensorMakerError):
    """Base for failures while creating directories or writing artifacts.

    Attributes:
        path: The directory or file that could not be handled.
    """

    def __init__(self, path: object, detail: Optional[str] = None) -> None:
        self.path = path
        super().__init__(detail if detail is not None else str(path))


class NotADirectory(MaterializeError):
    code = ExitCode.PROJECT_NOT_DIR

    def __init__(self, path: object) -> None:
        super().__init__(path, f"The file: {path} exists and is not a directory.")


class DirectoryCreateError(MaterializeError):
    code = ExitCode.MKDIR


class DirectoryNotWritable(MaterializeError):
    code = ExitCode.DIR_WRITE


class FileNotWritable(MaterializeError):
    code = ExitCode.FILE_NOT_WRITE


class NotAFile(MaterializeError):
    code = ExitCode.FILE_NOT_FILE


class FileMissing(MaterializeError):
    code = ExitCode.FILE_NOT_FOUND


class BackupFailed(MaterializeError):
    code = ExitCode.UNABLE_TO_BACKUP
