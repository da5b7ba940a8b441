"""Action inputs, as passed by the GitHub Actions runner."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from release_action.core.config import ActionConfig, get_config
from release_action.core.globber import ArtifactGlobber
from release_action.models.artifact import DEFAULT_CONTENT_TYPE, Artifact


TAG_REF_PREFIX = "refs/tags/"


class InputError(Exception):
    """A required input is missing or cannot be resolved."""

    pass


class Inputs(Protocol):
    """Read-only view of the resolved action configuration."""

    @property
    def allow_updates(self) -> bool: ...

    @property
    def artifacts(self) -> list[Artifact]: ...

    @property
    def commit(self) -> str: ...

    @property
    def created_release_body(self) -> str | None: ...

    @property
    def created_release_name(self) -> str | None: ...

    @property
    def draft(self) -> bool: ...

    @property
    def prerelease(self) -> bool: ...

    @property
    def replaces_artifacts(self) -> bool: ...

    @property
    def tag(self) -> str: ...

    @property
    def token(self) -> str: ...


class ActionInputs:
    """Inputs read from ``INPUT_*`` environment variables.

    Values are read on every access, so a missing tag or token only fails
    when it is actually needed.

    Body and name keep three states: the given text, an empty string, or
    None when the matching ``omit*`` flag asks to leave the field out.
    """

    def __init__(
        self,
        environ: Mapping[str, str],
        globber: ArtifactGlobber,
        config: ActionConfig | None = None,
    ):
        self.environ = environ
        self.globber = globber
        self.config = config or get_config()

    def get_input(self, name: str, required: bool = False) -> str:
        key = "INPUT_" + name.replace(" ", "_").upper()
        value = self.environ.get(key, "").strip()
        if required and not value:
            raise InputError(f"Input required and not supplied: {name}")
        return value

    def _flag(self, name: str) -> bool:
        return self.get_input(name) == "true"

    @property
    def allow_updates(self) -> bool:
        return self._flag("allowUpdates")

    @property
    def artifacts(self) -> list[Artifact]:
        artifacts = self.get_input("artifacts") or self.get_input("artifact")
        if not artifacts:
            return []
        content_type = self.get_input("artifactContentType") or DEFAULT_CONTENT_TYPE
        return self.globber.glob_artifact_string(artifacts, content_type)

    @property
    def body(self) -> str:
        body = self.get_input("body")
        if body:
            return body

        body_file = self.get_input("bodyFile")
        if body_file:
            return self.string_from_file(body_file)

        return ""

    @property
    def commit(self) -> str:
        return self.get_input("commit")

    @property
    def created_release_body(self) -> str | None:
        if self._flag("omitBody"):
            return None
        return self.body

    @property
    def name(self) -> str:
        return self.get_input("name") or self.tag

    @property
    def created_release_name(self) -> str | None:
        if self._flag("omitName"):
            return None
        return self.name

    @property
    def draft(self) -> bool:
        return self._flag("draft")

    @property
    def prerelease(self) -> bool:
        return self._flag("prerelease")

    @property
    def replaces_artifacts(self) -> bool:
        return self._flag("replacesArtifacts")

    @property
    def tag(self) -> str:
        tag = self.get_input("tag")
        if tag:
            return tag

        ref = self.config.ref
        if ref.startswith(TAG_REF_PREFIX) and len(ref) > len(TAG_REF_PREFIX):
            return ref[len(TAG_REF_PREFIX):]

        raise InputError("No tag found in ref or input!")

    @property
    def token(self) -> str:
        return self.get_input("token", required=True)

    def string_from_file(self, path: str) -> str:
        file_path = Path(path).expanduser()
        if not file_path.is_absolute():
            file_path = self.config.workspace / file_path
        try:
            return file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise InputError(f"Could not read bodyFile {path}: {e}") from e
