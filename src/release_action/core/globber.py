"""Expand artifact glob patterns into artifacts."""

from collections.abc import Callable
from glob import has_magic
from pathlib import Path, PurePath, PurePosixPath

from release_action.models.artifact import Artifact


def glob_root_and_pattern(candidate: PurePath) -> tuple[str, str]:
    """Return the filesystem root and relative glob pattern for ``candidate``."""
    anchor = candidate.anchor
    if not anchor:
        raise ValueError(f"Expected absolute path, received '{candidate}'")

    root_text = (candidate.drive + candidate.root) or anchor
    relative_parts = candidate.parts[1:]
    pattern = PurePosixPath(*relative_parts).as_posix() if relative_parts else "*"
    return root_text, pattern


class ArtifactGlobber:
    """Turn a comma separated list of patterns into artifacts.

    Relative patterns are resolved against ``workspace``. Patterns that
    match nothing are reported through ``on_missing`` and skipped.
    """

    def __init__(
        self,
        workspace: Path,
        on_missing: Callable[[str], None] | None = None,
    ):
        self.workspace = workspace
        self.on_missing = on_missing

    def glob_artifact_string(self, artifacts: str, content_type: str) -> list[Artifact]:
        results: list[Artifact] = []
        for pattern in artifacts.split(","):
            pattern = pattern.strip()
            if not pattern:
                continue
            paths = self.glob_pattern(pattern)
            if not paths and self.on_missing is not None:
                self.on_missing(pattern)
            results.extend(Artifact(path=path, content_type=content_type) for path in paths)
        return results

    def glob_pattern(self, pattern: str) -> list[Path]:
        candidate = Path(pattern).expanduser()
        if not candidate.is_absolute():
            candidate = self.workspace / candidate

        if not has_magic(pattern):
            return [candidate] if candidate.is_file() else []

        root, relative = glob_root_and_pattern(candidate)
        return sorted(path for path in Path(root).glob(relative) if path.is_file())
