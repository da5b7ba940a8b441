"""Artifact data model."""

from dataclasses import dataclass
from pathlib import Path


DEFAULT_CONTENT_TYPE = "raw"


@dataclass(frozen=True)
class Artifact:
    """A local file to attach to a release."""

    path: Path
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def name(self) -> str:
        """Asset name used on the release (the file's basename)."""
        return Path(self.path).name

    def read_bytes(self) -> bytes:
        """Read the artifact contents. Files are only read at upload time."""
        return Path(self.path).read_bytes()
