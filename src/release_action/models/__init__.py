"""Data models for release-action."""

from release_action.models.artifact import Artifact
from release_action.models.release import ReleaseAsset, ReleaseHandle, ReleaseSummary

__all__ = ["Artifact", "ReleaseAsset", "ReleaseHandle", "ReleaseSummary"]
