"""GitHub release data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseHandle:
    """A release that was just created or updated."""

    id: int
    upload_url: str
    html_url: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "ReleaseHandle":
        """Create ReleaseHandle from GitHub API response."""
        return cls(
            id=data["id"],
            upload_url=data["upload_url"],
            html_url=data.get("html_url", ""),
        )


@dataclass(frozen=True)
class ReleaseSummary:
    """Represents a release as returned by lookups and listings."""

    id: int
    draft: bool
    tag_name: str

    @classmethod
    def from_api_response(cls, data: dict) -> "ReleaseSummary":
        """Create ReleaseSummary from GitHub API response."""
        return cls(
            id=data["id"],
            draft=data.get("draft", False),
            tag_name=data.get("tag_name", ""),
        )


@dataclass(frozen=True)
class ReleaseAsset:
    """An asset already attached to a release."""

    id: int
    name: str

    @classmethod
    def from_api_response(cls, data: dict) -> "ReleaseAsset":
        """Create ReleaseAsset from GitHub API response."""
        return cls(id=data["id"], name=data["name"])
