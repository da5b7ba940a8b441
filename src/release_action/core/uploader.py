"""Upload artifacts to a release."""

from typing import Protocol

from rich.console import Console

from release_action.core.github import Releases
from release_action.models.artifact import Artifact


class ArtifactUploader(Protocol):
    """Uploads a batch of artifacts to one release."""

    def upload_artifacts(
        self, artifacts: list[Artifact], release_id: int, upload_url: str
    ) -> None: ...


class GitHubArtifactUploader:
    """Upload artifacts one by one, stopping at the first failure.

    With ``replaces_artifacts`` set, assets already attached to the release
    under the same name as an artifact are deleted before uploading.
    """

    def __init__(
        self,
        releases: Releases,
        replaces_artifacts: bool = False,
        console: Console | None = None,
    ):
        self.releases = releases
        self.replaces_artifacts = replaces_artifacts
        self.console = console or Console()

    def upload_artifacts(
        self, artifacts: list[Artifact], release_id: int, upload_url: str
    ) -> None:
        if self.replaces_artifacts:
            self.delete_updated_artifacts(artifacts, release_id)

        for artifact in artifacts:
            self.upload_artifact(artifact, upload_url)

    def upload_artifact(self, artifact: Artifact, upload_url: str) -> None:
        data = artifact.read_bytes()
        self.console.print(f"  Uploading [cyan]{artifact.name}[/cyan] ({len(data)} bytes)")
        self.releases.upload_artifact(
            upload_url,
            len(data),
            artifact.content_type,
            data,
            artifact.name,
        )

    def delete_updated_artifacts(self, artifacts: list[Artifact], release_id: int) -> None:
        """Delete existing assets that are about to be uploaded again."""
        names = {artifact.name for artifact in artifacts}
        for asset in self.releases.list_artifacts_for_release(release_id):
            if asset.name in names:
                self.console.print(f"  Deleting existing asset [yellow]{asset.name}[/yellow]")
                self.releases.delete_artifact(asset.id)
