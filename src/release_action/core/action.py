"""Create or update a release for a tag, then upload its artifacts."""

from release_action.core.errors import NotFound, classify_failure
from release_action.core.github import Releases
from release_action.core.inputs import Inputs
from release_action.core.uploader import ArtifactUploader
from release_action.models.release import ReleaseHandle


class Action:
    """Decide between creating and updating a release, then upload.

    With updates disallowed a release is always created. Otherwise the
    published release for the tag is updated; if there is none (the lookup
    fails with a 404) a draft release with the same tag is updated instead,
    and only when no such draft exists is a new release created. Drafts
    cannot be fetched by tag, hence the scan over all releases.

    Every failure other than the 404 on lookup propagates unchanged.
    """

    def __init__(self, inputs: Inputs, releases: Releases, uploader: ArtifactUploader):
        self.inputs = inputs
        self.releases = releases
        self.uploader = uploader

    def perform(self) -> ReleaseHandle:
        release = self.create_or_update_release()

        artifacts = self.inputs.artifacts
        if artifacts:
            self.uploader.upload_artifacts(artifacts, release.id, release.upload_url)

        return release

    def create_or_update_release(self) -> ReleaseHandle:
        if not self.inputs.allow_updates:
            return self.create_release()

        try:
            existing = self.releases.get_by_tag(self.inputs.tag)
        except Exception as error:
            if not isinstance(classify_failure(error), NotFound):
                raise
            existing = None

        if existing is None:
            return self.update_draft_or_create_release()
        return self.update_release(existing.id)

    def update_draft_or_create_release(self) -> ReleaseHandle:
        draft_release_id = self.find_matching_draft_release_id()
        if draft_release_id is not None:
            return self.update_release(draft_release_id)
        return self.create_release()

    def find_matching_draft_release_id(self) -> int | None:
        tag = self.inputs.tag
        for release in self.releases.list_releases():
            if release.draft and release.tag_name == tag:
                return release.id
        return None

    def update_release(self, id: int) -> ReleaseHandle:
        return self.releases.update(
            id,
            self.inputs.tag,
            self.inputs.created_release_body,
            self.inputs.commit,
            self.inputs.draft,
            self.inputs.created_release_name,
            self.inputs.prerelease,
        )

    def create_release(self) -> ReleaseHandle:
        return self.releases.create(
            self.inputs.tag,
            self.inputs.created_release_body,
            self.inputs.commit,
            self.inputs.draft,
            self.inputs.created_release_name,
            self.inputs.prerelease,
        )
