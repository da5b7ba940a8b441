"""GitHub API client for creating, updating and decorating releases."""

import re
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from release_action.models.release import ReleaseAsset, ReleaseHandle, ReleaseSummary


GITHUB_API_BASE = "https://api.github.com"
PER_PAGE = 100
UPLOAD_TIMEOUT = 300.0


class GitHubError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        errors: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors or []

    @classmethod
    def from_response(cls, response: httpx.Response) -> "GitHubError":
        """Build an error from a failed API response."""
        message = response.reason_phrase or "Request failed"
        errors: list[dict] = []
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            message = data.get("message") or message
            raw_errors = data.get("errors")
            if isinstance(raw_errors, list):
                errors = [e for e in raw_errors if isinstance(e, dict)]
        return cls(
            f"{response.request.method} {response.request.url.path} failed: {message}",
            status=response.status_code,
            errors=errors,
        )


def parse_repo_spec(spec: str) -> tuple[str, str]:
    """Parse a repo spec into (owner, repo).

    Accepts:
    - owner/repo
    - https://github.com/owner/repo
    - github.com/owner/repo
    """
    # Handle full URLs
    url_pattern = r"(?:https?://)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$"
    match = re.match(url_pattern, spec)
    if match:
        return match.group(1), match.group(2)

    # Handle owner/repo format
    if "/" in spec:
        parts = spec.split("/")
        if len(parts) == 2 and all(parts):
            return parts[0], parts[1]

    raise ValueError(f"Invalid repo spec: {spec!r}. Use 'owner/repo' or GitHub URL.")


def expand_upload_url(upload_url: str) -> str:
    """Strip the RFC 6570 template suffix (``{?name,label}``) from an upload URL."""
    return re.sub(r"\{[^}]*\}$", "", upload_url)


class Releases(Protocol):
    """Release operations the action relies on."""

    def get_by_tag(self, tag: str) -> ReleaseSummary: ...

    def list_releases(self) -> list[ReleaseSummary]: ...

    def create(
        self,
        tag: str,
        body: str | None,
        commit: str,
        draft: bool,
        name: str | None,
        prerelease: bool,
    ) -> ReleaseHandle: ...

    def update(
        self,
        id: int,
        tag: str,
        body: str | None,
        commit: str,
        draft: bool,
        name: str | None,
        prerelease: bool,
    ) -> ReleaseHandle: ...

    def list_artifacts_for_release(self, release_id: int) -> list[ReleaseAsset]: ...

    def delete_artifact(self, asset_id: int) -> None: ...

    def upload_artifact(
        self,
        upload_url: str,
        content_length: int,
        content_type: str,
        data: bytes,
        name: str,
    ) -> None: ...


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise GitHubError(
            f"Unexpected non-JSON response from {response.request.url.path}",
            status=response.status_code,
        ) from e


def _parse(model: Any, data: Any) -> Any:
    """Build ``model`` from an API payload, or raise GitHubError if it is malformed."""
    try:
        return model.from_api_response(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise GitHubError(f"Unexpected API response for {model.__name__}: {e!r}") from e


def _release_payload(
    tag: str,
    body: str | None,
    commit: str,
    draft: bool,
    name: str | None,
    prerelease: bool,
) -> dict:
    # None means "leave the field out"; an empty string is sent as-is.
    payload: dict = {"tag_name": tag, "draft": draft, "prerelease": prerelease}
    if commit:
        payload["target_commitish"] = commit
    if body is not None:
        payload["body"] = body
    if name is not None:
        payload["name"] = name
    return payload


class GitHubClient:
    """Client for the release endpoints of one repository."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = GITHUB_API_BASE,
        transport: httpx.BaseTransport | None = None,
    ):
        self.owner = owner
        self.repo = repo
        self.client = httpx.Client(
            base_url=base_url,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=30.0,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        response = self.client.request(method, url, **kwargs)
        if response.is_error:
            raise GitHubError.from_response(response)
        return response

    def _paginate(self, url: str) -> list[dict]:
        """Collect every item of a paginated listing, in API order."""
        items: list[dict] = []
        next_url: str | None = url
        params: dict | None = {"per_page": PER_PAGE}
        while next_url:
            response = self._request("GET", next_url, params=params)
            page = _json(response)
            if not isinstance(page, list):
                raise GitHubError(
                    f"Expected a list from {response.request.url.path}",
                    status=response.status_code,
                )
            items.extend(page)
            # The next link already carries the query string.
            next_url = response.links.get("next", {}).get("url")
            params = None
        return items

    def get_by_tag(self, tag: str) -> ReleaseSummary:
        """Get a published release by tag name. Drafts are not found here."""
        response = self._request("GET", f"{self._repo_path}/releases/tags/{quote(tag, safe='')}")
        return _parse(ReleaseSummary, _json(response))

    def list_releases(self) -> list[ReleaseSummary]:
        """List all releases of the repository, drafts included."""
        return [
            _parse(ReleaseSummary, data)
            for data in self._paginate(f"{self._repo_path}/releases")
        ]

    def create(
        self,
        tag: str,
        body: str | None,
        commit: str,
        draft: bool,
        name: str | None,
        prerelease: bool,
    ) -> ReleaseHandle:
        """Create a release for ``tag``."""
        response = self._request(
            "POST",
            f"{self._repo_path}/releases",
            json=_release_payload(tag, body, commit, draft, name, prerelease),
        )
        return _parse(ReleaseHandle, _json(response))

    def update(
        self,
        id: int,
        tag: str,
        body: str | None,
        commit: str,
        draft: bool,
        name: str | None,
        prerelease: bool,
    ) -> ReleaseHandle:
        """Update the release with the given id."""
        response = self._request(
            "PATCH",
            f"{self._repo_path}/releases/{id}",
            json=_release_payload(tag, body, commit, draft, name, prerelease),
        )
        return _parse(ReleaseHandle, _json(response))

    def list_artifacts_for_release(self, release_id: int) -> list[ReleaseAsset]:
        """List the assets attached to a release."""
        return [
            _parse(ReleaseAsset, data)
            for data in self._paginate(f"{self._repo_path}/releases/{release_id}/assets")
        ]

    def delete_artifact(self, asset_id: int) -> None:
        """Delete a release asset."""
        self._request("DELETE", f"{self._repo_path}/releases/assets/{asset_id}")

    def upload_artifact(
        self,
        upload_url: str,
        content_length: int,
        content_type: str,
        data: bytes,
        name: str,
    ) -> None:
        """Upload one asset to a release's upload endpoint."""
        self._request(
            "POST",
            expand_upload_url(upload_url),
            params={"name": name},
            content=data,
            headers={
                "Content-Length": str(content_length),
                "Content-Type": content_type,
            },
            timeout=UPLOAD_TIMEOUT,
        )
