"""Shared fixtures for the release-action test suite."""

from pathlib import Path

import pytest

from release_action.core.config import set_config
from release_action.models.artifact import Artifact
from release_test_helpers import FakeReleases, FakeUploader


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def releases() -> FakeReleases:
    return FakeReleases()


@pytest.fixture
def uploader(releases: FakeReleases) -> FakeUploader:
    return FakeUploader(releases)


@pytest.fixture
def artifacts(tmp_path: Path) -> list[Artifact]:
    first = tmp_path / "a" / "art1"
    second = tmp_path / "b" / "art2"
    for path in (first, second):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"blob")
    return [Artifact(path=first), Artifact(path=second)]
