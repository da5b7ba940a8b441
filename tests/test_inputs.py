"""Tests for reading action inputs from the environment."""

from pathlib import Path

import pytest

from release_action.core.config import ActionConfig
from release_action.core.globber import ArtifactGlobber
from release_action.core.inputs import ActionInputs, InputError


def make_inputs(
    tmp_path: Path, ref: str = "", **inputs: str
) -> ActionInputs:
    environ = {f"INPUT_{key.upper()}": value for key, value in inputs.items()}
    config = ActionConfig(
        api_url="https://api.github.com",
        repository="octo/hello",
        ref=ref,
        workspace=tmp_path,
    )
    return ActionInputs(environ, ArtifactGlobber(tmp_path), config)


def test_flags_are_true_only_for_literal_true(tmp_path: Path):
    inputs = make_inputs(
        tmp_path, allowUpdates="true", draft="True", prerelease="yes", replacesArtifacts=" true "
    )

    assert inputs.allow_updates is True
    assert inputs.draft is False
    assert inputs.prerelease is False
    assert inputs.replaces_artifacts is True


def test_flags_default_to_false(tmp_path: Path):
    inputs = make_inputs(tmp_path)

    assert not inputs.allow_updates
    assert not inputs.draft
    assert not inputs.prerelease
    assert not inputs.replaces_artifacts


def test_tag_input_wins_over_ref(tmp_path: Path):
    inputs = make_inputs(tmp_path, ref="refs/tags/v2", tag="v1")

    assert inputs.tag == "v1"


def test_tag_from_ref(tmp_path: Path):
    assert make_inputs(tmp_path, ref="refs/tags/v1.2.3").tag == "v1.2.3"


@pytest.mark.parametrize("ref", ["", "refs/heads/main", "refs/tags/"])
def test_missing_tag_raises(tmp_path: Path, ref: str):
    inputs = make_inputs(tmp_path, ref=ref)

    with pytest.raises(InputError, match="No tag found"):
        inputs.tag


def test_token_is_required(tmp_path: Path):
    with pytest.raises(InputError, match="token"):
        make_inputs(tmp_path).token

    assert make_inputs(tmp_path, token="abc").token == "abc"


def test_body_from_input(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1", body="Notes", bodyFile="ignored.md")

    assert inputs.created_release_body == "Notes"


def test_body_from_file(tmp_path: Path):
    (tmp_path / "notes.md").write_text("From file\n", encoding="utf-8")
    inputs = make_inputs(tmp_path, tag="v1", bodyFile="notes.md")

    assert inputs.created_release_body == "From file\n"


def test_unreadable_body_file_raises(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1", bodyFile="missing.md")

    with pytest.raises(InputError, match="missing.md"):
        inputs.created_release_body


def test_body_defaults_to_empty_string(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1")

    assert inputs.created_release_body == ""


def test_omit_body_removes_body(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1", body="Notes", omitBody="true")

    assert inputs.created_release_body is None


def test_name_defaults_to_tag(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1")

    assert inputs.created_release_name == "v1"


def test_omit_name_removes_name(tmp_path: Path):
    inputs = make_inputs(tmp_path, tag="v1", name="First", omitName="true")

    assert inputs.created_release_name is None


def test_name_input_wins_over_tag(tmp_path: Path):
    assert make_inputs(tmp_path, tag="v1", name="First").created_release_name == "First"


def test_commit_passthrough(tmp_path: Path):
    assert make_inputs(tmp_path, commit="abc123").commit == "abc123"
    assert make_inputs(tmp_path).commit == ""


def test_no_artifacts_input_means_empty_list(tmp_path: Path):
    assert make_inputs(tmp_path).artifacts == []


def test_artifacts_are_globbed_with_content_type(tmp_path: Path):
    (tmp_path / "a.zip").write_bytes(b"a")
    (tmp_path / "b.zip").write_bytes(b"b")
    inputs = make_inputs(tmp_path, artifacts="*.zip", artifactContentType="application/zip")

    artifacts = inputs.artifacts

    assert [a.name for a in artifacts] == ["a.zip", "b.zip"]
    assert {a.content_type for a in artifacts} == {"application/zip"}


def test_singular_artifact_input_and_default_content_type(tmp_path: Path):
    (tmp_path / "a.zip").write_bytes(b"a")
    inputs = make_inputs(tmp_path, artifact="a.zip")

    assert [(a.name, a.content_type) for a in inputs.artifacts] == [("a.zip", "raw")]


def test_input_names_with_spaces(tmp_path: Path):
    environ = {"INPUT_RELEASE_NOTES": "x"}
    inputs = ActionInputs(
        environ,
        ArtifactGlobber(tmp_path),
        ActionConfig(api_url="", repository="", ref="", workspace=tmp_path),
    )

    assert inputs.get_input("release notes") == "x"
