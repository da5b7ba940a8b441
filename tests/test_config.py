"""Tests for runner configuration and outputs."""

from pathlib import Path

from release_action.core.config import ActionConfig, get_config, set_config
from release_action.core.github import GITHUB_API_BASE
from release_action.core.outputs import write_github_output


def test_default_reads_runner_environment(tmp_path: Path):
    config = ActionConfig.default(
        {
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "GITHUB_REPOSITORY": "octo/hello",
            "GITHUB_REF": "refs/tags/v1",
            "GITHUB_WORKSPACE": str(tmp_path),
            "GITHUB_OUTPUT": str(tmp_path / "out.txt"),
        }
    )

    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.repository == "octo/hello"
    assert config.ref == "refs/tags/v1"
    assert config.workspace == tmp_path
    assert config.output_path == tmp_path / "out.txt"


def test_default_fallbacks():
    config = ActionConfig.default({})

    assert config.api_url == GITHUB_API_BASE
    assert config.repository == ""
    assert config.workspace == Path.cwd()
    assert config.output_path is None


def test_set_config_overrides_global(tmp_path: Path):
    config = ActionConfig(api_url="", repository="a/b", ref="", workspace=tmp_path)

    set_config(config)

    assert get_config() is config


def test_write_github_output_appends_multiline_values(tmp_path: Path):
    output = tmp_path / "gh" / "output.txt"
    output.parent.mkdir()
    output.write_text("existing=1\n", encoding="utf-8")

    write_github_output(output, {"id": 101, "html_url": "https://x"})

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "existing=1"
    assert lines[1].startswith("id<<EOF_")
    assert lines[2] == "101"
    assert lines[3] == lines[1].split("<<", 1)[1]
    assert lines[4].startswith("html_url<<EOF_")
    assert lines[5] == "https://x"
