"""CLI entry point for release-action."""

import os
from typing import NoReturn

import click
import httpx
from rich.console import Console
from rich.markup import escape

from release_action import __version__
from release_action.core.action import Action
from release_action.core.config import ActionConfig, set_config
from release_action.core.errors import ErrorMessage
from release_action.core.github import GitHubClient, GitHubError, parse_repo_spec
from release_action.core.globber import ArtifactGlobber
from release_action.core.inputs import ActionInputs, InputError
from release_action.core.outputs import write_github_output
from release_action.core.uploader import GitHubArtifactUploader

console = Console()


def _warn_missing(pattern: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] Artifact pattern {escape(pattern)} did not match any files")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    # Workflow command so the runner annotates the failed step.
    console.print(f"::error::{message}", markup=False, highlight=False, soft_wrap=True)
    raise SystemExit(1)


@click.command()
@click.version_option(version=__version__, prog_name="release-action")
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    help="Repository as owner/repo [env: GITHUB_REPOSITORY]",
)
@click.option("--api-url", envvar="GITHUB_API_URL", help="GitHub API base URL [env: GITHUB_API_URL]")
@click.option("--ref", envvar="GITHUB_REF", help="Git ref the tag is derived from [env: GITHUB_REF]")
def main(repository: str | None, api_url: str | None, ref: str | None):
    """Create or update a GitHub release and upload artifacts to it.

    Release settings are read from INPUT_* environment variables, the way
    GitHub Actions passes the inputs of a step (INPUT_TAG, INPUT_ARTIFACTS,
    INPUT_ALLOWUPDATES, ...).

    Examples:

        INPUT_TOKEN=... INPUT_TAG=v1.0.0 INPUT_ARTIFACTS='dist/*' release-action --repository owner/repo
    """
    defaults = ActionConfig.default()
    config = ActionConfig(
        api_url=api_url or defaults.api_url,
        repository=repository or defaults.repository,
        ref=ref or defaults.ref,
        workspace=defaults.workspace,
        output_path=defaults.output_path,
    )
    set_config(config)

    globber = ArtifactGlobber(config.workspace, on_missing=_warn_missing)
    inputs = ActionInputs(os.environ, globber)

    try:
        owner, repo = parse_repo_spec(config.repository)
        token = inputs.token
        tag = inputs.tag
    except (InputError, ValueError) as e:
        _fail(str(e))

    console.print(f"[blue]Publishing release[/blue] [bold]{tag}[/bold] to {owner}/{repo}")

    with GitHubClient(token, owner, repo, base_url=config.api_url) as client:
        uploader = GitHubArtifactUploader(
            client, replaces_artifacts=inputs.replaces_artifacts, console=console
        )
        action = Action(inputs, client, uploader)
        try:
            release = action.perform()
        except GitHubError as e:
            message = ErrorMessage(e)
            if message.has_error_with_code("already_exists") and not inputs.allow_updates:
                _fail(f"{message}. Set allowUpdates to true to update the existing release.")
            _fail(str(message))
        except (InputError, httpx.HTTPError, OSError) as e:
            _fail(str(e))

    if config.output_path is not None:
        write_github_output(
            config.output_path,
            {"id": release.id, "html_url": release.html_url, "upload_url": release.upload_url},
        )

    console.print(f"\n[green]✓[/green] Release [bold]{tag}[/bold] is ready (id {release.id})")


if __name__ == "__main__":
    main()
