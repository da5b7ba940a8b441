"""Configuration taken from the GitHub Actions runner environment."""

from collections.abc import Mapping
from pathlib import Path
from dataclasses import dataclass
import os

from release_action.core.github import GITHUB_API_BASE


@dataclass
class ActionConfig:
    """Runner context for one release-action run."""

    api_url: str
    repository: str
    ref: str
    workspace: Path
    output_path: Path | None = None

    @classmethod
    def default(cls, environ: Mapping[str, str] | None = None) -> "ActionConfig":
        """Create config from the runner's environment variables."""
        env = os.environ if environ is None else environ
        output = env.get("GITHUB_OUTPUT")
        return cls(
            api_url=env.get("GITHUB_API_URL") or GITHUB_API_BASE,
            repository=env.get("GITHUB_REPOSITORY", ""),
            ref=env.get("GITHUB_REF", ""),
            workspace=Path(env.get("GITHUB_WORKSPACE") or Path.cwd()),
            output_path=Path(output) if output else None,
        )


# Global config instance
_config: ActionConfig | None = None


def get_config() -> ActionConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ActionConfig.default()
    return _config


def set_config(config: ActionConfig | None) -> None:
    """Set a custom configuration (useful for testing)."""
    global _config
    _config = config
