"""Helpers for writing GitHub Actions outputs."""

import uuid
from collections.abc import Mapping
from pathlib import Path


def write_github_output(file: Path, values: Mapping[str, object]) -> None:
    """Append ``values`` to ``file`` using GitHub's multiline syntax.

    Args:
        file: Path to the GitHub Actions output file (``GITHUB_OUTPUT``)
        values: Output names mapped to values; values are written with str()
    """
    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        for key, value in values.items():
            delimiter = f"EOF_{uuid.uuid4().hex}"
            handle.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
