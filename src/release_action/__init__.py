"""release-action - create or update a GitHub release and upload artifacts."""

__version__ = "0.1.0"
