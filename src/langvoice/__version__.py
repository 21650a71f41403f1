import tomllib
from importlib import metadata
from pathlib import Path
from typing import Optional

DISTRIBUTION = "langvoice-sdk"


def _source_tree_version() -> Optional[str]:
    """Version from the nearest pyproject.toml declaring this distribution (uninstalled checkouts)."""
    for directory in Path(__file__).resolve().parents:
        candidate = directory / "pyproject.toml"
        if not candidate.is_file():
            continue
        try:
            with open(candidate, "rb") as f:
                project = tomllib.load(f).get("project", {})
        except (OSError, tomllib.TOMLDecodeError):
            return None
        if project.get("name") == DISTRIBUTION and "version" in project:
            return str(project["version"])
        return None
    return None


try:
    __version__ = metadata.version(DISTRIBUTION)
except metadata.PackageNotFoundError:
    __version__ = _source_tree_version() or "unknown"
