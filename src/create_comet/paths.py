"""Path helpers for locating templates and preparing project directories."""

from __future__ import annotations

import shutil
from importlib import resources
from pathlib import Path

PACKAGE_NAME = "create_comet"
TEMPLATES_DIRNAME = "templates"
MANIFEST_FILENAME = "package.json"


def templates_root() -> Path:
    """Return the directory holding every bundled template.

    Returns:
        Path to ``create_comet/templates`` inside the installed package.

    Example:
        >>> templates_root().name == TEMPLATES_DIRNAME
        True
    """
    return Path(str(resources.files(PACKAGE_NAME).joinpath(TEMPLATES_DIRNAME)))


def template_dir(name: str) -> Path:
    """Return the root of the bundled template called ``name``.

    Example:
        >>> template_dir("default").name
        'default'
    """
    return templates_root() / name


def resolve_project_path(project_name: str, cwd: Path) -> Path:
    """Resolve a project name or path against ``cwd``.

    Args:
        project_name: Relative or absolute path typed by the user.
        cwd: Base directory for relative paths.

    Returns:
        Absolute, normalized project path.

    Example:
        >>> resolve_project_path("demo", Path("/work")).as_posix()
        '/work/demo'
    """
    candidate = Path(project_name).expanduser()
    if not candidate.is_absolute():
        candidate = cwd / candidate
    return candidate.resolve()


def dir_is_empty(path: Path) -> bool:
    """Return true when ``path`` has no entries (hidden files count)."""
    return next(path.iterdir(), None) is None


def ensure_dir(path: Path) -> None:
    """Create ``path`` and any missing parents; no-op when it exists."""
    path.mkdir(parents=True, exist_ok=True)


def empty_dir(path: Path) -> None:
    """Delete ``path`` recursively and recreate it empty."""
    shutil.rmtree(path)
    ensure_dir(path)
