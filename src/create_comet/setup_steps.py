"""Optional post-copy steps: version-control init and dependency install.

Both steps report their outcome as a boolean and never raise for expected
command failures, so the caller can keep going and record the result.
"""

from __future__ import annotations

from pathlib import Path

from . import exec, log
from .services.errors import ServiceError


def initialize_git(
    project_path: Path,
    *,
    git_command: str = "git",
    runner: exec.CommandRunner | None = None,
) -> bool:
    """Run ``git init`` inside ``project_path``.

    Returns:
        ``True`` when the repository was initialized.
    """
    try:
        with log.status("Initializing git repository..."):
            exec.run_checked([git_command, "init"], cwd=project_path, runner=runner)
    except ServiceError as exc:
        log.error("✗ Failed to initialize git. Is git installed?")
        log.log_error("Could not initialize git repository.", exc)
        return False
    log.success("✓ Git repository initialized.")
    return True


def install_dependencies(
    project_path: Path,
    *,
    package_manager: str = "bun",
    runner: exec.CommandRunner | None = None,
) -> bool:
    """Run ``<package_manager> install`` inside ``project_path``.

    On failure a hint for running the install by hand is printed.

    Returns:
        ``True`` when dependencies were installed.
    """
    try:
        with log.status(f"Installing dependencies with {package_manager}..."):
            exec.run_checked([package_manager, "install"], cwd=project_path, runner=runner)
    except ServiceError as exc:
        log.error("✗ Failed to install dependencies.")
        log.log_error("Dependency installation failed.", exc)
        log.warning(f"You can try running '{package_manager} install' manually.")
        return False
    log.success("✓ Dependencies installed.")
    return True
