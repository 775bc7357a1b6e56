"""Pydantic models for scaffolding configuration and results."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROJECT_NAME = "comet-app"
TEMPLATE_VALUES = ("default",)
TemplateName = Literal["default"]


class ProjectOptions(BaseModel):
    """Immutable options threaded through every scaffolding step.

    Attributes:
        yes: Skip every confirmation and apply defaults.
        cwd: Base directory for resolving relative project paths.
        template: Bundled template to copy.
        git_command: Version-control executable used for ``init``.
        package_manager: Package-manager executable used for ``install``.

    Example:
        >>> ProjectOptions(yes=True).package_manager
        'bun'
    """

    model_config = ConfigDict(frozen=True)

    yes: bool = False
    cwd: Path = Field(default_factory=Path.cwd)
    template: TemplateName = "default"
    git_command: str = "git"
    package_manager: str = "bun"

    @field_validator("git_command", "package_manager", mode="before")
    @classmethod
    def normalize_command(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip()
            if not normalized:
                raise ValueError("command must not be empty")
            return normalized
        return value


class ProjectResult(BaseModel):
    """Summary of a completed scaffolding run.

    Attributes:
        project_name: Name written into the manifest and used for the directory.
        git_initialized: Whether ``git init`` succeeded.
        dependencies_installed: Whether the dependency install succeeded.
        template: Template the project was created from.

    Example:
        >>> ProjectResult(project_name="demo", git_initialized=True,
        ...               dependencies_installed=False).template
        'default'
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    git_initialized: bool
    dependencies_installed: bool
    template: TemplateName = "default"
