"""Project scaffolding service modules."""

from .create_project import (
    CreateProjectDependencies,
    CreateProjectRequest,
    CreateProjectService,
    create_project,
)
from .prepare_directory import prepare_project_directory
from .resolve_project_name import resolve_project_name

__all__ = [
    "CreateProjectDependencies",
    "CreateProjectRequest",
    "CreateProjectService",
    "create_project",
    "prepare_project_directory",
    "resolve_project_name",
]
