"""Scaffold a new project: name, directory, template copy, git, install."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from ... import log, paths, setup_steps, templates
from ...io import Cancelled, prompt_confirm, prompt_text
from ...models import ProjectOptions, ProjectResult
from ..base import BaseService
from ..errors import ServiceError
from ..result import ServiceResult, service_cancelled, service_failure, service_success
from .prepare_directory import ConfirmPrompt, prepare_project_directory
from .resolve_project_name import TextPrompt, resolve_project_name

GIT_QUESTION = "Initialize a git repository?"
INSTALL_QUESTION = "Install dependencies?"


class CreateProjectRequest(BaseModel):
    """Input contract for project creation.

    Attributes:
        project_directory: Positional CLI argument, when given.
        options: Immutable run options.
    """

    project_directory: str | None = None
    options: ProjectOptions

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class CreateProjectDependencies:
    ask_text: TextPrompt = prompt_text
    ask_confirm: ConfirmPrompt = prompt_confirm
    template_dir: Callable[[str], Path] = paths.template_dir
    copy_template: Callable[[Path, Path, str], list[str]] = templates.copy_template
    initialize_git: Callable[..., bool] = setup_steps.initialize_git
    install_dependencies: Callable[..., bool] = setup_steps.install_dependencies


class CreateProjectService(BaseService[CreateProjectRequest, ServiceResult[ProjectResult]]):
    """Run the scaffolding steps in order and summarize the outcome.

    Cancelling the project-name or overwrite prompt stops the run with
    ``ServiceCancelled``. Directory or template failures are logged and
    returned as ``ServiceFailure``. Git and install failures are recorded in
    the result and never stop the run.
    """

    def __init__(self, dependencies: CreateProjectDependencies | None = None) -> None:
        self._deps = dependencies or CreateProjectDependencies()

    def _run(self, request: CreateProjectRequest) -> ServiceResult[ProjectResult]:
        options = request.options

        name = resolve_project_name(
            request.project_directory, options, ask=self._deps.ask_text
        )
        if isinstance(name, Cancelled):
            return service_cancelled(name.reason)
        project_name = name.value
        project_path = paths.resolve_project_path(project_name, options.cwd)
        log.debug(f"Project path: {project_path}")

        prepared = prepare_project_directory(
            project_path, project_name, options, ask=self._deps.ask_confirm
        )
        if isinstance(prepared, Cancelled):
            return service_cancelled(prepared.reason)

        try:
            self._deps.copy_template(
                self._deps.template_dir(options.template), project_path, project_name
            )
        except ServiceError as exc:
            log.log_error("Could not create project from template.", exc)
            return service_failure(
                code=exc.code,
                message=str(exc),
                recovery_hint=exc.recovery_hint,
            )

        git_initialized = False
        if self._confirm_step(options, GIT_QUESTION):
            git_initialized = self._deps.initialize_git(
                project_path, git_command=options.git_command
            )

        dependencies_installed = False
        if self._confirm_step(options, INSTALL_QUESTION):
            dependencies_installed = self._deps.install_dependencies(
                project_path, package_manager=options.package_manager
            )

        return service_success(
            ProjectResult(
                project_name=project_name,
                git_initialized=git_initialized,
                dependencies_installed=dependencies_installed,
                template=options.template,
            )
        )

    def _confirm_step(self, options: ProjectOptions, question: str) -> bool:
        if options.yes:
            return True
        answer = self._deps.ask_confirm(question, True)
        if isinstance(answer, Cancelled):
            return False
        return answer.value

    def _handle_failure(self, error: ServiceError) -> ServiceResult[ProjectResult]:
        log.log_error("Could not prepare project directory.", error)
        return service_failure(
            code=error.code,
            message=str(error),
            recovery_hint=error.recovery_hint,
        )


def create_project(
    project_directory: str | None,
    options: ProjectOptions,
    *,
    dependencies: CreateProjectDependencies | None = None,
) -> ServiceResult[ProjectResult]:
    """Scaffold a project with default service wiring.

    Args:
        project_directory: Target directory, or ``None`` to ask/default.
        options: Immutable run options.
        dependencies: Optional overrides for prompts and steps.

    Returns:
        ``ServiceSuccess`` with the ``ProjectResult``, ``ServiceCancelled``
        when the user backed out, or ``ServiceFailure`` on a fatal error.
    """
    service = CreateProjectService(dependencies)
    return service(CreateProjectRequest(project_directory=project_directory, options=options))
