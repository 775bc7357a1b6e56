"""Prepare the destination directory, clearing it on confirmed overwrite."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ... import log, paths
from ...io import Cancelled, Confirmed, PromptResult, prompt_confirm
from ...models import ProjectOptions
from ..errors import IoFailedError


class ConfirmPrompt(Protocol):
    """Typed yes/no prompt dependency."""

    def __call__(self, text: str, default: bool = False) -> PromptResult[bool]:
        """Return the answer or a cancellation."""
        ...


def overwrite_question(project_name: str) -> str:
    return f'Directory "{project_name}" is not empty. Overwrite it?'


def prepare_project_directory(
    project_path: Path,
    project_name: str,
    options: ProjectOptions,
    *,
    ask: ConfirmPrompt = prompt_confirm,
) -> PromptResult[Path]:
    """Make ``project_path`` an existing, empty-or-new directory.

    An existing empty directory is reused without asking. A non-empty one is
    cleared when ``options.yes`` is set or the user confirms; declining
    leaves it untouched and cancels.

    Args:
        project_path: Absolute destination path.
        project_name: Name shown in the overwrite question.
        options: Run options.
        ask: Confirmation prompt.

    Returns:
        ``Confirmed(project_path)`` once the directory is ready, otherwise
        ``Cancelled``.

    Raises:
        IoFailedError: The path is not a directory or could not be created
            or cleared.
    """
    try:
        if project_path.exists():
            if not project_path.is_dir():
                raise IoFailedError(f"path exists and is not a directory: {project_path}")
            if not paths.dir_is_empty(project_path):
                if not options.yes:
                    answer = ask(overwrite_question(project_name), False)
                    if isinstance(answer, Cancelled):
                        return answer
                    if not answer.value:
                        return Cancelled("overwrite declined")
                log.debug(f"Clearing {project_path}")
                paths.empty_dir(project_path)
        paths.ensure_dir(project_path)
    except OSError as exc:
        raise IoFailedError(f"could not prepare project directory: {project_path}") from exc
    return Confirmed(project_path)
