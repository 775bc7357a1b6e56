"""Decide the project name from the CLI argument, defaults, or a prompt."""

from __future__ import annotations

from typing import Protocol

from ...io import Cancelled, Confirmed, PromptResult, prompt_text
from ...models import DEFAULT_PROJECT_NAME, ProjectOptions

PROJECT_NAME_QUESTION = "What is the path to your new project?"


class TextPrompt(Protocol):
    """Typed free-text prompt dependency."""

    def __call__(self, text: str, default: str | None = None) -> PromptResult[str]:
        """Return the answer or a cancellation."""
        ...


def resolve_project_name(
    project_directory: str | None,
    options: ProjectOptions,
    *,
    ask: TextPrompt = prompt_text,
) -> PromptResult[str]:
    """Return the project name to scaffold.

    A non-blank ``project_directory`` wins. Otherwise ``--yes`` applies the
    default name, and an interactive run asks for one. Leaving the answer
    empty counts as cancelling.

    Example:
        >>> resolve_project_name(None, ProjectOptions(yes=True))
        Confirmed(value='comet-app')
    """
    if project_directory is not None and project_directory.strip():
        return Confirmed(project_directory.strip())
    if options.yes:
        return Confirmed(DEFAULT_PROJECT_NAME)
    answer = ask(PROJECT_NAME_QUESTION, DEFAULT_PROJECT_NAME)
    if isinstance(answer, Cancelled):
        return answer
    if not answer.value:
        return Cancelled("no project name given")
    return answer
