"""Console prompts that report cancellation as a value instead of exiting."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

import questionary

T = TypeVar("T")


@dataclass(frozen=True)
class Confirmed(Generic[T]):
    """Answer supplied by the user (or a default applied without asking).

    Attributes:
        value: The answer.
    """

    value: T


@dataclass(frozen=True)
class Cancelled:
    """The user aborted the prompt (Ctrl-C, Ctrl-D, or an empty required answer)."""

    reason: str = "aborted"


PromptResult = Confirmed[T] | Cancelled


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def prompt_text(text: str, default: str | None = None) -> PromptResult[str]:
    """Ask a free-text question.

    Args:
        text: Prompt label shown to the user.
        default: Value used when the user just presses enter.

    Returns:
        ``Confirmed`` with the stripped answer, or ``Cancelled`` when the user
        aborts input.

    Example:
        What is the path to your new project? [comet-app]:
    """
    if _use_questionary():
        value = questionary.text(text, default=default or "").ask()
        if value is None:
            return Cancelled()
        return Confirmed(str(value).strip())
    label = f"{text} [{default}]: " if default else f"{text}: "
    try:
        value = input(label).strip()
    except (EOFError, KeyboardInterrupt):
        return Cancelled()
    if value == "" and default is not None:
        value = default
    return Confirmed(value)


def prompt_confirm(text: str, default: bool = False) -> PromptResult[bool]:
    """Ask a yes/no question.

    Args:
        text: Prompt label shown to the user.
        default: Answer used when the user presses enter.

    Returns:
        ``Confirmed`` with the boolean answer, or ``Cancelled`` when the user
        aborts input.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            return Cancelled()
        return Confirmed(bool(response))
    suffix = "[Y/n]" if default else "[y/N]"
    try:
        response = input(f"{text} {suffix}: ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        return Cancelled()
    if response == "":
        return Confirmed(default)
    return Confirmed(response in {"y", "yes"})
