"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .services.errors import DependencyMissingError, ExternalCommandFailedError


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    capture_output: bool = True


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = True
        try:
            completed = subprocess.run(list(request.argv), **run_kwargs)
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise DependencyMissingError(
                f"could not run command: {request.argv[0]}"
            ) from exc

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    output = (result.stderr or result.stdout or "").strip()
    command_text = " ".join(request.argv)
    if output:
        return f"command failed: {command_text} (exit {result.returncode})\n{output}"
    return f"command failed: {command_text} (exit {result.returncode})"


def run_checked(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run a command and raise a service error when it cannot complete.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory.
        runner: Optional command runner; defaults to ``subprocess``.

    Returns:
        The successful ``CommandResult``.

    Raises:
        DependencyMissingError: The executable was not found.
        ExternalCommandFailedError: The command exited non-zero.

    Example:
        >>> run_checked(["true"]).returncode
        0
    """
    request = CommandRequest(argv=tuple(cmd), cwd=cwd)
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise DependencyMissingError(f"missing required command: {cmd[0]}")
    if result.returncode != 0:
        raise ExternalCommandFailedError(_command_failure_detail(request, result))
    return result
