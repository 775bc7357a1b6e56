"""Service failure contracts.

Steps raise ServiceError on expected filesystem or external-command failures.
Programmer bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "dependency_missing",
    "external_command_failed",
    "io_failed",
]


class ServiceError(Exception):
    """Expected service failure.

    Use ``raise IoFailedError(...) from exc`` to chain the causing exception;
    it is available as ``__cause__``. Callers catch ServiceError and decide
    whether the failure is fatal for their step.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint

    @property
    def detail(self) -> str:
        """Return the underlying cause text, falling back to the message."""
        if self.__cause__ is not None:
            text = str(self.__cause__).strip()
            if text:
                return text
        return self.message


class ValidationFailedError(ServiceError):
    """Validation failed (invalid input, constraint violation)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class DependencyMissingError(ServiceError):
    """Required executable is missing."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class ExternalCommandFailedError(ServiceError):
    """External command (git, bun, etc.) exited with an error."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("external_command_failed", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceError):
    """Filesystem operation failed (read, write, delete, mkdir)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)
