"""Exceptions for dualpush."""

from typing import Any


class DualPushError(Exception):
    """Base exception for all dualpush errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PrerequisiteMissingError(DualPushError):
    """A required external tool is not on the execution path."""


class ValidationError(DualPushError):
    """User input cannot be used as given."""


class InvalidParentError(DualPushError):
    """The parent of an exact target directory does not exist."""


class TargetMissingError(DualPushError):
    """The working copy to reconcile does not exist."""


class TargetAlreadyExistsError(DualPushError):
    """The clone target directory is already present."""


class NotAVersionControlledDirectoryError(DualPushError):
    """The directory is not a git working copy."""


class CloneIntegrityError(DualPushError):
    """git clone reported success but the target directory is absent."""


class RemoteOperationFailedError(DualPushError):
    """A remote configuration step failed."""

    def __init__(
        self,
        message: str,
        step: str,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details={"step": step, "stderr": stderr, **(details or {})})
        self.step = step
        self.stderr = stderr


class CloneFailedError(RemoteOperationFailedError):
    """git clone exited non-zero."""


class IdentityConfigurationError(DualPushError):
    """Setting the local author identity failed."""


class PushFailedError(DualPushError):
    """The synchronize-now push failed.

    Remote configuration applied before the push is kept.
    """


class GitCommandError(DualPushError):
    """A git invocation exited non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        command = " ".join(args)
        super().__init__(
            f"git {command} failed with exit status {returncode}",
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
