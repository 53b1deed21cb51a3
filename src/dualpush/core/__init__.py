"""Core domain models and exceptions for dualpush."""

from dualpush.core.exceptions import (
    CloneFailedError,
    CloneIntegrityError,
    DualPushError,
    GitCommandError,
    IdentityConfigurationError,
    InvalidParentError,
    NotAVersionControlledDirectoryError,
    PrerequisiteMissingError,
    PushFailedError,
    RemoteOperationFailedError,
    TargetAlreadyExistsError,
    TargetMissingError,
    ValidationError,
)
from dualpush.core.models import (
    OperationKind,
    PlatformChoice,
    ReconciliationPlan,
    RemoteOperation,
    RemoteSpec,
    RepoState,
    Scenario,
    ScenarioRequest,
    ScenarioResult,
)

__all__ = [
    # Models
    "RemoteSpec",
    "RepoState",
    "OperationKind",
    "RemoteOperation",
    "ReconciliationPlan",
    "Scenario",
    "PlatformChoice",
    "ScenarioRequest",
    "ScenarioResult",
    # Exceptions
    "DualPushError",
    "PrerequisiteMissingError",
    "ValidationError",
    "InvalidParentError",
    "TargetMissingError",
    "TargetAlreadyExistsError",
    "NotAVersionControlledDirectoryError",
    "CloneIntegrityError",
    "RemoteOperationFailedError",
    "CloneFailedError",
    "IdentityConfigurationError",
    "PushFailedError",
    "GitCommandError",
]
