"""Domain models for dualpush."""

from dualpush.core.models.plan import OperationKind, ReconciliationPlan, RemoteOperation
from dualpush.core.models.remote import RemoteSpec
from dualpush.core.models.repository import RepoState
from dualpush.core.models.scenario import (
    PlatformChoice,
    Scenario,
    ScenarioRequest,
    ScenarioResult,
)

__all__ = [
    "RemoteSpec",
    "RepoState",
    "OperationKind",
    "RemoteOperation",
    "ReconciliationPlan",
    "Scenario",
    "PlatformChoice",
    "ScenarioRequest",
    "ScenarioResult",
]
