"""Scenario request and result models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from dualpush.core.models.plan import ReconciliationPlan
from dualpush.core.models.remote import RemoteSpec


class Scenario(str, Enum):
    """What a single invocation does."""

    CLONE_PRIMARY = "clone-primary"
    CLONE_SECONDARY = "clone-secondary"
    RECONCILE = "reconcile"

    @property
    def clones(self) -> bool:
        return self != Scenario.RECONCILE


class PlatformChoice(str, Enum):
    """Which of the two platform URLs is the source of truth."""

    A = "a"
    B = "b"


class ScenarioRequest(BaseModel):
    """User intent for one invocation."""

    scenario: Scenario
    path: Path
    platform_a_url: str
    platform_b_url: str
    primary_choice: PlatformChoice = PlatformChoice.A
    identity_email: str | None = None
    identity_name: str | None = None
    synchronize_now: bool = False
    remote_name: str = "origin"
    dry_run: bool = False

    @property
    def b_is_primary(self) -> bool:
        if self.scenario == Scenario.CLONE_SECONDARY:
            return True
        return self.scenario == Scenario.RECONCILE and self.primary_choice == PlatformChoice.B

    @property
    def primary_url(self) -> str:
        """The fetch URL: the called platform when cloning, else the chosen one."""
        return self.platform_b_url if self.b_is_primary else self.platform_a_url

    @property
    def secondary_url(self) -> str:
        return self.platform_a_url if self.b_is_primary else self.platform_b_url

    @property
    def wants_identity(self) -> bool:
        return bool(self.identity_email or self.identity_name)


class ScenarioResult(BaseModel):
    """What an invocation did."""

    scenario: Scenario
    target_dir: Path
    plan: ReconciliationPlan
    final_remote: RemoteSpec | None = None
    synchronized: bool = False
    dry_run: bool = False
    warnings: list[str] = Field(default_factory=list)
