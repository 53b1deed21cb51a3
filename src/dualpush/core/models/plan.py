"""Reconciliation plan models."""

from enum import Enum

from pydantic import BaseModel, Field


class OperationKind(str, Enum):
    """Remote mutations the reconciler may emit. There is no removal."""

    CREATE_REMOTE = "create-remote"
    SET_FETCH_URL = "set-fetch-url"
    ADD_PUSH_URL = "add-push-url"


class RemoteOperation(BaseModel):
    """A single idempotent remote configuration step."""

    kind: OperationKind
    remote: str
    url: str
    previous_url: str | None = None  # fetch URL being replaced
    push_only: bool = False  # add as `pushurl` instead of `url`

    def describe(self) -> str:
        if self.kind == OperationKind.CREATE_REMOTE:
            return f"create remote {self.remote} fetching from {self.url}"
        if self.kind == OperationKind.SET_FETCH_URL:
            return f"set {self.remote} fetch URL {self.previous_url} -> {self.url}"
        return f"add push URL {self.url} to {self.remote}"

    class Config:
        frozen = True


class ReconciliationPlan(BaseModel):
    """Ordered remote operations derived from a topology diff."""

    remote: str
    primary_url: str
    secondary_url: str
    operations: list[RemoteOperation] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.operations

    @property
    def kinds(self) -> list[OperationKind]:
        return [op.kind for op in self.operations]
