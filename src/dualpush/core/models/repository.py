"""Working copy models."""

from pathlib import Path

from pydantic import BaseModel, Field

from dualpush.core.models.remote import RemoteSpec


class RepoState(BaseModel):
    """What the probe found in a working copy."""

    path: Path
    exists: bool = True
    is_version_controlled: bool = True
    # False for an empty repository, but also for a detached or corrupt HEAD.
    has_commits: bool = False
    remotes: dict[str, RemoteSpec] = Field(default_factory=dict)

    def remote(self, name: str) -> RemoteSpec | None:
        return self.remotes.get(name)
