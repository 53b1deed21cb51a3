"""Path resolution for clone targets."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from dualpush.core.exceptions import InvalidParentError, TargetAlreadyExistsError, ValidationError
from dualpush.git.url import repo_name_from_url


class PathMode(str, Enum):
    """How a user-supplied path was interpreted."""

    EXACT = "exact"  # the path is the target directory
    PARENT = "parent"  # the path contains the target directory


class ResolvedPath(BaseModel):
    target_dir: Path
    parent_dir: Path
    mode: PathMode


class PathResolver:
    """Resolves a user-supplied path into an absolute clone target.

    A path that does not exist is the exact target directory. A path that
    exists is a container, and the target is a child named after the
    repository. Nothing is created here; git clone creates the target.
    """

    def resolve(self, path: str | Path, repo_url: str) -> ResolvedPath:
        candidate = Path(path).expanduser().absolute()

        if not candidate.exists():
            parent = candidate.parent
            if not parent.is_dir():
                raise InvalidParentError(
                    f"Parent directory does not exist: {parent}",
                    details={"path": str(candidate), "parent": str(parent)},
                )
            return ResolvedPath(target_dir=candidate, parent_dir=parent, mode=PathMode.EXACT)

        if not candidate.is_dir():
            raise InvalidParentError(
                f"Not a directory: {candidate}",
                details={"path": str(candidate)},
            )

        repo_name = repo_name_from_url(repo_url)
        if not repo_name:
            raise ValidationError(
                f"Cannot derive a repository name from URL: {repo_url}",
                details={"url": repo_url},
            )

        target = candidate / repo_name
        if target.exists():
            raise TargetAlreadyExistsError(
                f"Target directory already exists: {target}",
                details={"path": str(target)},
            )
        return ResolvedPath(target_dir=target, parent_dir=candidate, mode=PathMode.PARENT)
