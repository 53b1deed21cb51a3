"""Repository state probe."""

from pathlib import Path

import structlog

from dualpush.core.exceptions import NotAVersionControlledDirectoryError, TargetMissingError
from dualpush.core.models.remote import RemoteSpec
from dualpush.core.models.repository import RepoState
from dualpush.git.client import GitClient

logger = structlog.get_logger(__name__)


def parse_remote_listing(listing: str) -> dict[str, RemoteSpec]:
    """Parse `git remote -v` output into structured remotes.

    Each line reads `<name>\\t<url> (fetch|push)`. A remote's push URLs keep
    their listing order.
    """
    fetch: dict[str, str] = {}
    push: dict[str, list[str]] = {}
    for line in listing.splitlines():
        line = line.strip()
        if not line:
            continue
        name, _, rest = line.partition("\t")
        if not rest:
            name, _, rest = line.partition(" ")
        url, _, role = rest.rstrip().rpartition(" ")
        url = url.strip()
        if role == "(fetch)":
            fetch.setdefault(name, url)
        elif role == "(push)":
            push.setdefault(name, []).append(url)

    remotes = {}
    for name in dict.fromkeys([*fetch, *push]):
        urls = push.get(name, [])
        remotes[name] = RemoteSpec(
            name=name,
            fetch_url=fetch.get(name, urls[0] if urls else ""),
            push_urls=urls,
        )
    return remotes


class RepositoryProbe:
    """Reads the state of a working copy through git."""

    def __init__(self, git: GitClient) -> None:
        self._git = git

    def verify(self, path: Path) -> None:
        """Check that path exists and is a working copy, without reading remotes."""
        if not path.is_dir():
            raise TargetMissingError(
                f"Directory does not exist: {path}",
                details={"path": str(path)},
            )
        if not self._git.is_git_repo(path):
            raise NotAVersionControlledDirectoryError(
                f"Not a git repository: {path}",
                details={"path": str(path)},
            )

    def probe(self, path: Path) -> RepoState:
        """Probe a directory that must be an existing working copy."""
        self.verify(path)
        state = RepoState(
            path=path,
            has_commits=self._git.has_commits(path),
            remotes=self.remotes(path),
        )
        logger.debug(
            "Probed working copy",
            path=str(path),
            has_commits=state.has_commits,
            remotes=list(state.remotes),
        )
        return state

    def has_commits(self, path: Path) -> bool:
        return self._git.has_commits(path)

    def remotes(self, path: Path) -> dict[str, RemoteSpec]:
        remotes = parse_remote_listing(self._git.list_remotes(path))
        for name, spec in remotes.items():
            if self._git.push_urls_config(path, name):
                remotes[name] = spec.model_copy(update={"explicit_push": True})
        return remotes

    def remote(self, path: Path, name: str) -> RemoteSpec | None:
        return self.remotes(path).get(name)
