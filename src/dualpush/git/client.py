"""Git command-line client using subprocess."""

import shutil
import subprocess
from pathlib import Path

import structlog

from dualpush.core.exceptions import GitCommandError, PrerequisiteMissingError

logger = structlog.get_logger(__name__)


class GitClient:
    """Thin wrapper over the git executable.

    Every call takes the working directory explicitly; the process
    working directory is never changed. Any non-zero exit status raises
    GitCommandError.
    """

    def __init__(self, executable: str = "git") -> None:
        resolved = shutil.which(executable)
        if resolved is None:
            raise PrerequisiteMissingError(
                f"Required tool not found on PATH: {executable}",
                details={"executable": executable},
            )
        self._executable = resolved

    @property
    def executable(self) -> str:
        return self._executable

    def run(self, cwd: Path, *args: str) -> str:
        """Run a git command in cwd and return stripped stdout."""
        logger.debug("Running git", cwd=str(cwd), args=list(args))
        result = subprocess.run(
            [self._executable, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise GitCommandError(list(args), result.returncode, result.stderr.strip())
        return result.stdout.strip()

    def succeeds(self, cwd: Path, *args: str) -> bool:
        """Run a git query and report only whether it exited zero."""
        try:
            self.run(cwd, *args)
            return True
        except GitCommandError:
            return False

    # Queries

    def is_git_repo(self, path: Path) -> bool:
        return self.succeeds(path, "rev-parse", "--git-dir")

    def has_commits(self, path: Path) -> bool:
        """Whether HEAD resolves to a commit."""
        return self.succeeds(path, "rev-parse", "--verify", "--quiet", "HEAD")

    def list_remotes(self, path: Path) -> str:
        """Verbose remote listing (`git remote -v`)."""
        return self.run(path, "remote", "-v")

    def push_urls_config(self, path: Path, remote: str) -> list[str]:
        """Explicit `pushurl` entries of a remote, empty when none are set."""
        try:
            output = self.run(path, "config", "--get-all", f"remote.{remote}.pushurl")
        except GitCommandError as e:
            # git config exits 1 when the key is missing
            if e.returncode == 1:
                return []
            raise
        return output.splitlines() if output else []

    # Mutations

    def clone(self, url: str, target_dir: Path, remote_name: str = "origin") -> None:
        self.run(target_dir.parent, "clone", "--origin", remote_name, url, str(target_dir))

    def add_remote(self, path: Path, name: str, url: str) -> None:
        self.run(path, "remote", "add", name, url)

    def remote_urls_config(self, path: Path, remote: str) -> list[str]:
        """The `url` entries of a remote in order, empty when none are set."""
        try:
            output = self.run(path, "config", "--get-all", f"remote.{remote}.url")
        except GitCommandError as e:
            if e.returncode == 1:
                return []
            raise
        return output.splitlines() if output else []

    def set_fetch_url(self, path: Path, name: str, url: str) -> None:
        """Make url the first `url` entry of a remote.

        The old first entry is replaced. Other copies of url and of the old
        first entry are dropped, so each URL appears once. The remaining
        entries keep their order.
        """
        urls = self.remote_urls_config(path, name)
        dropped = {url, *urls[:1]}
        kept = [u for u in dict.fromkeys(urls[1:]) if u not in dropped]
        key = f"remote.{name}.url"
        self.run(path, "config", "--replace-all", key, url)
        for extra in kept:
            self.run(path, "config", "--add", key, extra)

    def add_push_url(self, path: Path, name: str, url: str, push_only: bool = False) -> None:
        """Append a URL the remote pushes to.

        Without push_only the URL is added as another `url` entry, which git
        pushes to alongside the fetch URL. With push_only it is added as a
        `pushurl` entry.
        """
        args = ["remote", "set-url", "--add"]
        if push_only:
            args.append("--push")
        self.run(path, *args, name, url)

    def set_identity(self, path: Path, email: str | None = None, name: str | None = None) -> None:
        if email:
            self.run(path, "config", "user.email", email)
        if name:
            self.run(path, "config", "user.name", name)

    def push_all_branches(self, path: Path, remote: str) -> None:
        self.run(path, "push", remote, "--all")

    def push_all_tags(self, path: Path, remote: str) -> None:
        self.run(path, "push", remote, "--tags")

