"""Pytest configuration and fixtures."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from dualpush.git.client import GitClient

AUTHOR = ["-c", "user.email=test@test.com", "-c", "user.name=Test"]


def run_git(cwd: Path, *args: str) -> str:
    """Run git for test setup, failing the test on error."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def make_bare(path: Path) -> Path:
    """Create a bare repository whose HEAD points at main."""
    path.parent.mkdir(parents=True, exist_ok=True)
    run_git(path.parent, "init", "--bare", path.name)
    run_git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    return path


def make_working_copy(path: Path, commit: bool = True) -> Path:
    """Create a non-bare repository on main, optionally with one commit."""
    path.mkdir(parents=True)
    run_git(path, "init")
    run_git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    if commit:
        (path / "README.md").write_text("# Test Repo\n")
        run_git(path, "add", ".")
        run_git(path, *AUTHOR, "commit", "-m", "Initial commit")
    return path


def remote_urls(path: Path, name: str = "origin") -> tuple[list[str], list[str]]:
    """(fetch URLs, push URLs) as listed by `git remote -v`."""
    fetch, push = [], []
    for line in run_git(path, "remote", "-v").splitlines():
        remote, rest = line.split("\t", 1)
        if remote != name:
            continue
        url, role = rest.rsplit(" ", 1)
        (fetch if role == "(fetch)" else push).append(url)
    return fetch, push


@dataclass
class Platforms:
    """Two bare repositories standing in for the hosting platforms."""

    a: Path
    b: Path

    @property
    def url_a(self) -> str:
        return str(self.a)

    @property
    def url_b(self) -> str:
        return str(self.b)


@pytest.fixture
def git() -> GitClient:
    return GitClient()


@pytest.fixture
def platforms(tmp_path: Path) -> Platforms:
    """Platform A holds one commit on main and tag v1; platform B is empty."""
    a = make_bare(tmp_path / "platform-a" / "repo.git")
    b = make_bare(tmp_path / "platform-b" / "repo.git")

    seed = make_working_copy(tmp_path / "seed")
    run_git(seed, "tag", "v1")
    run_git(seed, "push", str(a), "main", "--tags")
    return Platforms(a=a, b=b)


@pytest.fixture
def empty_platforms(tmp_path: Path) -> Platforms:
    """Both platforms are empty repositories."""
    return Platforms(
        a=make_bare(tmp_path / "platform-a" / "repo.git"),
        b=make_bare(tmp_path / "platform-b" / "repo.git"),
    )


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path
