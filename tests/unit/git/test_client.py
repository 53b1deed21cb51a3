"""Tests for the git client."""

from pathlib import Path

import pytest

from dualpush.core.exceptions import GitCommandError, PrerequisiteMissingError
from dualpush.git.client import GitClient
from tests.conftest import make_working_copy, run_git


@pytest.mark.unit
class TestGitClientSetup:
    """Tests for locating the git executable."""

    def test_missing_executable(self) -> None:
        with pytest.raises(PrerequisiteMissingError) as exc_info:
            GitClient("definitely-not-git-xyz")
        assert exc_info.value.details["executable"] == "definitely-not-git-xyz"


@pytest.mark.integration
class TestGitClient:
    """Tests for GitClient against a real repository."""

    def test_run_failure_raises(self, git: GitClient, tmp_path: Path) -> None:
        with pytest.raises(GitCommandError) as exc_info:
            git.run(tmp_path, "rev-parse", "--verify", "HEAD")
        assert exc_info.value.returncode != 0

    def test_is_git_repo(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        assert git.is_git_repo(repo) is True
        assert git.is_git_repo(tmp_path) is False

    def test_set_fetch_url_with_several_urls(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        git.add_remote(repo, "origin", "https://h/a.git")
        git.add_push_url(repo, "origin", "https://h/b.git")

        git.set_fetch_url(repo, "origin", "https://h/c.git")

        urls = run_git(repo, "config", "--get-all", "remote.origin.url").splitlines()
        assert urls == ["https://h/c.git", "https://h/b.git"]

    def test_set_fetch_url_drops_copies(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        git.add_remote(repo, "origin", "https://h/b.git")
        for url in ("https://h/b.git", "https://h/a.git", "https://h/c.git"):
            git.add_push_url(repo, "origin", url)

        git.set_fetch_url(repo, "origin", "https://h/a.git")

        assert git.remote_urls_config(repo, "origin") == ["https://h/a.git", "https://h/c.git"]

    def test_remote_urls_config_absent(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        assert git.remote_urls_config(repo, "origin") == []

    def test_push_urls_config_absent(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        git.add_remote(repo, "origin", "https://h/a.git")
        assert git.push_urls_config(repo, "origin") == []

    def test_set_identity(self, git: GitClient, tmp_path: Path) -> None:
        repo = make_working_copy(tmp_path / "repo")
        git.set_identity(repo, email="me@example.com", name="Me")
        assert run_git(repo, "config", "--local", "user.email") == "me@example.com"
        assert run_git(repo, "config", "--local", "user.name") == "Me"
