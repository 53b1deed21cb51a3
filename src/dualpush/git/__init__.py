"""Git integration module for dualpush."""

from dualpush.git.client import GitClient
from dualpush.git.probe import RepositoryProbe, parse_remote_listing
from dualpush.git.url import repo_name_from_url

__all__ = ["GitClient", "RepositoryProbe", "parse_remote_listing", "repo_name_from_url"]
