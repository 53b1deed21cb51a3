"""Platform URL helpers."""

import re
from urllib.parse import urlsplit


def repo_name_from_url(url: str) -> str:
    """Derive a local folder name from a repository URL.

    Handles:
    - https://host/org/repo.git -> repo
    - git@host:org/repo.git -> repo
    - git@host:repo.git -> repo
    - /srv/git/repo/ -> repo
    - https://host/ -> "" (no path to name the folder after)
    """
    trimmed = url.strip()
    if "://" in trimmed:
        path = urlsplit(trimmed).path
    else:
        # scp-style user@host:path
        scp_match = re.match(r"[^/]*:(.*)", trimmed)
        path = scp_match.group(1) if scp_match else trimmed
    segment = path.rstrip("/").rsplit("/", 1)[-1]
    # Strip .git suffix
    return re.sub(r"\.git$", "", segment)
