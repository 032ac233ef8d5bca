"""Normalization of git remote URLs to HTTPS base URLs."""

import re

_SCP_LIKE = re.compile(r"^git@([^:]+):(.+)$")


def convert_to_https(url: str) -> str:
    """Normalize a git remote URL to an HTTPS base URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - ssh://git@github.com/org/repo.git -> https://github.com/org/repo
    - git://github.com/org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    """
    url = url.strip()
    url = re.sub(r"\.git$", "", url)

    scp_match = _SCP_LIKE.match(url)
    if scp_match:
        host, path = scp_match.groups()
        return f"https://{host}/{path}"

    if url.startswith("ssh://"):
        url = url.removeprefix("ssh://").removeprefix("git@")
        # ssh://host:port/path and ssh://host:path both become host/...
        url = url.replace(":", "/", 1)
        return f"https://{url}"

    if url.startswith("git://"):
        return "https://" + url.removeprefix("git://")

    return url
