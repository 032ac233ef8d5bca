"""Git hosting providers.

One class per hosting platform family. Each knows how to recognize a base
URL and how to build tree URLs, commit URLs and line anchors for it.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from gopen.hosting.anchors import (
    anchor_azure,
    anchor_bitbucket,
    anchor_gitlab,
    anchor_ln,
    anchor_none,
)
from gopen.utils.paths import join_segments


class HostingProvider(ABC):
    """Abstract base for hosting platforms (GitHub, GitLab, etc.).

    Each provider implements:
    - URL matching (can_handle)
    - Browsing at a branch or ref (tree_url)
    - Browsing at a commit (commit_url)
    - Line highlighting (line_anchor)
    """

    name: ClassVar[str] = "unknown"

    # Substrings of the base URL that identify this platform
    markers: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def can_handle(cls, base_url: str) -> bool:
        """Return True if any marker occurs anywhere in the base URL."""
        return any(marker in base_url for marker in cls.markers)

    @abstractmethod
    def tree_url(self, base: str, ref: str, path: str) -> str:
        """URL browsing ``path`` (or the root when empty) at ``ref``."""

    @abstractmethod
    def commit_url(self, base: str, commit: str, path: str) -> str:
        """URL of the commit page, or of ``path`` at that commit."""

    @abstractmethod
    def line_anchor(self, start: str, end: str) -> str:
        """Fragment or query suffix highlighting the given lines."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GitHubProvider(HostingProvider):
    """GitHub, also used as the fallback for unknown hosts."""

    name = "github"
    markers = ("github.com",)

    def tree_url(self, base: str, ref: str, path: str) -> str:
        return join_segments(base, "tree", ref, path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commit", commit)
        return join_segments(base, "blob", commit, path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_ln(start, end)


class GitLabProvider(HostingProvider):
    """GitLab.com and self-hosted GitLab.

    Any base URL containing ``gitlab`` matches, including unrelated hosts
    such as ``https://git.example.com/gitlabmirror/repo``.
    """

    name = "gitlab"
    markers = ("gitlab.com", "gitlab")

    def tree_url(self, base: str, ref: str, path: str) -> str:
        return join_segments(base, "-/tree", ref, path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "-/commit", commit)
        return join_segments(base, "-/blob", commit, path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_gitlab(start, end)


class BitbucketProvider(HostingProvider):
    """Bitbucket Cloud."""

    name = "bitbucket"
    markers = ("bitbucket.org",)

    def tree_url(self, base: str, ref: str, path: str) -> str:
        return join_segments(base, "src", ref, path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commits", commit)
        return join_segments(base, "src", commit, path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_bitbucket(start, end)


class AzureDevOpsProvider(HostingProvider):
    """Azure DevOps, which selects refs and paths through query parameters."""

    name = "azure-devops"
    markers = ("dev.azure.com", "visualstudio.com")

    def tree_url(self, base: str, ref: str, path: str) -> str:
        url = f"{base}?version=GB{ref}"
        if path:
            url += f"&path=/{path}"
        return url

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commit", commit)
        return f"{base}?version=GC{commit}&path=/{path}"

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_azure(start, end)


class GiteaProvider(HostingProvider):
    """Gitea (and Forgejo instances whose URL mentions gitea)."""

    name = "gitea"
    markers = ("gitea",)

    def tree_url(self, base: str, ref: str, path: str) -> str:
        return join_segments(base, "src/branch", ref, path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commit", commit)
        return join_segments(base, "src/commit", commit, path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_ln(start, end)


class GogsProvider(HostingProvider):
    """Gogs."""

    name = "gogs"
    markers = ("gogs",)

    def tree_url(self, base: str, ref: str, path: str) -> str:
        return join_segments(base, "src", ref, path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commit", commit)
        return join_segments(base, "src", commit, path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_ln(start, end)


class CodeCommitProvider(HostingProvider):
    """AWS CodeCommit console. Line anchors are not supported."""

    name = "codecommit"
    markers = ("console.aws.amazon.com", "codecommit")

    def tree_url(self, base: str, ref: str, path: str) -> str:
        if not path:
            # Root listing keeps the trailing slash
            return join_segments(base, "browse/refs/heads", ref, "--") + "/"
        return join_segments(base, "browse/refs/heads", ref, "--", path)

    def commit_url(self, base: str, commit: str, path: str) -> str:
        if not path:
            return join_segments(base, "commit", commit)
        return join_segments(base, "browse", commit, "--", path)

    def line_anchor(self, start: str, end: str) -> str:
        return anchor_none(start, end)
