"""Git hosting platforms and web URL construction.

Supports GitHub, GitLab (cloud + self-hosted), Bitbucket Cloud, Azure DevOps,
Gitea, Gogs and AWS CodeCommit, with GitHub-style URLs for unknown hosts.
"""

from gopen.hosting.providers import HostingProvider
from gopen.hosting.registry import DEFAULT_REGISTRY, ProviderRegistry, get_provider_for_url
from gopen.hosting.url_builder import build_web_url

__all__ = [
    "DEFAULT_REGISTRY",
    "HostingProvider",
    "ProviderRegistry",
    "build_web_url",
    "get_provider_for_url",
]
