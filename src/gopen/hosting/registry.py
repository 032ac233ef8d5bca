"""Provider registry for automatic provider detection."""

from collections.abc import Iterable, Iterator

from gopen.hosting.providers import (
    AzureDevOpsProvider,
    BitbucketProvider,
    CodeCommitProvider,
    GiteaProvider,
    GitHubProvider,
    GitLabProvider,
    GogsProvider,
    HostingProvider,
)


class ProviderRegistry:
    """An ordered, read-only collection of hosting providers.

    The first provider whose ``can_handle`` accepts the base URL wins.
    When none does, the default provider is returned, so selection never
    fails.
    """

    __slots__ = ("_providers", "_default")

    def __init__(
        self,
        providers: Iterable[HostingProvider],
        default: HostingProvider,
    ) -> None:
        self._providers: tuple[HostingProvider, ...] = tuple(providers)
        self._default = default

    @property
    def providers(self) -> tuple[HostingProvider, ...]:
        return self._providers

    @property
    def default(self) -> HostingProvider:
        return self._default

    def select(self, base_url: str) -> HostingProvider:
        """Return the provider for a normalized HTTPS base URL."""
        for provider in self._providers:
            if provider.can_handle(base_url):
                return provider
        return self._default

    def __iter__(self) -> Iterator[HostingProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def create_default_registry() -> ProviderRegistry:
    """Build the registry of every supported platform, in match order."""
    return ProviderRegistry(
        providers=[
            GitHubProvider(),
            GitLabProvider(),
            BitbucketProvider(),
            AzureDevOpsProvider(),
            GiteaProvider(),
            GogsProvider(),
            CodeCommitProvider(),
        ],
        default=GitHubProvider(),
    )


DEFAULT_REGISTRY = create_default_registry()


def get_provider_for_url(
    base_url: str, registry: ProviderRegistry | None = None
) -> HostingProvider:
    """Return the appropriate provider for a base URL.

    Args:
        base_url: Normalized HTTPS base URL of the repository
        registry: Registry to search (defaults to DEFAULT_REGISTRY)

    Returns:
        The first matching provider, or the GitHub-style default
    """
    if registry is None:
        registry = DEFAULT_REGISTRY
    return registry.select(base_url)
