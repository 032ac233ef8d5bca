"""Web URL builder for repository paths."""

import structlog

from gopen.core.models.repository import LineSelector, RepositoryContext
from gopen.hosting.registry import ProviderRegistry, get_provider_for_url

logger = structlog.get_logger(__name__)


def build_web_url(
    context: RepositoryContext,
    line_spec: str = "",
    commit_hash: str = "",
    registry: ProviderRegistry | None = None,
) -> str:
    """Build the browsable URL for a repository context.

    A non-empty ``commit_hash`` selects the provider's commit URL instead of
    the branch URL. The line anchor is appended in either case.
    """
    lines = LineSelector.parse(line_spec)
    provider = get_provider_for_url(context.base_url, registry)

    if commit_hash:
        url = provider.commit_url(context.base_url, commit_hash, context.relative_path)
    else:
        url = provider.tree_url(context.base_url, context.branch, context.relative_path)

    logger.debug(
        "Web URL built",
        provider=provider.name,
        commit=commit_hash or None,
        lines=line_spec or None,
    )
    return url + provider.line_anchor(lines.start, lines.end)
