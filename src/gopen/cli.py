"""CLI for gopen."""

import sys

import click
import structlog

from gopen import __version__
from gopen.config.logging import configure_logging
from gopen.config.settings import get_settings
from gopen.core.exceptions import GopenError
from gopen.git.inspector import GitRepoInspector, resolve_target_path
from gopen.hosting.url_builder import build_web_url
from gopen.output import copy_to_clipboard, open_browser

logger = structlog.get_logger(__name__)

EPILOG = """\b
Examples:
  gopen                        # current directory
  gopen main.go                # file on current branch
  gopen main.go -l 42          # file at line 42
  gopen --commit abc1234       # commit page
  gopen --commit abc1234 -c    # copy commit URL
"""


def resolve_url(path: str | None, remote: str, line: str, commit: str) -> str:
    """Resolve a local path to its web URL on the hosting platform."""
    settings = get_settings()
    target = resolve_target_path(path, git_prefix=settings.git_prefix)
    context = GitRepoInspector.for_path(target).get_context(target, remote)
    return build_web_url(context, line_spec=line, commit_hash=commit)


@click.command(epilog=EPILOG)
@click.version_option(__version__, "-v", "--version", prog_name="gopen", message="%(prog)s %(version)s")
@click.option("--copy", "-c", is_flag=True, help="Copy URL to clipboard instead of opening browser")
@click.option("--remote", "-r", metavar="NAME", default=None, help="Git remote to use (default: origin)")
@click.option("--line", "-l", metavar="N[-M]", default="", help="Highlight line or range (e.g. 42 or 42-50)")
@click.option("--commit", metavar="HASH", default="", help="Open a specific commit or file at that commit")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.argument("paths", nargs=-1, type=click.Path())
def cli(
    copy: bool,
    remote: str | None,
    line: str,
    commit: str,
    verbose: bool,
    paths: tuple[str, ...],
) -> None:
    """Open a Git repository path in the browser at the current branch."""
    settings = get_settings()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    if len(paths) > 1:
        logger.info("Ignoring extra paths", ignored=list(paths[1:]))

    try:
        url = resolve_url(
            paths[0] if paths else None,
            remote=remote or settings.remote,
            line=line,
            commit=commit,
        )
        if copy:
            copy_to_clipboard(url)
            click.echo(f"URL copied to clipboard: {url}")
        else:
            click.echo(f"Opening: {url}")
            open_browser(url)
    except GopenError as e:
        logger.debug("Command failed", error=e.message, **e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
