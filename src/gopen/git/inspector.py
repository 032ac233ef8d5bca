"""Git working tree inspection using subprocess."""

import os
import subprocess
from pathlib import Path

import structlog

from gopen.core.exceptions import GitCommandError, NotAGitRepositoryError, PathNotFoundError
from gopen.core.models.repository import RepositoryContext
from gopen.git.remote import convert_to_https

logger = structlog.get_logger(__name__)


def effective_cwd(git_prefix: str | None = None) -> Path:
    """Return the directory the user invoked gopen from.

    When run as a git alias, git changes into the repository root and puts
    the original subdirectory in GIT_PREFIX.
    """
    cwd = Path.cwd()
    if git_prefix:
        return cwd / git_prefix
    return cwd


def resolve_target_path(path: str | None = None, git_prefix: str | None = None) -> Path:
    """Return the absolute path of the file or directory to open.

    Raises:
        PathNotFoundError: If the path does not exist
    """
    if path:
        target = Path(path)
        if not target.is_absolute():
            target = effective_cwd(git_prefix) / target
    else:
        target = effective_cwd(git_prefix)

    target = Path(os.path.normpath(target))
    if not target.exists():
        raise PathNotFoundError(
            f"Path does not exist: {target}",
            details={"path": str(target)},
        )
    return target


class GitRepoInspector:
    """Reads remote, branch and root information from a Git working tree.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @classmethod
    def for_path(cls, target: str | Path) -> "GitRepoInspector":
        """Create an inspector for a target file or directory."""
        target = Path(target)
        return cls(target if target.is_dir() else target.parent)

    @property
    def directory(self) -> Path:
        return self._directory

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        command = ["git", *args]
        logger.debug("Running git", args=list(args), cwd=str(self._directory))
        try:
            result = subprocess.run(
                command,
                cwd=self._directory,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(
                "git executable not found",
                details={"command": command},
            ) from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {' '.join(args)} failed: {e.stderr.strip() or e.returncode}",
                details={"command": command, "returncode": e.returncode, "stderr": e.stderr},
            ) from e
        return result.stdout.strip()

    def is_git_repo(self) -> bool:
        """Check if the directory is inside a git repository."""
        try:
            self._run_git("rev-parse", "--git-dir")
            return True
        except GitCommandError:
            return False

    def get_remote_url(self, remote_name: str = "origin") -> str:
        """Get the URL of the given remote."""
        try:
            return self._run_git("remote", "get-url", remote_name)
        except GitCommandError as e:
            raise GitCommandError(
                f"Failed to get remote URL for '{remote_name}'",
                details={**e.details, "remote": remote_name},
            ) from e

    def get_current_branch(self) -> str:
        """Get the current branch name (``HEAD`` when detached)."""
        return self._run_git("rev-parse", "--abbrev-ref", "HEAD")

    def get_repo_root(self) -> Path:
        """Get the root directory of the working tree."""
        return Path(self._run_git("rev-parse", "--show-toplevel"))

    def get_relative_path(self, target: str | Path) -> str:
        """Path of ``target`` relative to the repository root, ``/``-separated."""
        root = self.get_repo_root().resolve()
        try:
            relative = Path(target).resolve().relative_to(root)
        except ValueError as e:
            raise NotAGitRepositoryError(
                f"Path is outside the repository root: {target}",
                details={"path": str(target), "root": str(root)},
            ) from e
        return relative.as_posix() if relative.parts else ""

    def get_context(self, target: str | Path, remote_name: str = "origin") -> RepositoryContext:
        """Collect all git information needed to build the web URL.

        Raises:
            NotAGitRepositoryError: If the directory is not in a working tree
            GitCommandError: If a git query fails
        """
        if not self.is_git_repo():
            raise NotAGitRepositoryError(
                "Not in a git repository",
                details={"path": str(self._directory)},
            )

        remote_url = self.get_remote_url(remote_name)
        context = RepositoryContext(
            base_url=convert_to_https(remote_url),
            branch=self.get_current_branch(),
            relative_path=self.get_relative_path(target),
        )
        logger.debug(
            "Repository context resolved",
            base_url=context.base_url,
            branch=context.branch,
            relative_path=context.relative_path,
        )
        return context
