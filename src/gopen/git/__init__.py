"""Git integration module for gopen."""

from gopen.git.inspector import GitRepoInspector, effective_cwd, resolve_target_path
from gopen.git.remote import convert_to_https

__all__ = ["GitRepoInspector", "convert_to_https", "effective_cwd", "resolve_target_path"]
