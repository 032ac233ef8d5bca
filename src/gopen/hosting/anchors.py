"""Line anchor builders.

Each returns the fragment (or query suffix, for Azure DevOps) that highlights
a line or a line range. An empty start always yields an empty anchor.
"""


def anchor_ln(start: str, end: str) -> str:
    """GitHub, Gitea, Gogs and the default: ``#L42`` or ``#L42-L50``."""
    if not start:
        return ""
    if not end:
        return f"#L{start}"
    return f"#L{start}-L{end}"


def anchor_gitlab(start: str, end: str) -> str:
    """GitLab: ``#L42`` or ``#L42-50``."""
    if not start:
        return ""
    if not end:
        return f"#L{start}"
    return f"#L{start}-{end}"


def anchor_bitbucket(start: str, end: str) -> str:
    """Bitbucket: ``#lines-42`` or ``#lines-42:50``."""
    if not start:
        return ""
    if not end:
        return f"#lines-{start}"
    return f"#lines-{start}:{end}"


def anchor_azure(start: str, end: str) -> str:
    """Azure DevOps query parameters; a single line is a range of one."""
    if not start:
        return ""
    end = end or start
    return f"&line={start}&lineEnd={end}&lineStartColumn=1&lineEndColumn=1"


def anchor_none(start: str, end: str) -> str:
    """For hosts without line anchors."""
    return ""
