"""URL path helpers."""


def join_segments(*parts: str) -> str:
    """Join URL segments with ``/``, skipping empty ones.

    Returns an empty string when every part is empty.
    """
    return "/".join(part for part in parts if part)
