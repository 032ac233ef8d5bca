"""Repository context and selector models."""

from pydantic import BaseModel, ConfigDict, field_validator


class RepositoryContext(BaseModel):
    """Everything the URL builder needs to know about a working tree.

    ``relative_path`` is relative to the repository root, always uses ``/``
    separators, and is empty for the root itself.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    branch: str
    relative_path: str = ""

    @field_validator("relative_path")
    @classmethod
    def _normalize_relative_path(cls, value: str) -> str:
        value = value.replace("\\", "/")
        if value == ".":
            return ""
        return value


class LineSelector(BaseModel):
    """A single line or a line range, kept as the raw strings the user typed."""

    model_config = ConfigDict(frozen=True)

    start: str = ""
    end: str = ""

    @classmethod
    def parse(cls, spec: str) -> "LineSelector":
        """Parse ``"N"`` or ``"N-M"``.

        Only the first ``-`` splits, so ``"1-2-3"`` gives ``end="2-3"``.
        """
        if not spec:
            return cls()
        start, _, end = spec.partition("-")
        return cls(start=start, end=end)

    @property
    def is_empty(self) -> bool:
        return not self.start

    @property
    def is_range(self) -> bool:
        return bool(self.start and self.end)
