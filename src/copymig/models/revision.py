"""Revision identities for changes."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class Revision(Protocol):
    """Anything that can render itself as a stable string identifier."""

    def as_string(self) -> str: ...


class GitRevision(BaseModel):
    """A git commit identified by its SHA-1."""

    sha: str = Field(min_length=1)

    model_config = {"frozen": True}

    def as_string(self) -> str:
        return self.sha

    def short(self) -> str:
        """Abbreviated sha, as shown by `git log --oneline`."""
        return self.sha[:7]

    def __str__(self) -> str:
        return self.sha
