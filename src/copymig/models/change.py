"""Change model describing one revision seen by a migration."""

from datetime import datetime
from types import MappingProxyType
from typing import FrozenSet, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from .author import Author
from .revision import Revision

R = TypeVar("R", bound=Revision)


class Change(BaseModel, Generic[R]):
    """Immutable metadata of a change in a repository.

    Holds the revision, who made it, when, its message and the labels detected
    in that message. ``change_files`` is ``None`` when the touched paths were not
    computed, and a (possibly empty) frozenset when they are known.

    Two changes are equal when revision, author, message, date_time and labels
    match. ``change_files`` never takes part in equality or hashing, so the same
    change with and without a materialized file list compares equal.
    """

    revision: R
    author: Author
    message: str
    date_time: Optional[datetime] = None
    labels: Optional[Mapping[str, str]] = Field(default=None, validate_default=True)
    change_files: Optional[FrozenSet[str]] = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("labels", mode="after")
    @classmethod
    def _freeze_labels(cls, labels: Optional[Mapping[str, str]]) -> Mapping[str, str]:
        return MappingProxyType(dict(labels or {}))

    @property
    def reference_string(self) -> str:
        """String identifier of the change. For example a SHA-1 in git."""
        return self.revision.as_string()

    @property
    def first_line_message(self) -> str:
        """First line of the message, usually a summary."""
        idx = self.message.find("\n")
        return self.message if idx == -1 else self.message[:idx]

    def _identity(self) -> tuple:
        return (
            self.revision,
            self.author,
            self.message,
            self.date_time,
            self.date_time.utcoffset() if self.date_time is not None else None,
            frozenset(self.labels.items()),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Change):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr_args__(self):
        yield "revision", self.reference_string
        yield "author", self.author
        yield "date_time", self.date_time
        yield "message", self.message
