"""Author model."""

import re

from pydantic import BaseModel

_AUTHOR_PATTERN = re.compile(r"^\s*(?P<name>[^<]*?)\s*<(?P<email>[^>]*)>\s*$")


class Author(BaseModel):
    """Person who made a change."""

    name: str
    email: str

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: str) -> "Author":
        """Parse the `Name <email>` form used by git."""
        match = _AUTHOR_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid author '{value}'. Must be in the form of 'Name <email>'")
        return cls(name=match.group("name"), email=match.group("email"))

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
