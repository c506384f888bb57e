"""Data models for copymig."""

from .author import Author
from .change import Change
from .revision import GitRevision, Revision

__all__ = ["Author", "Change", "GitRevision", "Revision"]
