# src/kastenator/storage/base.py
"""Abstract base classes for the note storage collaborators."""

import re
import unicodedata
from abc import ABC, abstractmethod
from typing import Any


def normalize_path(path: str) -> str:
    """Normalise a vault-relative path.

    Collapses runs of slashes or backslashes, strips leading and trailing
    slashes and non-breaking spaces, and applies NFC normalisation.
    """
    path = re.sub(r"[\\/]+", "/", path)
    path = path.replace("\u00a0", " ").replace("\u202f", " ")
    path = path.strip("/")
    path = unicodedata.normalize("NFC", path)
    return path or "/"


class NoteStorage(ABC):
    """Abstract base class for reading and writing notes.

    Paths are vault-relative and use forward slashes.
    """

    @abstractmethod
    async def read(self, path: str) -> str:
        """Return the text of a note."""
        ...

    @abstractmethod
    async def create(self, path: str, text: str) -> str:
        """Create a new note and return its path. Fails if it already exists."""
        ...

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Whether a note or folder exists at the path."""
        ...

    @abstractmethod
    async def create_folder(self, path: str) -> None:
        """Create a folder (and any missing parents)."""
        ...

    @abstractmethod
    async def modify(self, path: str, text: str) -> None:
        """Replace the text of an existing note."""
        ...


class MetadataCache(ABC):
    """Abstract base class for a plain metadata scan over all notes."""

    @abstractmethod
    def list_markdown_files(self) -> list[str]:
        """List the paths of every markdown note."""
        ...

    @abstractmethod
    def get_frontmatter(self, path: str) -> dict[str, Any] | None:
        """Return a note's frontmatter, or None if the note has no cache entry."""
        ...


class MetadataIndex(ABC):
    """Abstract base class for a structured query index over note metadata."""

    @abstractmethod
    def pages(self, folder: str, field: str, value: str) -> list[str]:
        """Paths of notes under `folder` whose `field` equals `value`.

        May raise if the folder does not exist.
        """
        ...
