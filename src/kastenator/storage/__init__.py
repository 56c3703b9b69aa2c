# src/kastenator/storage/__init__.py
"""Note storage collaborators.

- NoteStorage: read/create/exists/create_folder/modify
- MetadataCache: plain frontmatter scan over all notes
- MetadataIndex: optional structured query index
- LocalVault: filesystem implementation of NoteStorage and MetadataCache
"""

from kastenator.storage.base import MetadataCache, MetadataIndex, NoteStorage, normalize_path
from kastenator.storage.frontmatter import parse_frontmatter, split_frontmatter
from kastenator.storage.local import LocalVault

__all__ = [
    "NoteStorage",
    "MetadataCache",
    "MetadataIndex",
    "LocalVault",
    "normalize_path",
    "parse_frontmatter",
    "split_frontmatter",
]
