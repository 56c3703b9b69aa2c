# src/kastenator/discovery.py
"""Finding quarry notes and updating their migration status.

Quarry notes are notes whose migration field (e.g. `Migration:: quarry`)
marks them as candidates for atomisation. A structured MetadataIndex is
used when available; otherwise every note's frontmatter is scanned.
"""

from __future__ import annotations

import logging
import random
import re
from pathlib import PurePosixPath

from kastenator.exceptions import StorageFailure
from kastenator.models import SourceNote
from kastenator.settings import Settings
from kastenator.storage import MetadataCache, MetadataIndex, NoteStorage

logger = logging.getLogger(__name__)


class NoteDiscovery:
    """Finds quarry notes and picks one for a session.

    Args:
        storage: Reads note content and writes status changes.
        cache: Plain metadata scan used when no index is given.
        settings: Quarry folders, migration field and values.
        index: Optional structured query index.
        rng: Random source for selection.
    """

    def __init__(
        self,
        storage: NoteStorage,
        cache: MetadataCache,
        settings: Settings,
        index: MetadataIndex | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.storage = storage
        self.cache = cache
        self.settings = settings
        self.index = index
        self.rng = rng or random.Random()

    def update_settings(self, settings: Settings) -> None:
        self.settings = settings

    async def get_all_quarry_notes(self) -> list[SourceNote]:
        """Every note currently in the quarry."""
        if self.index is not None:
            paths = self._query_index(self.index)
        else:
            paths = self._scan_cache()

        notes = []
        for path in paths:
            note = await self.load_note(path)
            if note is not None:
                notes.append(note)
        return notes

    def _query_index(self, index: MetadataIndex) -> list[str]:
        s = self.settings
        paths: list[str] = []
        for folder in s.quarry_folders:
            try:
                paths.extend(index.pages(folder, s.migration_field, s.quarry_value))
            except Exception as e:
                logger.debug("Quarry folder query failed for %s: %s", folder, e)
        return paths

    def _scan_cache(self) -> list[str]:
        s = self.settings
        paths = []
        for path in self.cache.list_markdown_files():
            if not any(path.startswith(folder + "/") for folder in s.quarry_folders):
                continue

            # Only frontmatter is inspected; inline fields need the index
            frontmatter = self.cache.get_frontmatter(path)
            if frontmatter is None:
                continue
            if frontmatter.get(s.migration_field) == s.quarry_value:
                paths.append(path)
        return paths

    async def load_note(self, path: str) -> SourceNote | None:
        """Read a note into a SourceNote. None when the note cannot be read."""
        try:
            content = await self.storage.read(path)
        except StorageFailure:
            logger.error("Failed to read quarry note: %s", path)
            return None

        return SourceNote(
            path=path,
            title=PurePosixPath(path).stem,
            content=content,
            frontmatter=self.cache.get_frontmatter(path) or {},
            migration_status=self.settings.quarry_value,
        )

    async def get_random_quarry_note(self) -> SourceNote | None:
        """Pick a quarry note uniformly at random. None when the quarry is empty."""
        notes = await self.get_all_quarry_notes()
        if not notes:
            return None
        return self.rng.choice(notes)

    async def is_quarry_note(self, path: str) -> bool:
        notes = await self.get_all_quarry_notes()
        return any(note.path == path for note in notes)

    async def mark_as_atomised(self, path: str) -> bool:
        """Rewrite `Field:: quarry` markers to `Field:: atomised`.

        Returns:
            Whether the note was changed.
        """
        s = self.settings
        content = await self.storage.read(path)

        pattern = re.compile(rf"{re.escape(s.migration_field)}::\s*{re.escape(s.quarry_value)}")
        replacement = f"{s.migration_field}:: {s.atomised_value}"
        new_content = pattern.sub(lambda _: replacement, content)

        if new_content == content:
            return False

        await self.storage.modify(path, new_content)
        logger.info("Marked %s as %s", path, s.atomised_value)
        return True
