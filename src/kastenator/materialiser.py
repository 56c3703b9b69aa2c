# src/kastenator/materialiser.py
"""Turns approved candidates into atom notes."""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone

from kastenator.candidates import approved_candidates
from kastenator.exceptions import MaterialisationError, NoActiveSession, StorageFailure
from kastenator.models import AtomCandidate, AtomisationSession, SourceNote
from kastenator.settings import Settings
from kastenator.storage import NoteStorage, normalize_path

logger = logging.getLogger(__name__)

_PATH_HOSTILE = re.compile(r'[\\/:*?"<>|]')
UNTITLED = "Untitled"


def sanitise_title(title: str) -> str:
    """Strip characters that are not allowed in file names."""
    return _PATH_HOSTILE.sub("", title).strip()


def _iso_timestamp(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_atom_content(
    candidate: AtomCandidate,
    source_note: SourceNote | None = None,
    now: datetime | None = None,
) -> str:
    """Build the default markdown for an atom note.

    Frontmatter, an H1 title and the explanation are always present. The
    Evidence and Related sections are left out when their field is empty.
    """
    now = now or datetime.now(timezone.utc)
    lines: list[str] = []

    lines.append("---")
    lines.append(f"created: {_iso_timestamp(now)}")
    lines.append("type: atom")
    if candidate.tags:
        lines.append(f"tags: [{', '.join(candidate.tags)}]")
    if source_note is not None:
        lines.append(f'source: "[[{source_note.title}]]"')
    lines.append("---")
    lines.append("")

    lines.append(f"# {candidate.suggested_title}")
    lines.append("")

    lines.append(candidate.explanation)
    lines.append("")

    if candidate.evidence:
        lines.append("## Evidence")
        lines.append("")
        lines.append(f"> {candidate.evidence}")
        lines.append("")

    if candidate.related_atoms:
        lines.append("## Related")
        lines.append("")
        for related in candidate.related_atoms:
            lines.append(f"- [[{related}]]")
        lines.append("")

    return "\n".join(lines)


def apply_template(
    template: str,
    candidate: AtomCandidate,
    default_content: str,
    now: datetime | None = None,
) -> str:
    """Substitute {{placeholders}} in a user template."""
    now = now or datetime.now(timezone.utc)
    replacements = [
        ("{{title}}", candidate.suggested_title),
        ("{{concept}}", candidate.concept),
        ("{{explanation}}", candidate.explanation),
        ("{{evidence}}", candidate.evidence),
        ("{{tags}}", ", ".join(candidate.tags)),
        ("{{date}}", now.astimezone(timezone.utc).strftime("%Y-%m-%d")),
        ("{{content}}", default_content),
    ]
    for placeholder, value in replacements:
        template = template.replace(placeholder, value)
    return template


class AtomMaterialiser:
    """Writes atom notes for a session's approved candidates.

    Candidates are written one at a time. When a target file already exists
    a millisecond timestamp suffix is added to the name; suffixes never repeat
    within one materialiser.

    Args:
        storage: Where atom notes are created.
        settings: Provides the atom folder and optional template path.
    """

    def __init__(self, storage: NoteStorage, settings: Settings) -> None:
        self.storage = storage
        self.settings = settings
        self._last_suffix = 0

    def _next_suffix(self) -> int:
        suffix = max(int(time.time() * 1000), self._last_suffix + 1)
        self._last_suffix = suffix
        return suffix

    async def _load_template(self) -> str | None:
        template_path = self.settings.atom_template_path
        if not template_path:
            return None
        if not await self.storage.exists(template_path):
            logger.debug("Atom template not found: %s", template_path)
            return None
        return await self.storage.read(template_path)

    async def _target_path(self, folder: str, title: str) -> str:
        path = normalize_path(f"{folder}/{title}.md")
        while await self.storage.exists(path):
            unique = normalize_path(f"{folder}/{title}-{self._next_suffix()}.md")
            logger.debug("%s exists, writing %s instead", path, unique)
            path = unique
        return path

    async def create_atom(
        self, candidate: AtomCandidate, source_note: SourceNote | None = None
    ) -> str:
        """Create the note for one candidate and return its path."""
        folder = normalize_path(self.settings.atom_folder)
        if not await self.storage.exists(folder):
            await self.storage.create_folder(folder)

        title = sanitise_title(candidate.suggested_title) or UNTITLED
        content = build_atom_content(candidate, source_note)

        template = await self._load_template()
        if template is not None:
            content = apply_template(template, candidate, content)

        path = await self._target_path(folder, title)
        return await self.storage.create(path, content)

    async def materialise(self, session: AtomisationSession | None) -> list[str]:
        """Create atoms for every approved candidate and complete the session.

        Returns:
            Paths of the created notes, in identification order.

        Raises:
            NoActiveSession: If there is no session.
            MaterialisationError: If a note cannot be written. Earlier notes
                stay in place and the session is not marked completed.
        """
        if session is None:
            raise NoActiveSession()

        created: list[str] = []
        for candidate in approved_candidates(session):
            try:
                created.append(await self.create_atom(candidate, session.source_note))
            except StorageFailure as e:
                raise MaterialisationError(
                    f"Failed to create atom '{candidate.suggested_title}': {e}",
                    created=created,
                    candidate_id=candidate.id,
                ) from e

        session.completed = True
        logger.info("Created %d atom(s) from %s", len(created), session.source_note.title)
        return created
