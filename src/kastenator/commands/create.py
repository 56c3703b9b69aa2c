# src/kastenator/commands/create.py
"""Create command - write the session's atoms and retire the source note."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kastenator.commands.base import CreateResult
from kastenator.exceptions import MaterialisationError, StorageFailure

if TYPE_CHECKING:
    from kastenator.atomisation import AtomisationService
    from kastenator.discovery import NoteDiscovery


async def create(service: AtomisationService, discovery: NoteDiscovery) -> CreateResult:
    """Create atom notes for the approved candidates, then mark the source atomised.

    On a failed batch the result carries the paths written before the failure
    and the session stays open.
    """
    session = service.get_session()
    if session is None:
        return CreateResult(success=False, error="No active session")

    try:
        created = await service.create_atoms()
    except MaterialisationError as e:
        return CreateResult(success=False, error=f"Error creating atoms: {e}", created=e.created)

    try:
        marked = await discovery.mark_as_atomised(session.source_note.path)
    except StorageFailure as e:
        return CreateResult(
            success=False,
            error=f"Atoms created but source note was not updated: {e}",
            created=created,
        )

    return CreateResult(success=True, created=created, source_marked=marked)
