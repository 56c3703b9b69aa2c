# src/kastenator/candidates.py
"""Candidate store operations.

The candidate list of a session is the store. These functions take the
session explicitly; insertion order is identification order.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from kastenator.models import AtomCandidate, AtomisationSession, CandidatePatch

MAX_TITLE_LENGTH = 80
ELLIPSIS = "..."


def suggest_title(concept: str) -> str:
    """Derive a title from a concept: capitalise, then cap at 80 characters."""
    trimmed = concept.strip()
    capitalised = trimmed[:1].upper() + trimmed[1:]

    if len(capitalised) > MAX_TITLE_LENGTH:
        return capitalised[: MAX_TITLE_LENGTH - len(ELLIPSIS)] + ELLIPSIS

    return capitalised


def new_candidate_id(session: AtomisationSession) -> str:
    """Generate an id that is unique within the session."""
    existing = {c.id for c in session.candidates}
    while True:
        candidate_id = f"atom-{uuid4().hex}"
        if candidate_id not in existing:
            return candidate_id


def add_candidate(session: AtomisationSession, concept: str) -> AtomCandidate:
    """Append a new, empty candidate for a concept and return it."""
    candidate = AtomCandidate(
        id=new_candidate_id(session),
        concept=concept,
        suggested_title=suggest_title(concept),
    )
    session.candidates.append(candidate)
    return candidate


def find_candidate(session: AtomisationSession, candidate_id: str) -> AtomCandidate | None:
    """Return the candidate with the given id, or None."""
    for candidate in session.candidates:
        if candidate.id == candidate_id:
            return candidate
    return None


def apply_patch(
    candidate: AtomCandidate, patch: CandidatePatch | dict[str, Any]
) -> AtomCandidate:
    """Merge the supplied fields of a patch into a candidate, in place."""
    if not isinstance(patch, CandidatePatch):
        patch = CandidatePatch.model_validate(patch)

    for field_name, value in patch.changes().items():
        setattr(candidate, field_name, value)
    return candidate


def update_candidate(
    session: AtomisationSession,
    candidate_id: str,
    patch: CandidatePatch | dict[str, Any],
) -> AtomCandidate | None:
    """Patch a candidate by id. Returns None when it does not exist."""
    candidate = find_candidate(session, candidate_id)
    if candidate is None:
        return None
    return apply_patch(candidate, patch)


def remove_candidate(session: AtomisationSession, candidate_id: str) -> bool:
    """Remove a candidate by id. Returns whether anything was removed."""
    for index, candidate in enumerate(session.candidates):
        if candidate.id == candidate_id:
            del session.candidates[index]
            return True
    return False


def approved_candidates(session: AtomisationSession) -> list[AtomCandidate]:
    """Candidates marked for creation, in identification order."""
    return [c for c in session.candidates if c.approved]
