# src/kastenator/models/candidate.py
"""Atom candidate data models."""

from uuid import uuid4

from pydantic import BaseModel, Field


class AtomCandidate(BaseModel):
    """A single atomic concept extracted from a quarry note, pending approval."""

    id: str = Field(default_factory=lambda: f"atom-{uuid4().hex}")
    concept: str
    explanation: str = ""
    evidence: str = ""
    suggested_title: str = ""
    tags: list[str] = Field(default_factory=list)
    related_atoms: list[str] = Field(default_factory=list)
    critique: str = ""
    approved: bool = False


class CandidatePatch(BaseModel):
    """Partial update for an AtomCandidate.

    Only fields that were explicitly given are applied, so an empty string
    clears a field while an omitted field is left untouched. None is treated
    as omitted. The id is not patchable.
    """

    concept: str | None = None
    explanation: str | None = None
    evidence: str | None = None
    suggested_title: str | None = None
    tags: list[str] | None = None
    related_atoms: list[str] | None = None
    critique: str | None = None
    approved: bool | None = None

    def changes(self) -> dict:
        """Return only the explicitly set, non-None fields."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
