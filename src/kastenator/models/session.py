# src/kastenator/models/session.py
"""Atomisation session data models."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from kastenator.models.candidate import AtomCandidate
from kastenator.models.note import SourceNote


class Phase(str, Enum):
    """Phases of the atomisation workflow, in order."""

    INTRODUCTION = "introduction"  # Show the note, explain the process
    IDENTIFICATION = "identification"  # User identifies atomic concepts
    EXPLANATION = "explanation"  # User explains each concept
    CRITIQUE = "critique"  # System critiques the explanations
    REFINEMENT = "refinement"  # User refines based on critique
    CONFIRMATION = "confirmation"  # Final review before creation
    CREATION = "creation"  # Creating the atom files
    COMPLETE = "complete"  # Terminal


PHASE_ORDER: tuple[Phase, ...] = tuple(Phase)


class AtomisationSession(BaseModel):
    """State of a single atomisation session."""

    source_note: SourceNote
    candidates: list[AtomCandidate] = Field(default_factory=list)
    phase: Phase = Phase.INTRODUCTION
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False
