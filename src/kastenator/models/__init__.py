# src/kastenator/models/__init__.py
"""Data models for Kastenator."""

from kastenator.models.candidate import AtomCandidate, CandidatePatch
from kastenator.models.note import SourceNote
from kastenator.models.session import PHASE_ORDER, AtomisationSession, Phase
from kastenator.models.validation import ValidationResult

__all__ = [
    "SourceNote",
    "AtomCandidate",
    "CandidatePatch",
    "AtomisationSession",
    "Phase",
    "PHASE_ORDER",
    "ValidationResult",
]
