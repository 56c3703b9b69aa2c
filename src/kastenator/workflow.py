# src/kastenator/workflow.py
"""Phase transitions for an atomisation session."""

from __future__ import annotations

from kastenator.models import PHASE_ORDER, AtomisationSession, Phase, SourceNote


def start_session(source_note: SourceNote) -> AtomisationSession:
    """Create a fresh session in the introduction phase."""
    return AtomisationSession(source_note=source_note)


def next_phase(phase: Phase) -> Phase:
    """Return the phase after `phase`. Complete is terminal."""
    index = PHASE_ORDER.index(phase)
    if index + 1 >= len(PHASE_ORDER):
        return Phase.COMPLETE
    return PHASE_ORDER[index + 1]


def advance_phase(session: AtomisationSession) -> Phase:
    """Move the session one step forward and return the new phase."""
    session.phase = next_phase(session.phase)
    return session.phase


def set_phase(session: AtomisationSession, phase: Phase | str) -> Phase:
    """Jump directly to any phase, reachable or not."""
    session.phase = Phase(phase)
    return session.phase
