# src/kastenator/atomisation.py
"""Central service for an atomisation session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kastenator import candidates as store
from kastenator import workflow
from kastenator.critique import CritiqueGenerator, generate_rule_based_critique
from kastenator.exceptions import NoActiveSession
from kastenator.materialiser import AtomMaterialiser
from kastenator.models import (
    AtomCandidate,
    AtomisationSession,
    CandidatePatch,
    Phase,
    SourceNote,
    ValidationResult,
)
from kastenator.providers import LLMClient, LLMService, create_llm_client
from kastenator.settings import Settings
from kastenator.validator import validate_explanation

if TYPE_CHECKING:
    from kastenator.storage import NoteStorage


class AtomisationService:
    """Holds the single live session and wires the workflow together.

    The session itself is a plain value: every operation here delegates to
    the explicit-session functions in `kastenator.workflow` and
    `kastenator.candidates`. This class only adds the "current session"
    convenience for UI callers, plus critique and atom creation.

    Example:
        from kastenator import AtomisationService, LocalVault, Settings

        service = AtomisationService(storage=LocalVault("~/Notes"), settings=Settings())
        service.start_session(note)
        service.advance_phase()
        candidate = service.add_candidate("testing is important")
        service.update_candidate(candidate.id, {"explanation": "...", "approved": True})
        paths = await service.create_atoms()
    """

    def __init__(
        self,
        *,
        storage: NoteStorage,
        settings: Settings | None = None,
        llm_client: LLMClient | None = None,
    ) -> None:
        """Create an AtomisationService.

        Args:
            storage: Where atom notes are written and templates are read.
            settings: Behavioral settings. Defaults to Settings().
            llm_client: Explicit text-generation client. If None, one is
                built from settings (and may be absent).
        """
        self._settings = settings if settings is not None else Settings()
        self._explicit_client = llm_client
        self._session: AtomisationSession | None = None
        self.storage = storage
        self.materialiser = AtomMaterialiser(storage, self._settings)
        self._build_critique()

    def _build_critique(self) -> None:
        client = self._explicit_client or create_llm_client(self._settings)
        self.llm_service = LLMService(client, temperature=self._settings.critique_temperature)
        self.critique = CritiqueGenerator(self.llm_service, use_llm=self._settings.use_llm_critique)

    @property
    def settings(self) -> Settings:
        return self._settings

    def update_settings(self, settings: Settings) -> None:
        """Swap settings and rebuild the provider."""
        self._settings = settings
        self.materialiser.settings = settings
        self._build_critique()

    def _require_session(self) -> AtomisationSession:
        if self._session is None:
            raise NoActiveSession()
        return self._session

    # Session lifecycle

    def start_session(self, source_note: SourceNote) -> AtomisationSession:
        """Start a new session, replacing any previous one."""
        self._session = workflow.start_session(source_note)
        return self._session

    def get_session(self) -> AtomisationSession | None:
        return self._session

    def end_session(self) -> None:
        self._session = None

    def advance_phase(self) -> Phase:
        return workflow.advance_phase(self._require_session())

    def set_phase(self, phase: Phase | str) -> Phase:
        return workflow.set_phase(self._require_session(), phase)

    # Candidates

    def add_candidate(self, concept: str) -> AtomCandidate:
        return store.add_candidate(self._require_session(), concept)

    def update_candidate(
        self, candidate_id: str, patch: CandidatePatch | dict[str, Any]
    ) -> AtomCandidate | None:
        if self._session is None:
            return None
        return store.update_candidate(self._session, candidate_id, patch)

    def remove_candidate(self, candidate_id: str) -> bool:
        if self._session is None:
            return False
        return store.remove_candidate(self._session, candidate_id)

    # Validation and critique

    def validate_explanation(self, candidate: AtomCandidate) -> ValidationResult:
        return validate_explanation(candidate.concept, candidate.explanation)

    def generate_rule_based_critique(self, candidate: AtomCandidate) -> str:
        return generate_rule_based_critique(candidate)

    def generate_critique(self, candidate: AtomCandidate) -> str:
        return self.critique.generate_critique(candidate)

    async def agenerate_critique(self, candidate: AtomCandidate) -> str:
        """Critique with the LLM when enabled, using the source note as context."""
        source_content = self._session.source_note.content if self._session else ""
        return await self.critique.agenerate_critique(candidate, source_content)

    def should_use_llm_critique(self) -> bool:
        return self.critique.should_use_llm()

    def is_llm_available(self) -> bool:
        return self.llm_service.is_available()

    @property
    def llm_provider_name(self) -> str:
        return self.llm_service.provider_name

    # Creation

    async def create_atoms(self) -> list[str]:
        """Write atom notes for approved candidates and mark the session completed."""
        return await self.materialiser.materialise(self._session)
