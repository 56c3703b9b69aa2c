"""Kastenator - atomise quarry notes into a Zettelkasten.

A guided workflow that takes one "quarry" note (a long fleeting or source
note), has you name each distinct concept in it, explain it in your own
words, critique and refine the explanations, and finally writes one atomic
note per approved concept.

Quick Start:
    from kastenator import AtomisationService, LocalVault, NoteDiscovery, Settings

    vault = LocalVault("~/Notes")
    settings = Settings(quarry_folders=["Fleeting notes"])
    discovery = NoteDiscovery(storage=vault, cache=vault, settings=settings)
    service = AtomisationService(storage=vault, settings=settings)

    note = await discovery.get_random_quarry_note()
    service.start_session(note)
    service.advance_phase()
    candidate = service.add_candidate("spaced repetition")
    service.update_candidate(candidate.id, {"explanation": "...", "approved": True})
    paths = await service.create_atoms()
    await discovery.mark_as_atomised(note.path)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("kastenator")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

# Session service
from kastenator.atomisation import AtomisationService

# Critique
from kastenator.critique import CritiqueGenerator, generate_rule_based_critique

# Discovery
from kastenator.discovery import NoteDiscovery

# Errors
from kastenator.exceptions import (
    KastenatorError,
    MaterialisationError,
    NoActiveSession,
    ProviderError,
    ProviderUnavailable,
    StorageFailure,
)

# Materialisation
from kastenator.materialiser import AtomMaterialiser
from kastenator.models import (
    PHASE_ORDER,
    AtomCandidate,
    AtomisationSession,
    CandidatePatch,
    Phase,
    SourceNote,
    ValidationResult,
)

# Provider ABCs
from kastenator.providers import LLMClient, LLMService, ProviderType

# Configuration
from kastenator.settings import Settings

# Storage ABCs
from kastenator.storage import LocalVault, MetadataCache, MetadataIndex, NoteStorage
from kastenator.validator import validate_explanation

__all__ = [
    # Version
    "__version__",
    # Models
    "AtomCandidate",
    "AtomisationSession",
    "CandidatePatch",
    "Phase",
    "PHASE_ORDER",
    "SourceNote",
    "ValidationResult",
    # Config
    "Settings",
    # Errors
    "KastenatorError",
    "MaterialisationError",
    "NoActiveSession",
    "ProviderError",
    "ProviderUnavailable",
    "StorageFailure",
    # Storage ABCs
    "NoteStorage",
    "MetadataCache",
    "MetadataIndex",
    "LocalVault",
    # Provider ABCs
    "LLMClient",
    "LLMService",
    "ProviderType",
    # Workflow
    "AtomisationService",
    "AtomMaterialiser",
    "CritiqueGenerator",
    "NoteDiscovery",
    "generate_rule_based_critique",
    "validate_explanation",
]
