# src/kastenator/settings.py
"""Configuration for Kastenator.

Settings are passed programmatically; the library does not read
environment variables. The CLI layer (see kastenator.config) reads
kastenator.yaml and KASTENATOR_* variables and passes values in.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from kastenator.providers.base import ProviderType
from kastenator.providers.models import DEFAULT_CLAUDE_MODEL, DEFAULT_OPENROUTER_MODEL

DEFAULT_QUARRY_FOLDERS = ["Fleeting notes", "Source notes"]
DEFAULT_MIGRATION_FIELD = "Migration"
DEFAULT_QUARRY_VALUE = "quarry"
DEFAULT_ATOMISED_VALUE = "atomised"
DEFAULT_ATOM_FOLDER = "Atoms"


class Settings(BaseModel):
    """Behavioral settings for Kastenator.

    Example:
        settings = Settings(
            quarry_folders=["Inbox"],
            atom_folder="Zettels",
            llm_provider="claude",
            claude_api_key="sk-...",
        )
    """

    # Quarry
    quarry_folders: list[str] = list(DEFAULT_QUARRY_FOLDERS)
    migration_field: str = DEFAULT_MIGRATION_FIELD
    quarry_value: str = DEFAULT_QUARRY_VALUE
    atomised_value: str = DEFAULT_ATOMISED_VALUE

    # Atom output
    atom_folder: str = DEFAULT_ATOM_FOLDER
    atom_template_path: str = ""

    # Critique
    use_llm_critique: bool = True
    llm_provider: ProviderType = ProviderType.NONE
    claude_api_key: str | None = None
    claude_model: str = DEFAULT_CLAUDE_MODEL
    openrouter_api_key: str | None = None
    openrouter_model: str = DEFAULT_OPENROUTER_MODEL
    local_model: str | None = None
    local_api_base: str | None = None
    critique_temperature: float | None = None

    # Retry configuration (LiteLLM handles exponential backoff)
    num_retries: int = 3

    @field_validator("quarry_folders", mode="before")
    @classmethod
    def _split_folders(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(f).strip() for f in value if str(f).strip()]
        return value

    @field_validator("migration_field", mode="before")
    @classmethod
    def _default_migration_field(cls, value: Any) -> Any:
        return _strip_or_default(value, DEFAULT_MIGRATION_FIELD)

    @field_validator("quarry_value", mode="before")
    @classmethod
    def _default_quarry_value(cls, value: Any) -> Any:
        return _strip_or_default(value, DEFAULT_QUARRY_VALUE)

    @field_validator("atom_folder", mode="before")
    @classmethod
    def _default_atom_folder(cls, value: Any) -> Any:
        return _strip_or_default(value, DEFAULT_ATOM_FOLDER)

    @field_validator("atom_template_path", mode="before")
    @classmethod
    def _strip_template_path(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value


def _strip_or_default(value: Any, default: str) -> Any:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip() or default
    return value
