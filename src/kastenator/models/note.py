# src/kastenator/models/note.py
"""Source note data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceNote(BaseModel):
    """A quarry note loaded for atomisation. Read-only once in a session."""

    model_config = ConfigDict(frozen=True)

    path: str
    title: str
    content: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    migration_status: str = ""
