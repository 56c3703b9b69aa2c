# src/kastenator/commands/base.py
"""Result types for the commands layer.

Commands return these data structures so the CLI (or any other UI) can
render them however it likes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kastenator.models import SourceNote


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class StatsResult(CommandResult):
    """Result of the stats command.

    Attributes:
        total_notes: Number of notes currently in the quarry
        folders: Quarry folders that were searched
        migration_field: Migration field name
        quarry_value: Quarry value of the migration field
        notes: Titles of the quarry notes, sorted
    """

    total_notes: int = 0
    folders: list[str] = field(default_factory=list)
    migration_field: str = ""
    quarry_value: str = ""
    notes: list[str] = field(default_factory=list)


@dataclass
class PickResult(CommandResult):
    """Result of the pick command. `note` is None when the quarry is empty."""

    note: SourceNote | None = None


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        vault_dir: Vault directory path
        settings: List of settings with sources
        config_path: Path to config file (if found)
        warnings: Unknown-key warnings from the config file
    """

    vault_dir: str = ""
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class CreateResult(CommandResult):
    """Result of creating atoms at the end of a session.

    Attributes:
        created: Paths of created atom notes
        source_marked: Whether the source note's status was rewritten
    """

    created: list[str] = field(default_factory=list)
    source_marked: bool = False
