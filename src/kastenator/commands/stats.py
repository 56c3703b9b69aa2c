# src/kastenator/commands/stats.py
"""Stats command - summarise the quarry."""

from __future__ import annotations

from pathlib import Path

from kastenator.commands.base import StatsResult
from kastenator.config import ConfigError, create_discovery, get_kastenator_config
from kastenator.exceptions import StorageFailure


async def stats(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatsResult:
    """Count the notes currently in the quarry.

    Args:
        vault_dir: Override vault directory
        config_path: Override config file path

    Returns:
        StatsResult with the quarry size and configuration
    """
    config = get_kastenator_config(vault_dir, config_path)
    if isinstance(config, ConfigError):
        return StatsResult(success=False, error=config.message)

    settings = config.settings
    try:
        notes = await create_discovery(config).get_all_quarry_notes()
    except StorageFailure as e:
        return StatsResult(success=False, error=f"Failed to scan vault: {e}")

    return StatsResult(
        success=True,
        total_notes=len(notes),
        folders=list(settings.quarry_folders),
        migration_field=settings.migration_field,
        quarry_value=settings.quarry_value,
        notes=sorted(note.title for note in notes),
    )
