# src/kastenator/commands/pick.py
"""Pick command - choose a random quarry note."""

from __future__ import annotations

from pathlib import Path

from kastenator.commands.base import PickResult
from kastenator.config import ConfigError, create_discovery, get_kastenator_config
from kastenator.exceptions import StorageFailure


async def pick(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> PickResult:
    """Pick a random note from the quarry.

    An empty quarry is not an error: the result succeeds with `note=None`.
    """
    config = get_kastenator_config(vault_dir, config_path)
    if isinstance(config, ConfigError):
        return PickResult(success=False, error=config.message)

    try:
        note = await create_discovery(config).get_random_quarry_note()
    except StorageFailure as e:
        return PickResult(success=False, error=f"Failed to scan vault: {e}")

    return PickResult(success=True, note=note)
