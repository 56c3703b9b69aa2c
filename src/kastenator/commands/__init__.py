# src/kastenator/commands/__init__.py
"""UI-agnostic command layer for Kastenator.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from kastenator.commands import pick, stats

    result = await stats.stats(vault_dir="~/Notes")
    result = await pick.pick(vault_dir="~/Notes")
"""

from kastenator.commands import config_cmd, create, pick, stats
from kastenator.commands.base import (
    CommandResult,
    ConfigResult,
    CreateResult,
    PickResult,
    SettingInfo,
    StatsResult,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "StatsResult",
    "PickResult",
    "ConfigResult",
    "SettingInfo",
    "CreateResult",
    # Command modules
    "stats",
    "pick",
    "config_cmd",
    "create",
]
