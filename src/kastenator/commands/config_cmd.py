# src/kastenator/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

from kastenator.commands.base import ConfigResult, SettingInfo
from kastenator.config import (
    SECRET_KEYS,
    ConfigError,
    get_kastenator_config,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
)


def _get_setting_source(key: str, yaml_settings: dict, env_settings: dict) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def _display_value(key: str, value: object) -> str:
    if value is None or value == "":
        return "(not set)"
    if key in SECRET_KEYS:
        text = str(value)
        return f"{text[:4]}..." if len(text) > 8 else "****"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(getattr(value, "value", value))


def config(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings with their sources.

    Args:
        vault_dir: Override vault directory
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    resolved = get_kastenator_config(vault_dir, config_path)
    if isinstance(resolved, ConfigError):
        return ConfigResult(success=False, error=resolved.message)

    yaml_settings = get_settings_from_yaml(load_config(resolved.config_path))
    env_settings = get_settings_from_env()

    result = ConfigResult(
        success=True,
        vault_dir=resolved.vault_dir,
        config_path=str(resolved.config_path) if resolved.config_path else None,
        warnings=list(resolved.warnings or []),
    )

    for key, value in resolved.settings.model_dump().items():
        result.settings.append(
            SettingInfo(
                name=key,
                value=_display_value(key, value),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
