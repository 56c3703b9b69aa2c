# src/kastenator/config.py
"""Configuration loading utilities for Kastenator.

This module provides configuration loading that can be used by the CLI
or by applications embedding Kastenator.

It handles:
- Finding and loading kastenator.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating AtomisationService / NoteDiscovery instances from configuration
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from kastenator.atomisation import AtomisationService
    from kastenator.discovery import NoteDiscovery
    from kastenator.settings import Settings
    from kastenator.storage import LocalVault

# Default paths
DEFAULT_VAULT_DIR = "."
CONFIG_FILES = ["kastenator.yaml", "kastenator.yml", ".kastenatorrc"]
ENV_FILE = ".env"
ENV_PREFIX = "KASTENATOR_"


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the current directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {"vault_dir", "settings"}

# Settings keys and whether their env value is parsed as a bool/int/float
SETTINGS_KEYS: dict[str, str] = {
    "quarry_folders": "str",
    "migration_field": "str",
    "quarry_value": "str",
    "atomised_value": "str",
    "atom_folder": "str",
    "atom_template_path": "str",
    "use_llm_critique": "bool",
    "llm_provider": "str",
    "claude_api_key": "str",
    "claude_model": "str",
    "openrouter_api_key": "str",
    "openrouter_model": "str",
    "local_model": "str",
    "local_api_base": "str",
    "critique_temperature": "float",
    "num_retries": "int",
}

SECRET_KEYS = {"claude_api_key", "openrouter_api_key"}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - set(SETTINGS_KEYS)
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None or not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config if isinstance(config, dict) else {}


def _parse_env_value(value: str, kind: str) -> Any:
    """Parse an env var string; returns None for an invalid number."""
    if kind == "bool":
        return value.lower() in ("true", "1", "yes")
    if kind in ("int", "float"):
        if value == "":
            return None
        try:
            return int(value) if kind == "int" else float(value)
        except ValueError:
            return None
    return value


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from KASTENATOR_* environment variables.

    Only explicitly set variables are returned, so YAML values are kept
    unless overridden.

    Returns:
        Dictionary of setting name -> value
    """
    result: dict[str, Any] = {}
    for key, kind in SETTINGS_KEYS.items():
        env_name = ENV_PREFIX + key.upper()
        if env_name not in os.environ:
            continue
        value = _parse_env_value(os.environ[env_name], kind)
        if value is None and kind == "int":
            continue
        result[key] = value
    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract known settings from the `settings:` section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: yaml_settings[key] for key in SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance
    """
    from kastenator.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


def get_vault_dir(config: dict[str, Any], vault_dir: str | None = None) -> str:
    """Resolve the vault directory: argument > env var > yaml > default."""
    return (
        vault_dir
        or os.environ.get(ENV_PREFIX + "VAULT_DIR")
        or config.get("vault_dir")
        or DEFAULT_VAULT_DIR
    )


@dataclass
class KastenatorConfig:
    """Resolved configuration for building services."""

    vault_dir: str
    settings: Settings
    config_path: Path | None = None
    warnings: list[str] | None = None


def get_kastenator_config(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> KastenatorConfig | ConfigError:
    """Resolve configuration without building any service.

    Args:
        vault_dir: Override vault directory
        config_path: Override config file path

    Returns:
        KastenatorConfig, or ConfigError if the configuration is invalid
    """
    from pydantic import ValidationError

    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    if config_path is not None and not Path(config_path).exists():
        return ConfigError(
            message=f"Config file not found: {config_path}",
            suggestion="Check the --config path",
        )

    try:
        config = load_config(resolved_path)
    except yaml.YAMLError as e:
        return ConfigError(
            message=f"Invalid YAML in {resolved_path}: {e}",
            suggestion="Fix the syntax in your kastenator.yaml",
        )

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the settings: section of kastenator.yaml",
        )

    effective_vault_dir = get_vault_dir(config, vault_dir)
    if not Path(effective_vault_dir).expanduser().is_dir():
        return ConfigError(
            message=f"Vault directory not found: {effective_vault_dir}",
            suggestion="Pass --vault or set vault_dir in kastenator.yaml",
        )

    return KastenatorConfig(
        vault_dir=effective_vault_dir,
        settings=settings,
        config_path=resolved_path,
        warnings=validate_config(config, resolved_path),
    )


def create_vault(config: KastenatorConfig) -> LocalVault:
    from kastenator.storage import LocalVault

    return LocalVault(config.vault_dir)


def create_service(config: KastenatorConfig, vault: LocalVault | None = None) -> AtomisationService:
    """Create an AtomisationService for a resolved configuration."""
    from kastenator.atomisation import AtomisationService

    return AtomisationService(storage=vault or create_vault(config), settings=config.settings)


def create_discovery(config: KastenatorConfig, vault: LocalVault | None = None) -> NoteDiscovery:
    """Create a NoteDiscovery scanning the vault's frontmatter."""
    from kastenator.discovery import NoteDiscovery

    vault = vault or create_vault(config)
    return NoteDiscovery(storage=vault, cache=vault, settings=config.settings)


def get_service(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> AtomisationService | ConfigError:
    """Create an AtomisationService based on configuration.

    Args:
        vault_dir: Override vault directory
        config_path: Override config file path

    Returns:
        Configured AtomisationService, or ConfigError if configuration is invalid
    """
    config = get_kastenator_config(vault_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_service(config)


def get_discovery(
    vault_dir: str | None = None,
    config_path: str | Path | None = None,
) -> NoteDiscovery | ConfigError:
    """Create a NoteDiscovery based on configuration."""
    config = get_kastenator_config(vault_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_discovery(config)
