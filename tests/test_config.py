# tests/test_config.py
"""Tests for configuration loading."""

import os

import pytest

from kastenator.atomisation import AtomisationService
from kastenator.config import (
    ConfigError,
    build_settings,
    find_config_file,
    get_discovery,
    get_kastenator_config,
    get_service,
    get_settings_from_env,
    get_vault_dir,
    load_config,
    load_env_file,
    validate_config,
)
from kastenator.discovery import NoteDiscovery
from kastenator.providers import ProviderType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the surrounding environment and any config file in the cwd."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("KASTENATOR_"):
            monkeypatch.delenv(key)


class TestLoadConfig:
    def test_finds_config_in_parent(self, tmp_path):
        (tmp_path / "kastenator.yaml").write_text("vault_dir: notes\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == tmp_path / "kastenator.yaml"

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "kastenator.yaml"
        path.write_text("vault_dir: notes\nsettings:\n  atom_folder: Zettels\n")

        assert load_config(path) == {"vault_dir": "notes", "settings": {"atom_folder": "Zettels"}}

    def test_missing_file_is_empty(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_validate_config_warns_on_unknown_keys(self):
        warnings = validate_config({"vault": "x", "settings": {"atom_dir": "y"}})
        assert warnings == [
            "Unknown config keys in config: vault",
            "Unknown settings keys: atom_dir",
        ]


class TestEnvSettings:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("KASTENATOR_ATOM_FOLDER", "Zettels")
        monkeypatch.setenv("KASTENATOR_USE_LLM_CRITIQUE", "false")
        monkeypatch.setenv("KASTENATOR_NUM_RETRIES", "7")
        monkeypatch.setenv("KASTENATOR_CRITIQUE_TEMPERATURE", "0.3")

        assert get_settings_from_env() == {
            "atom_folder": "Zettels",
            "use_llm_critique": False,
            "num_retries": 7,
            "critique_temperature": 0.3,
        }

    def test_invalid_int_is_ignored(self, monkeypatch):
        monkeypatch.setenv("KASTENATOR_NUM_RETRIES", "many")
        assert get_settings_from_env() == {}

    def test_empty_float_clears_value(self, monkeypatch):
        monkeypatch.setenv("KASTENATOR_CRITIQUE_TEMPERATURE", "")
        assert get_settings_from_env() == {"critique_temperature": None}

    def test_load_env_file_does_not_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KASTENATOR_ATOM_FOLDER", "FromEnv")
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\nKASTENATOR_ATOM_FOLDER=FromFile\nKASTENATOR_CLAUDE_API_KEY='sk-ant'\n"
        )

        try:
            load_env_file(env_file)

            assert os.environ["KASTENATOR_ATOM_FOLDER"] == "FromEnv"
            assert os.environ["KASTENATOR_CLAUDE_API_KEY"] == "sk-ant"
        finally:
            os.environ.pop("KASTENATOR_CLAUDE_API_KEY", None)


class TestBuildSettings:
    def test_yaml_settings(self):
        settings = build_settings(
            {"settings": {"quarry_folders": ["Inbox"], "llm_provider": "local"}},
            env_settings={},
        )
        assert settings.quarry_folders == ["Inbox"]
        assert settings.llm_provider == ProviderType.LOCAL

    def test_env_overrides_yaml(self):
        settings = build_settings(
            {"settings": {"atom_folder": "FromYaml", "quarry_value": "raw"}},
            env_settings={"atom_folder": "FromEnv"},
        )
        assert settings.atom_folder == "FromEnv"
        assert settings.quarry_value == "raw"

    def test_defaults(self):
        assert build_settings({}, env_settings={}).atom_folder == "Atoms"


class TestVaultDir:
    def test_precedence(self, monkeypatch):
        config = {"vault_dir": "from-yaml"}
        assert get_vault_dir({}) == "."
        assert get_vault_dir(config) == "from-yaml"
        monkeypatch.setenv("KASTENATOR_VAULT_DIR", "from-env")
        assert get_vault_dir(config) == "from-env"
        assert get_vault_dir(config, "from-arg") == "from-arg"


class TestGetKastenatorConfig:
    def test_resolves_config(self, tmp_path):
        path = tmp_path / "kastenator.yaml"
        path.write_text(f"vault_dir: {tmp_path}\nsettings:\n  atom_folder: Zettels\n  extra: 1\n")

        config = get_kastenator_config(config_path=path)

        assert config.vault_dir == str(tmp_path)
        assert config.settings.atom_folder == "Zettels"
        assert config.config_path == path
        assert config.warnings == ["Unknown settings keys: extra"]

    def test_missing_config_file(self, tmp_path):
        result = get_kastenator_config(config_path=tmp_path / "missing.yaml")
        assert isinstance(result, ConfigError)
        assert "Config file not found" in result.message

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "kastenator.yaml"
        path.write_text("settings: [unclosed\n")

        result = get_kastenator_config(vault_dir=str(tmp_path), config_path=path)

        assert isinstance(result, ConfigError)
        assert "Invalid YAML" in result.message

    def test_invalid_settings(self, tmp_path):
        path = tmp_path / "kastenator.yaml"
        path.write_text("settings:\n  llm_provider: nonsense\n")

        result = get_kastenator_config(vault_dir=str(tmp_path), config_path=path)

        assert isinstance(result, ConfigError)
        assert "Invalid settings" in result.message

    def test_missing_vault(self, tmp_path):
        result = get_kastenator_config(vault_dir=str(tmp_path / "nope"))
        assert isinstance(result, ConfigError)
        assert "Vault directory not found" in result.message

    def test_get_service_and_discovery(self, tmp_path):
        assert isinstance(get_service(vault_dir=str(tmp_path)), AtomisationService)
        assert isinstance(get_discovery(vault_dir=str(tmp_path)), NoteDiscovery)
