"""Shared pytest fixtures."""

import os
import random

import pytest

from kastenator.exceptions import StorageFailure
from kastenator.models import SourceNote
from kastenator.providers import LLMClient, ProviderType
from kastenator.settings import Settings
from kastenator.storage import MetadataCache, MetadataIndex, NoteStorage, normalize_path


class InMemoryVault(NoteStorage, MetadataCache):
    """Vault kept in dicts. Paths listed in `fail_on_create` raise StorageFailure."""

    def __init__(self, notes=None, frontmatter=None):
        self.notes: dict[str, str] = dict(notes or {})
        self.frontmatter: dict[str, dict] = dict(frontmatter or {})
        self.folders: set[str] = set()
        self.fail_on_create: set[str] = set()
        self.created: list[str] = []

    async def read(self, path: str) -> str:
        path = normalize_path(path)
        if path not in self.notes:
            raise StorageFailure(f"Note not found: {path}")
        return self.notes[path]

    async def create(self, path: str, text: str) -> str:
        path = normalize_path(path)
        if path in self.fail_on_create:
            raise StorageFailure(f"Disk full: {path}")
        if path in self.notes:
            raise StorageFailure(f"File already exists: {path}")
        self.notes[path] = text
        self.created.append(path)
        return path

    async def exists(self, path: str) -> bool:
        path = normalize_path(path)
        return path in self.notes or path in self.folders

    async def create_folder(self, path: str) -> None:
        self.folders.add(normalize_path(path))

    async def modify(self, path: str, text: str) -> None:
        path = normalize_path(path)
        if path not in self.notes:
            raise StorageFailure(f"Note not found: {path}")
        self.notes[path] = text

    def list_markdown_files(self) -> list[str]:
        return [path for path in self.notes if path.endswith(".md")]

    def get_frontmatter(self, path: str):
        return self.frontmatter.get(path)


class FakeIndex(MetadataIndex):
    """Structured index answering from a {folder: [paths]} mapping."""

    def __init__(self, pages_by_folder=None, failing_folders=()):
        self.pages_by_folder = pages_by_folder or {}
        self.failing_folders = set(failing_folders)
        self.queries: list[tuple[str, str, str]] = []

    def pages(self, folder: str, field: str, value: str) -> list[str]:
        self.queries.append((folder, field, value))
        if folder in self.failing_folders:
            raise ValueError(f"Folder does not exist: {folder}")
        return list(self.pages_by_folder.get(folder, []))


class FakeLLMClient(LLMClient):
    """LLM client returning a fixed reply (or raising) and recording prompts."""

    name = "Fake"
    provider_type = ProviderType.LOCAL

    def __init__(self, reply="Critique from the model.", available=True, error=None):
        self.reply = reply
        self.available = available
        self.error = error
        self.calls: list[list[dict]] = []

    def is_available(self) -> bool:
        return self.available

    def complete(self, messages, temperature=None):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    """Settings with the default quarry folders."""
    return Settings()


@pytest.fixture
def source_note():
    return SourceNote(
        path="Fleeting notes/Testing.md",
        title="Testing",
        content="Migration:: quarry\n\nTests catch regressions before users do.",
        frontmatter={"Migration": "quarry"},
        migration_status="quarry",
    )


@pytest.fixture
def vault():
    return InMemoryVault()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def disk_vault(tmp_path, monkeypatch):
    """A vault directory with two quarry notes and one finished note.

    The cwd moves to tmp_path and KASTENATOR_* variables are cleared so no
    outside config leaks in.
    """
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("KASTENATOR_"):
            monkeypatch.delenv(key)

    vault_dir = tmp_path / "vault"
    notes = {
        "Fleeting notes/Testing.md": "---\nMigration: quarry\n---\nMigration:: quarry\n\n"
        "Tests catch regressions before users do.\n",
        "Source notes/Caching.md": "---\nMigration: quarry\n---\nMigration:: quarry\n\n"
        "Caches trade memory for latency.\n",
        "Fleeting notes/Done.md": "---\nMigration: atomised\n---\nMigration:: atomised\n",
    }
    for path, text in notes.items():
        target = vault_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return vault_dir
