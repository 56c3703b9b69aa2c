# src/kastenator/storage/local.py
"""Local filesystem vault."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from kastenator.exceptions import StorageFailure
from kastenator.storage.base import MetadataCache, NoteStorage, normalize_path
from kastenator.storage.frontmatter import parse_frontmatter


class LocalVault(NoteStorage, MetadataCache):
    """A directory of markdown notes on the local filesystem.

    Implements both the storage contract and the plain metadata scan used
    when no structured index is available. Hidden directories (such as
    `.obsidian`) are skipped when listing notes.

    Args:
        root: Vault directory. Must exist.

    Example:
        vault = LocalVault("~/Notes")
        text = await vault.read("Fleeting notes/idea.md")
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser()

    def _resolve(self, path: str) -> Path:
        return self.root / normalize_path(path)

    async def read(self, path: str) -> str:
        try:
            return self._resolve(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageFailure(f"Failed to read {path}: {e}") from e

    async def create(self, path: str, text: str) -> str:
        target = self._resolve(path)
        try:
            with open(target, "x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError as e:
            raise StorageFailure(f"File already exists: {path}") from e
        except OSError as e:
            raise StorageFailure(f"Failed to create {path}: {e}") from e
        return normalize_path(path)

    async def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).exists()
        except OSError as e:
            raise StorageFailure(f"Failed to check {path}: {e}") from e

    async def create_folder(self, path: str) -> None:
        try:
            self._resolve(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageFailure(f"Failed to create folder {path}: {e}") from e

    async def modify(self, path: str, text: str) -> None:
        target = self._resolve(path)
        if not target.is_file():
            raise StorageFailure(f"Note not found: {path}")
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageFailure(f"Failed to modify {path}: {e}") from e

    def list_markdown_files(self) -> list[str]:
        if not self.root.is_dir():
            return []

        paths = []
        try:
            for file in self.root.rglob("*.md"):
                relative = file.relative_to(self.root)
                if any(part.startswith(".") for part in relative.parts):
                    continue
                paths.append(relative.as_posix())
        except OSError as e:
            raise StorageFailure(f"Failed to list notes in {self.root}: {e}") from e
        return sorted(paths)

    def get_frontmatter(self, path: str) -> dict[str, Any] | None:
        try:
            text = self._resolve(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        return parse_frontmatter(text)
