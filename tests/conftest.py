"""Test configuration and shared fixtures."""

from __future__ import annotations

import pytest

from openspec.infrastructure.file_system import FileSystemUtils


class RecordingFileSystem(FileSystemUtils):
    """Real file system that records every write and existence check."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []
        self.exists_checks: list[str] = []

    async def file_exists(self, path: str) -> bool:
        self.exists_checks.append(path)
        return await super().file_exists(path)

    async def write_file(self, path: str, content: str) -> None:
        self.writes.append(path)
        await super().write_file(path, content)


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture(autouse=True)
def _clear_openspec_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENSPEC_DIR", raising=False)
