"""
File System Utilities

Async file helpers used by slash command configurators, implemented with
aiofiles. Errors (permissions, disk full, ...) are not caught here; they
propagate to the caller.
"""

import os

import aiofiles
import aiofiles.os
import structlog

from openspec.core.interfaces.slash_commands import FileSystemProtocol


class FileSystemUtils(FileSystemProtocol):
    """
    Local file system implementing FileSystemProtocol.

    Example:
        >>> fs = FileSystemUtils()
        >>> path = fs.join_path("/project", ".gemini/commands/openspec_apply.toml")
        >>> await fs.write_file(path, 'description = "..."')
        >>> assert await fs.file_exists(path)
    """

    def __init__(self) -> None:
        self.logger = structlog.get_logger().bind(component="file_system")

    def join_path(self, *parts: str) -> str:
        """
        Join path segments.

        Segments may use forward slashes; they are normalized to the
        platform separator.
        """
        return os.path.normpath(os.path.join(*parts))

    async def file_exists(self, path: str) -> bool:
        """Return True if path is an existing regular file."""
        return await aiofiles.os.path.isfile(path)

    async def write_file(self, path: str, content: str) -> None:
        """
        Write content to path, replacing any existing file.

        Parent directories are created as needed.
        """
        directory = os.path.dirname(path)
        if directory:
            await aiofiles.os.makedirs(directory, exist_ok=True)

        async with aiofiles.open(path, "w", encoding="utf-8", newline="\n") as f:
            await f.write(content)

        self.logger.debug("file.written", path=path, size=len(content))
