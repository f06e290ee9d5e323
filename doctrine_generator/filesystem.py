"""
Filesystem collaborator used by the generator.

The generator only ever creates directories and writes files; both calls are
awaitable so a host can plug in any storage. ``LocalFileSystem`` writes to
the local disk.
"""

import asyncio
import logging
from pathlib import Path
from typing import Protocol, Union

from .exceptions import FileSystemError


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileSystem(Protocol):
    """What the generator needs from a filesystem."""

    async def create_directory(self, path: PathLike) -> None:
        """Create ``path`` (and missing parents); raise FileSystemError on failure."""
        ...

    async def write_file(self, path: PathLike, text: str, overwrite: bool = True) -> None:
        """Write ``text`` as UTF-8 to ``path``; raise FileSystemError on failure."""
        ...


class LocalFileSystem:
    """FileSystem implementation backed by pathlib, off the event loop thread."""

    async def create_directory(self, path: PathLike) -> None:
        await asyncio.to_thread(self._create_directory, Path(path))

    async def write_file(self, path: PathLike, text: str, overwrite: bool = True) -> None:
        await asyncio.to_thread(self._write_file, Path(path), text, overwrite)

    @staticmethod
    def _create_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileSystemError(
                f"Could not create directory {path}: {e}",
                path=str(path),
                operation="create_directory",
            ) from e
        logger.debug(f"Created directory: {path}")

    @staticmethod
    def _write_file(path: Path, text: str, overwrite: bool) -> None:
        if not overwrite and path.exists():
            raise FileSystemError(
                f"Refusing to overwrite existing file {path}",
                path=str(path),
                operation="write_file",
            )
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise FileSystemError(
                f"Could not write file {path}: {e}",
                path=str(path),
                operation="write_file",
            ) from e
        logger.debug(f"Generated file: {path}")
