"""File-system resolver used by commands to list, read, and write files.

Commands only touch the disk through a Resolver, so tests can swap in
an in-memory implementation. FileSystemResolver resolves every relative
path against a root directory (default: cwd).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

PROJECT_FILE_SUFFIX = ".graphcool"


class Resolver(Protocol):
    """Read/list/write capability injected into commands."""

    def project_files(self, directory: str) -> list[str]: ...

    def read_directory(self, directory: str) -> list[str]: ...

    def read(self, path: str) -> str: ...

    def write(self, path: str, contents: str) -> None: ...

    def is_dir(self, path: str) -> bool: ...


class FileSystemResolver:
    """Resolver backed by the real file system.

    Writes are atomic (write to .tmp, then rename) so an interrupted
    init never leaves a half-written project file behind.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or Path.cwd()).resolve()

    def _resolve(self, path: str) -> Path:
        return self.root / Path(path).expanduser()

    def read_directory(self, directory: str) -> list[str]:
        """List file names in a directory, in os.listdir order.

        Subdirectories are skipped, so every name returned can be read.
        """
        target = self._resolve(directory)
        return [name for name in os.listdir(target) if (target / name).is_file()]

    def project_files(self, directory: str) -> list[str]:
        """List project files (*.graphcool) in a directory.

        Returns:
            Paths relative to the resolver root, e.g. "./project.graphcool".
        """
        target = self._resolve(directory)
        if not target.is_dir():
            return []
        return [
            os.path.join(directory, name)
            for name in os.listdir(target)
            if name.endswith(PROJECT_FILE_SUFFIX) and (target / name).is_file()
        ]

    def read(self, path: str) -> str:
        """Read a text file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return self._resolve(path).read_text(encoding="utf-8")

    def write(self, path: str, contents: str) -> None:
        """Write a text file atomically, creating parent directories."""
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_file = target.with_name(f"{target.name}.tmp")
        tmp_file.write_text(contents, encoding="utf-8")
        os.replace(tmp_file, target)

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()
