"""
blkls file access abstraction.

Defines the small filesystem capability the sysfs backend depends on, so
that a fake device tree or a mock can stand in for the real one.
"""

from __future__ import annotations

import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO


class FileAccess(ABC):
    """Read-only access to files and directory listings."""

    @abstractmethod
    def open_text(self, path: Path) -> IO[str]:
        """Open a file for reading text. Raises OSError on failure."""

    @abstractmethod
    def list_dir(self, path: Path) -> list[str]:
        """Return the names of the entries in a directory. Raises OSError on failure."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Whether path is a directory, following symlinks. Raises OSError on failure."""


class LocalFileAccess(FileAccess):
    """FileAccess over the local filesystem."""

    def open_text(self, path: Path) -> IO[str]:
        return open(path, encoding="utf-8")

    def list_dir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def is_dir(self, path: Path) -> bool:
        return stat.S_ISDIR(os.stat(path).st_mode)
