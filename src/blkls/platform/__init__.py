"""
blkls Platform Layer.

Provides file access and the Linux sysfs backend.
"""

from __future__ import annotations

from blkls.platform.base import FileAccess, LocalFileAccess
from blkls.platform.linux import SysfsBlockBackend, enumerate_devices

__all__ = [
    "FileAccess",
    "LocalFileAccess",
    "SysfsBlockBackend",
    "enumerate_devices",
]
