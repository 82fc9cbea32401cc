"""
Linux sysfs block device backend.

Enumerates /sys/block and builds a BlockDevice for every device directory.
"""

from __future__ import annotations

from pathlib import Path

from blkls.core.config import SysfsConfig
from blkls.core.errors import (
    AttributeReadError,
    BlockRootError,
    MissingSizeError,
    RemovableFlagError,
)
from blkls.core.logging import OperationLogger, get_logger
from blkls.core.models import BlockDevice, DeviceInventory
from blkls.platform.base import FileAccess, LocalFileAccess
from blkls.platform.linux.parsers import read_string, read_unsigned

logger = get_logger(__name__)

LOOP_MARKER = "loop"


class SysfsBlockBackend:
    """Reads block device attributes from a sysfs tree."""

    def __init__(self, config: SysfsConfig | None = None, fs: FileAccess | None = None) -> None:
        self.config = config or SysfsConfig()
        self.fs = fs or LocalFileAccess()

    def enumerate_devices(self) -> DeviceInventory:
        """
        List every device under the block root.

        Devices are returned in directory order. Entries that are not
        directories, or that cannot be inspected, are skipped.

        Raises:
            BlockRootError: The block root cannot be listed.
            MissingSizeError: A device has no readable size.
            RemovableFlagError: A device's removable flag is unreadable or not 0/1.
        """
        root = self.config.block_root
        inventory = DeviceInventory(root=str(root))

        with OperationLogger("block device scan", logger, root=str(root)) as op:
            for name in self._list_root():
                device_dir = root / name
                try:
                    if not self.fs.is_dir(device_dir):
                        continue
                except OSError as e:
                    logger.debug("Skipping unreadable entry", entry=str(device_dir), error=str(e))
                    continue

                inventory.devices.append(self.read_device(name))

            op.update(device_count=inventory.total_devices)

        return inventory

    def read_device(self, device_name: str) -> BlockDevice:
        """Build the record for a single device directory."""
        device_dir = self.config.block_root / device_name
        return BlockDevice(
            device_name=device_name,
            size_bytes=self.read_size(device_dir, device_name),
            model_name=self.read_model(device_name),
            is_removable=self.read_removable(device_dir),
            is_loop_device=self.is_loop_device(device_dir),
        )

    def read_size(self, device_dir: Path, device_name: str) -> int:
        try:
            blocks = read_unsigned(device_dir / "size", self.fs)
        except AttributeReadError as e:
            raise MissingSizeError(device_name, e) from e
        return blocks * self.config.bytes_per_block

    def read_removable(self, device_dir: Path) -> bool:
        path = device_dir / "removable"
        try:
            flag = read_unsigned(path, self.fs)
        except AttributeReadError as e:
            raise RemovableFlagError(str(path), e.failure.description) from e

        if flag not in (0, 1):
            raise RemovableFlagError(str(path), f"expected 0 or 1, got {flag}")
        return flag == 1

    def read_model(self, device_name: str) -> str:
        path = self.config.class_block_root / device_name / "device" / "model"
        try:
            model = read_string(path, self.fs)
        except AttributeReadError as e:
            logger.debug("Model unavailable", device=device_name, error=str(e))
            return self.config.unknown_model
        return model or self.config.unknown_model

    def is_loop_device(self, device_dir: Path) -> bool:
        """A device is a loop device when its directory has a ``loop`` child.

        A directory that cannot be listed is treated as a loop device.
        """
        try:
            children = self.fs.list_dir(device_dir)
        except OSError as e:
            logger.debug("Cannot list device directory", path=str(device_dir), error=str(e))
            return True
        return LOOP_MARKER in children

    def _list_root(self) -> list[str]:
        root = self.config.block_root
        try:
            return self.fs.list_dir(root)
        except OSError as e:
            raise BlockRootError(str(root), e.strerror or str(e)) from e


def enumerate_devices(config: SysfsConfig | None = None, fs: FileAccess | None = None) -> DeviceInventory:
    """Enumerate block devices with a one-off backend."""
    return SysfsBlockBackend(config, fs).enumerate_devices()
