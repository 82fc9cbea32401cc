"""
blkls data models.

Defines the core data structures for block devices and listing options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Literal


class AttributeFailure(Enum):
    """Classification of a failed sysfs attribute read."""

    OPEN = "open"
    READ = "read"
    PARSE = "parse"

    @property
    def description(self) -> str:
        return {
            AttributeFailure.OPEN: "cannot open",
            AttributeFailure.READ: "cannot read contents",
            AttributeFailure.PARSE: "cannot parse",
        }[self]


OutputFormat = Literal["full", "brief", "json"]


@dataclass(frozen=True)
class BlockDevice:
    """A block device discovered under the block root."""

    device_name: str
    size_bytes: int
    model_name: str
    is_removable: bool
    # True when the device directory has a ``loop`` child, or cannot be listed
    is_loop_device: bool

    def __post_init__(self) -> None:
        if not self.device_name:
            raise ValueError("device_name must not be empty")
        if self.size_bytes < 0:
            raise ValueError("size_bytes must not be negative")

    @property
    def device_path(self) -> str:
        return f"/dev/{self.device_name}"

    @property
    def removable_label(self) -> str:
        return "removable" if self.is_removable else "fixed"

    def to_dict(self) -> dict[str, Any]:
        return {
            "device_name": self.device_name,
            "device_path": self.device_path,
            "size_bytes": self.size_bytes,
            "model_name": self.model_name,
            "is_removable": self.is_removable,
            "is_loop_device": self.is_loop_device,
        }


@dataclass
class DeviceInventory:
    """Result of a single enumeration pass, in enumeration order."""

    devices: list[BlockDevice] = field(default_factory=list)
    root: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total_devices(self) -> int:
        return len(self.devices)

    @property
    def total_capacity_bytes(self) -> int:
        return sum(d.size_bytes for d in self.devices)

    @property
    def device_names(self) -> list[str]:
        return [d.device_name for d in self.devices]

    def get_device(self, device_name: str) -> BlockDevice | None:
        """Find a device by name."""
        for device in self.devices:
            if device.device_name == device_name:
                return device
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "root": self.root,
            "total_devices": self.total_devices,
            "total_capacity_bytes": self.total_capacity_bytes,
            "devices": [d.to_dict() for d in self.devices],
        }


@dataclass(frozen=True)
class ListingOptions:
    """Filtering, cardinality and output options for a listing."""

    non_loop_only: bool = False
    removable_only: bool = False
    expect_one: bool = False
    brief: bool = False
    json_output: bool = False

    def __post_init__(self) -> None:
        if self.brief and self.json_output:
            raise ValueError("brief and JSON output are mutually exclusive")

    @property
    def output_format(self) -> OutputFormat:
        if self.json_output:
            return "json"
        if self.brief:
            return "brief"
        return "full"
