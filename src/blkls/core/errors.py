"""
blkls exceptions.

Defines the hierarchy of exceptions raised while enumerating block devices.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blkls.core.models import AttributeFailure


class BlklsError(Exception):
    """Base exception for blkls errors."""


class AttributeReadError(BlklsError):
    """A sysfs attribute could not be opened, read, or parsed."""

    def __init__(self, path: str, failure: AttributeFailure, detail: str | None = None) -> None:
        self.path = path
        self.failure = failure
        self.detail = detail
        message = f"{path}: {failure.description}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class BlockRootError(BlklsError):
    """The block device root directory could not be listed."""

    def __init__(self, root: str, detail: str) -> None:
        self.root = root
        super().__init__(f"Cannot list block device root {root}: {detail}")


class MissingSizeError(BlklsError):
    """A device does not expose a readable size attribute."""

    def __init__(self, device_name: str, cause: AttributeReadError) -> None:
        self.device_name = device_name
        self.path = cause.path
        super().__init__(f"Device {device_name} has no usable size: {cause}")


class RemovableFlagError(BlklsError):
    """The removable attribute is unreadable or holds something other than 0/1."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid removable flag at {path}: {reason}")


class ExpectOneError(BlklsError):
    """Exactly one device was required after filtering, but a different count matched."""

    def __init__(self, device_names: Sequence[str]) -> None:
        self.device_names = list(device_names)
        self.count = len(self.device_names)
        names = ", ".join(self.device_names) if self.device_names else "none"
        super().__init__(f"Expected exactly one disk, found {self.count}: {names}")
