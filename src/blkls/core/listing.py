"""
Filtering, cardinality checking and ordering of discovered devices.
"""

from __future__ import annotations

from collections.abc import Iterable

from blkls.core.errors import ExpectOneError
from blkls.core.logging import get_logger
from blkls.core.models import BlockDevice, ListingOptions

logger = get_logger(__name__)


def is_selected(device: BlockDevice, options: ListingOptions) -> bool:
    """Return True unless an active toggle excludes the device."""
    if options.non_loop_only and device.is_loop_device:
        return False
    if options.removable_only and not device.is_removable:
        return False
    return True


def filter_devices(devices: Iterable[BlockDevice], options: ListingOptions) -> list[BlockDevice]:
    """Keep the devices that pass every active filter, preserving order."""
    return [d for d in devices if is_selected(d, options)]


def sort_devices(devices: Iterable[BlockDevice]) -> list[BlockDevice]:
    """Order devices by name, ascending."""
    return sorted(devices, key=lambda d: d.device_name)


def check_expect_one(devices: list[BlockDevice]) -> BlockDevice:
    """Return the only device, or raise ExpectOneError with the matching names."""
    if len(devices) != 1:
        raise ExpectOneError(sorted(d.device_name for d in devices))
    return devices[0]


def prepare_listing(devices: Iterable[BlockDevice], options: ListingOptions) -> list[BlockDevice]:
    """Filter, enforce the cardinality constraint if requested, then sort.

    Raises:
        ExpectOneError: ``options.expect_one`` is set and the filtered
            set does not hold exactly one device.
    """
    selected = filter_devices(devices, options)
    logger.debug(
        "Filtered devices",
        non_loop_only=options.non_loop_only,
        removable_only=options.removable_only,
        selected=[d.device_name for d in selected],
    )

    if options.expect_one:
        check_expect_one(selected)

    return sort_devices(selected)
