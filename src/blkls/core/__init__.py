"""
blkls Core - Models, configuration, logging and listing logic.
"""

from blkls.core.config import BlklsConfig, LoggingConfig, SysfsConfig
from blkls.core.errors import (
    AttributeReadError,
    BlklsError,
    BlockRootError,
    ExpectOneError,
    MissingSizeError,
    RemovableFlagError,
)
from blkls.core.listing import filter_devices, prepare_listing, sort_devices
from blkls.core.logging import get_logger, setup_logging
from blkls.core.models import AttributeFailure, BlockDevice, DeviceInventory, ListingOptions

__all__ = [
    "BlklsConfig",
    "LoggingConfig",
    "SysfsConfig",
    "AttributeReadError",
    "BlklsError",
    "BlockRootError",
    "ExpectOneError",
    "MissingSizeError",
    "RemovableFlagError",
    "filter_devices",
    "prepare_listing",
    "sort_devices",
    "get_logger",
    "setup_logging",
    "AttributeFailure",
    "BlockDevice",
    "DeviceInventory",
    "ListingOptions",
]
