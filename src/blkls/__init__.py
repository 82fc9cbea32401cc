"""
blkls - Block device inventory for Linux.

Lists the block devices the kernel exposes under /sys/block with their
size, model, and removable and loop status.
"""

__version__ = "1.0.0"
__author__ = "blkls Team"

from blkls.core.config import BlklsConfig
from blkls.core.models import BlockDevice, DeviceInventory, ListingOptions

__all__ = ["BlklsConfig", "BlockDevice", "DeviceInventory", "ListingOptions", "__version__"]
