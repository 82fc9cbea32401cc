"""
blkls Linux Platform Backend.

Reads block device attributes from sysfs.
"""

from blkls.platform.linux.backend import SysfsBlockBackend, enumerate_devices
from blkls.platform.linux.parsers import parse_unsigned, read_string, read_unsigned

__all__ = [
    "SysfsBlockBackend",
    "enumerate_devices",
    "parse_unsigned",
    "read_string",
    "read_unsigned",
]
