"""
blkls CLI Module.

Provides the command-line interface for listing block devices.
"""

from blkls.cli.main import main, cli

__all__ = ["main", "cli"]
