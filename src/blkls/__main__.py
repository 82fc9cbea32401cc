"""
Entry point for ``python -m blkls``.
"""

from blkls.cli.main import main

if __name__ == "__main__":
    main()
