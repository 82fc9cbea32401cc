"""
Pytest configuration and fixtures for blkls tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeSysfs:
    """Builds a fake /sys/block and /sys/class/block tree under a directory."""

    def __init__(self, base: Path) -> None:
        self.block_root = base / "block"
        self.class_block_root = base / "class" / "block"
        self.block_root.mkdir(parents=True)
        self.class_block_root.mkdir(parents=True)

    def add_device(
        self,
        name: str,
        *,
        size: str | None = "0",
        removable: str | None = "0",
        model: str | None = None,
        loop: bool = False,
    ) -> Path:
        device_dir = self.block_root / name
        device_dir.mkdir()
        if size is not None:
            (device_dir / "size").write_text(size)
        if removable is not None:
            (device_dir / "removable").write_text(removable)
        if loop:
            (device_dir / "loop").mkdir()
        if model is not None:
            model_dir = self.class_block_root / name / "device"
            model_dir.mkdir(parents=True)
            (model_dir / "model").write_text(model)
        return device_dir

    def sysfs_config(self) -> "SysfsConfig":
        from blkls.core.config import SysfsConfig

        return SysfsConfig(block_root=self.block_root, class_block_root=self.class_block_root)


@pytest.fixture
def fake_sysfs(tmp_path: Path) -> FakeSysfs:
    """An empty fake sysfs tree."""
    return FakeSysfs(tmp_path / "sys")


@pytest.fixture
def example_sysfs(fake_sysfs: FakeSysfs) -> FakeSysfs:
    """A fixed SSD and a loop device without a model."""
    fake_sysfs.add_device("sda", size="2097152", removable="0", model="SAMSUNG SSD\n")
    fake_sysfs.add_device("loop0", size="204800", removable="0", loop=True)
    return fake_sysfs


@pytest.fixture
def sample_config(tmp_path: Path, fake_sysfs: FakeSysfs) -> "BlklsConfig":
    """Create a sample configuration pointing at the fake sysfs tree."""
    from blkls.core.config import BlklsConfig, LoggingConfig

    return BlklsConfig(
        logging=LoggingConfig(log_directory=tmp_path / "logs"),
        sysfs=fake_sysfs.sysfs_config(),
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
