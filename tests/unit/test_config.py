"""
Tests for blkls.core.config module.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from blkls.core.config import (
    BlklsConfig,
    ListingDefaults,
    LoggingConfig,
    SysfsConfig,
    load_config,
)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.file_enabled is False
        assert config.console_enabled is True
        assert config.json_format is False

    def test_custom_values(self) -> None:
        config = LoggingConfig(level="DEBUG", json_format=True)
        assert config.level == "DEBUG"
        assert config.json_format is True

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_path_expansion(self) -> None:
        config = LoggingConfig(log_directory="~/logs")
        assert "~" not in str(config.log_directory)


class TestSysfsConfig:
    """Tests for SysfsConfig."""

    def test_default_values(self) -> None:
        config = SysfsConfig()
        assert config.block_root == Path("/sys/block")
        assert config.class_block_root == Path("/sys/class/block")
        assert config.bytes_per_block == 512
        assert config.unknown_model == "[UNKNOWN]"

    def test_block_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SysfsConfig(bytes_per_block=0)

    def test_sentinel_must_not_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            SysfsConfig(unknown_model="")

    def test_string_roots(self) -> None:
        config = SysfsConfig(block_root="/tmp/block")
        assert config.block_root == Path("/tmp/block")


class TestListingDefaults:
    """Tests for ListingDefaults."""

    def test_all_disabled(self) -> None:
        defaults = ListingDefaults()
        assert not any(
            [defaults.non_loop_only, defaults.removable_only, defaults.expect_one, defaults.brief]
        )


class TestBlklsConfig:
    """Tests for BlklsConfig."""

    def test_default_config(self) -> None:
        config = BlklsConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.sysfs, SysfsConfig)
        assert isinstance(config.listing, ListingDefaults)

    def test_save_and_load(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config = BlklsConfig(
            sysfs=SysfsConfig(block_root=tmp_path / "block"),
            listing=ListingDefaults(non_loop_only=True),
        )
        config.save(config_path)

        loaded = BlklsConfig.load(config_path)
        assert loaded.sysfs.block_root == tmp_path / "block"
        assert loaded.listing.non_loop_only is True

    def test_load_partial_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"sysfs": {"unknown_model": "?"}}))

        loaded = BlklsConfig.load(config_path)
        assert loaded.sysfs.unknown_model == "?"
        assert loaded.sysfs.bytes_per_block == 512

    def test_load_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = BlklsConfig.load(tmp_path / "missing.json")
        assert config == BlklsConfig()

    def test_ensure_directories_with_file_logging(self, tmp_path: Path) -> None:
        config = BlklsConfig(
            logging=LoggingConfig(file_enabled=True, log_directory=tmp_path / "logs")
        )
        config.ensure_directories()
        assert (tmp_path / "logs").is_dir()

    def test_ensure_directories_without_file_logging(self, tmp_path: Path) -> None:
        config = BlklsConfig(logging=LoggingConfig(log_directory=tmp_path / "logs"))
        config.ensure_directories()
        assert not (tmp_path / "logs").exists()

    def test_load_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        BlklsConfig(listing=ListingDefaults(brief=True)).save(config_path)
        assert load_config(config_path).listing.brief is True
