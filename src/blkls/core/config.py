"""
blkls configuration management.

Provides centralized configuration with validation using Pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path.home() / ".blkls" / "config.json"


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file_enabled: bool = False
    console_enabled: bool = True
    json_format: bool = False
    log_directory: Path = Field(default_factory=lambda: Path.home() / ".blkls" / "logs")

    @field_validator("log_directory", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser().resolve()


class SysfsConfig(BaseModel):
    """Locations and constants of the kernel block device hierarchy."""

    block_root: Path = Path("/sys/block")
    class_block_root: Path = Path("/sys/class/block")
    bytes_per_block: int = Field(default=512, gt=0)
    unknown_model: str = Field(default="[UNKNOWN]", min_length=1)

    @field_validator("block_root", "class_block_root", mode="before")
    @classmethod
    def expand_root(cls, v: str | Path) -> Path:
        return Path(v).expanduser()


class ListingDefaults(BaseModel):
    """Default values for the listing flags, overridden by the command line."""

    non_loop_only: bool = False
    removable_only: bool = False
    expect_one: bool = False
    brief: bool = False


class BlklsConfig(BaseModel):
    """Main blkls configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sysfs: SysfsConfig = Field(default_factory=SysfsConfig)
    listing: ListingDefaults = Field(default_factory=ListingDefaults)

    @classmethod
    def load(cls, config_path: Path | None = None) -> BlklsConfig:
        """Load configuration from file or create default."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if config_path.exists():
            with open(config_path) as f:
                data = json.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

    def ensure_directories(self) -> None:
        """Create the log directory when file logging is enabled."""
        if self.logging.file_enabled:
            self.logging.log_directory.mkdir(parents=True, exist_ok=True)


def load_config(config_path: Path | None = None) -> BlklsConfig:
    """Load or create configuration."""
    config = BlklsConfig.load(config_path)
    config.ensure_directories()
    return config
