"""
blkls CLI Main Entry Point.

Lists block devices as a fixed-width table, as bare device paths, or as JSON.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path

import click
import humanize
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from blkls import __version__
from blkls.core.config import BlklsConfig, load_config
from blkls.core.errors import BlklsError, ExpectOneError
from blkls.core.listing import prepare_listing
from blkls.core.logging import get_logger, setup_logging
from blkls.core.models import BlockDevice, DeviceInventory, ListingOptions
from blkls.platform.linux import SysfsBlockBackend

console = Console(stderr=True, soft_wrap=True, highlight=False)
logger = get_logger(__name__)

EXIT_FAILURE = 1
EXIT_EXPECT_ONE = 3

NO_DISKS_MESSAGE = "No disks found"

# name, size, model, removability
COLUMN_WIDTHS = (10, 10, 14, 10)


def fit(value: str, width: int) -> str:
    """Left-align value in width cells, ending with an ellipsis when it overflows."""
    text = Text(value)
    text.truncate(width, overflow="ellipsis", pad=True)
    return text.plain


def format_size(size_bytes: int) -> str:
    return humanize.naturalsize(size_bytes, binary=True)


def render_full(device: BlockDevice) -> str:
    fields = (
        device.device_name,
        format_size(device.size_bytes),
        device.model_name,
        device.removable_label,
    )
    return " ".join(fit(value, width) for value, width in zip(fields, COLUMN_WIDTHS))


def render_brief(device: BlockDevice) -> str:
    return device.device_path


def render_lines(devices: Sequence[BlockDevice], options: ListingOptions) -> list[str]:
    """Render one line per device in the selected text form."""
    render = render_brief if options.brief else render_full
    return [render(d) for d in devices]


def render_json(devices: Sequence[BlockDevice], inventory: DeviceInventory) -> str:
    listed = DeviceInventory(
        devices=list(devices),
        root=inventory.root,
        timestamp=inventory.timestamp,
    )
    return json.dumps(listed.to_dict(), indent=2, default=str)


def get_config(ctx: click.Context, config_path: Path | None) -> BlklsConfig:
    """Use the configuration passed in the context, or load one."""
    if ctx.obj.get("config") is None:
        ctx.obj["config"] = BlklsConfig.load(config_path) if config_path else load_config()
    return ctx.obj["config"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="blkls")
@click.option("--non-loop-only", "-n", is_flag=True, help="Exclude loop devices")
@click.option("--removable-only", "-r", is_flag=True, help="Exclude non-removable devices")
@click.option(
    "--expect-one",
    "-e",
    is_flag=True,
    help=f"Fail with exit status {EXIT_EXPECT_ONE} unless exactly one device matches",
)
@click.option("--brief", "-b", is_flag=True, help="Print only /dev paths")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    non_loop_only: bool,
    removable_only: bool,
    expect_one: bool,
    brief: bool,
    json_output: bool,
    config_path: Path | None,
    debug: bool,
) -> None:
    """
    List the block devices exposed under /sys/block.

    Each device is shown with its size, model and whether it is removable.
    """
    ctx.ensure_object(dict)
    config = get_config(ctx, config_path)

    if debug:
        config.logging.level = "DEBUG"
    setup_logging(config.logging)

    defaults = config.listing
    brief = brief or defaults.brief
    if brief and json_output:
        raise click.UsageError("--brief and --json cannot be used together")

    options = ListingOptions(
        non_loop_only=non_loop_only or defaults.non_loop_only,
        removable_only=removable_only or defaults.removable_only,
        expect_one=expect_one or defaults.expect_one,
        brief=brief,
        json_output=json_output,
    )

    backend = SysfsBlockBackend(config.sysfs)
    try:
        inventory = backend.enumerate_devices()
    except BlklsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(EXIT_FAILURE)

    if not inventory.devices:
        click.echo(NO_DISKS_MESSAGE)
        return

    try:
        devices = prepare_listing(inventory.devices, options)
    except ExpectOneError as e:
        logger.debug("Cardinality check failed", count=e.count, devices=e.device_names)
        console.print(f"[red]Expected exactly one disk, found {e.count}[/red]")
        for name in e.device_names:
            console.print(f"  {escape(name)}")
        sys.exit(EXIT_EXPECT_ONE)

    if options.output_format == "json":
        click.echo(render_json(devices, inventory))
        return

    for line in render_lines(devices, options):
        click.echo(line)


def main() -> None:
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
