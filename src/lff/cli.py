"""CLI interface for lff."""

from __future__ import annotations

import logging
import math
import sys

import click

from lff.core.finder import find_files
from lff.errors import LffError
from lff.models.traversal_config import SortMethod, TraversalConfig
from lff.settings import Settings
from lff.utils import format_listing

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _finite_size(ctx: click.Context, param: click.Parameter, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite number.", ctx=ctx, param=param)
    return value


def _format_error(error: BaseException) -> str:
    """Render an error and its direct cause, without a traceback."""
    text = f"Error: {error}"
    cause = error.__cause__
    if cause is not None:
        text += f"\n\nCaused by:\n    {cause}"
    return text


@click.command()
@click.argument("directory")
@click.option("-a", "--absolute", is_flag=True,
              help="Display absolute paths for files. Automatically true if DIRECTORY isn't relative.")
@click.option("--base-ten", is_flag=True, help="Show sizes in KB/MB/GB instead of KiB/MiB/GiB when pretty-printing.")
@click.option("--exclude-hidden", is_flag=True, help="Exclude hidden files and directories.")
@click.option("-e", "--extension", default=None, help="Filter files by extension, e.g. 'mp4'.")
@click.option("-l", "--limit", type=click.IntRange(min=0), default=None, help="Return a maximum of this many files.")
@click.option("-m", "--min-size-mib", type=click.FloatRange(min=0), default=50.0, show_default=True,
              callback=_finite_size,
              help="The minimum size in MiB for displayed files, e.g. 10 = 10 MiB, 0.1 = 100 KiB.")
@click.option("-n", "--name-pattern", default=None,
              help="Filter file names by quoted glob patterns, e.g. '*abc*' will yield 1abc2.txt.")
@click.option("-p", "--pretty", is_flag=True, help="Pretty-print file sizes.")
@click.option("-s", "--sort-method", type=click.Choice([m.value for m in SortMethod]), default=None,
              help="How to sort found files.")
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None, help="Number of worker threads.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(package_name="lff")
def main(
    directory: str,
    absolute: bool,
    base_ten: bool,
    exclude_hidden: bool,
    extension: str | None,
    limit: int | None,
    min_size_mib: float,
    name_pattern: str | None,
    pretty: bool,
    sort_method: str | None,
    workers: int | None,
    verbose: int,
) -> None:
    """Recursively find large files under DIRECTORY."""
    _setup_logging(verbose)

    config = TraversalConfig.from_mib(
        min_size_mib,
        extension=extension,
        name_pattern=name_pattern,
        exclude_hidden=exclude_hidden,
        limit=limit,
        absolute=absolute,
        sort_method=SortMethod(sort_method) if sort_method else None,
    )
    log.info("Searching %s for files of at least %d bytes", directory, config.min_size_bytes)

    try:
        records = find_files(directory, config, max_workers=workers)
    except LffError as exc:
        click.echo(_format_error(exc), err=True)
        sys.exit(1)

    for line in format_listing(records, pretty=pretty, base_ten=base_ten):
        click.echo(line)


def run() -> None:
    """Console entry point: apply defaults from the settings file."""
    main(default_map=Settings.instance().option_defaults())
