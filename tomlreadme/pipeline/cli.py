#!/usr/bin/env python3
"""
tomlreadme CLI
--------------

Simple README generator from TOML.

Reads a curated entry document and prints the rendered markdown to stdout.
Diagnostics and logs go to stderr; on failure nothing is printed to stdout
and the exit code is 1.

Usage:
    tomlreadme yasunori.toml > README.md
    tomlreadme --weekday --raw-content entries.yaml
    tomlreadme --log-dir logs -v yasunori.toml
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from tomlreadme import __version__
from tomlreadme.builders.readme import RenderOptions
from tomlreadme.core.cli import RenderStats, setup_logger
from tomlreadme.core.logging_manager import ReadmeLogger, handle_cli_error
from tomlreadme.pipeline.toml2md import render_file


@click.command()
@click.argument("filepath", metavar="FILEPATH", type=click.Path(path_type=Path))
@click.option(
    "--no-ids",
    is_flag=True,
    help="Omit the id column and its anchor links",
)
@click.option(
    "--weekday",
    is_flag=True,
    help="Show dates as 'YYYY-MM-DD Ddd' in the table and headings",
)
@click.option(
    "--raw-content",
    is_flag=True,
    help="Emit entry content as is instead of in a markdown code fence",
)
@click.option(
    "--free-text-dates",
    is_flag=True,
    help="Accept any string as a date and print it unchanged",
)
@click.option(
    "--log-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory for log files (default: no log files)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="tomlreadme")
@click.pass_context
def cli(
    ctx: click.Context,
    filepath: Path,
    no_ids: bool,
    weekday: bool,
    raw_content: bool,
    free_text_dates: bool,
    log_dir: Optional[Path],
    verbose: bool,
) -> None:
    """Render the entries in FILEPATH (TOML or YAML) as a markdown document."""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = log_dir
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(log_dir, "render", verbose=verbose)
    logger: ReadmeLogger = ctx.obj["logger"]

    options = RenderOptions(
        link_ids=not no_ids,
        show_weekday=weekday,
        fence_content=not raw_content,
    )
    stats = RenderStats()

    try:
        document = render_file(
            filepath,
            options=options,
            free_text_dates=free_text_dates,
            logger=logger,
            stats=stats,
        )
    except Exception as e:
        stats.errors += 1
        handle_cli_error(
            ctx,
            e,
            "render",
            additional_context={"filepath": str(filepath), **stats.to_dict()},
        )
        return

    click.echo(document)
    logger.log_info(
        "Rendered document", {"filepath": str(filepath), **stats.to_dict()}
    )

    if verbose:
        click.echo(f"✅ {stats.summary()}", err=True)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


__all__ = ["cli", "main"]
