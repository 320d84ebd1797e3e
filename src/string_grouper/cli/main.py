"""String Grouper CLI main entry point."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import click
import typer
from typer.core import TyperCommand

from string_grouper.config import GrouperConfig
from string_grouper.engine.grouping import group_lines
from string_grouper.errors import GrouperError
from string_grouper.extraction.lines import load_lines
from string_grouper.report import select_report_groups, write_report

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="string-grouper",
    help="Group unique lines of a gzip file that share a field value",
    add_completion=False,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Pick the root log level; --verbose wins over --quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr at the level picked on the command line."""
    logging.basicConfig(level=resolve_log_level(verbose, quiet), format=LOG_FORMAT)


def fail(message: str) -> NoReturn:
    typer.secho(f"Ошибка: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


class GroupCommand(TyperCommand):
    """Report command-line usage errors like any other failure, with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            fail(e.format_message())


def run(path: Path, config: GrouperConfig) -> int:
    """Read, group and report one file. Returns the number of reported groups."""
    loaded = load_lines(path, config)
    result = group_lines(loaded.lines, config)

    report_groups = select_report_groups(result.groups)
    logger.info("Groups with more than one line: %d", len(report_groups))

    if loaded.truncated:
        write_report(
            report_groups,
            config.output_path,
            truncated_from=loaded.unique_lines,
            kept=len(loaded.lines),
        )
    else:
        write_report(report_groups, config.output_path)
    return len(report_groups)


@app.command(cls=GroupCommand, context_settings={"allow_extra_args": True})
def group(
    ctx: typer.Context,
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Path to a gzip-compressed UTF-8 text file"),
    ] = None,
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Report file, overwritten on each run"),
    ] = "result.txt",
    batch_size: Annotated[
        int,
        typer.Option("--batch-size", help="Lines indexed per batch"),
    ] = 50_000,
    max_lines: Annotated[
        int,
        typer.Option("--max-lines", help="Max unique lines to group"),
    ] = 300_000,
    max_per_key: Annotated[
        int,
        typer.Option("--max-per-key", help="Max lines indexed per field value"),
    ] = 10_000,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Debug logging"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log warnings and errors"),
    ] = False,
) -> None:
    """Group lines sharing a value at the same ';'-separated position.

    Example: string-grouper lng.txt.gz
    """
    if path is None or ctx.args:
        fail("usage: string-grouper <path_to_file>")

    configure_logging(verbose=verbose, quiet=quiet)

    try:
        config = GrouperConfig(
            output_path=output,
            batch_size=batch_size,
            max_unique_lines=max_lines,
            max_indices_per_key=max_per_key,
        )
    except ValueError as e:
        fail(str(e))

    started = time.perf_counter()
    try:
        count = run(path, config)
    except GrouperError as e:
        logger.debug("Run failed", exc_info=True)
        fail(str(e))

    elapsed = time.perf_counter() - started
    typer.secho(
        f"Groups with more than one line: {count}",
        fg=typer.colors.GREEN,
    )
    typer.echo(f"Elapsed: {elapsed:.3f} s, report: {config.output_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
