"""
ElfHead CLI -- ELF Header Reader
=================================

Click-based command-line interface printing the ELF header of a file in
the style of ``readelf -h``.

Usage::

    # Text report
    elfhead /bin/ls

    # Require the exact 7f 45 4c 46 signature
    elfhead /bin/ls --strict

    # JSON on stdout, or to a file
    elfhead /bin/ls --json
    elfhead /bin/ls --output header.json

Exit status is 0 on success and 98 when the file is not an ELF file or
cannot be read.  Diagnostics are written to stderr.

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys

import click

from shared.config import ToolkitConfig
from shared.console import ToolkitConsole
from shared.logger import ToolkitLogger

from elfhead import __version__
from elfhead.core.engine import HeaderEngine
from elfhead.core.errors import ElfHeadError
from elfhead.output.console import HeaderConsoleOutput
from elfhead.output.report import HeaderReportGenerator

EXIT_FAILURE: int = 98


@click.command("elfhead")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Require the magic bytes in exact order (7f 45 4c 46).",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Print the decoded header as JSON.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a JSON report to this path.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
@click.version_option(__version__, prog_name="elfhead")
def elfhead_cli(
    path: str,
    strict: bool,
    json_output: bool,
    output_path: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Display the ELF header of PATH.

    \b
    Examples:
        elfhead /usr/bin/ls
        elfhead libc.so.6 --json
    """
    console = ToolkitConsole(stderr=True)

    try:
        config = ToolkitConfig.load(config_path)
    except ValueError as exc:
        console.error(f"Invalid configuration {config_path}: {exc}")
        sys.exit(1)
    if strict:
        config.elfhead.strict_magic = True

    settings = config.global_settings
    logger = ToolkitLogger(
        "cli",
        log_level="DEBUG" if verbose or settings.debug else settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    engine = HeaderEngine(config=config, logger=logger)
    try:
        report = engine.inspect(path)
    except ElfHeadError as exc:
        console.error(str(exc))
        sys.exit(EXIT_FAILURE)

    generator = HeaderReportGenerator()
    if json_output or config.elfhead.output_format == "json":
        click.echo(generator.to_json(report))
    else:
        HeaderConsoleOutput(config.elfhead.label_width).display(report)

    if output_path:
        try:
            saved = generator.generate_json(report, output_path)
        except OSError as exc:
            console.error(f"Can't write report {output_path}: {exc.strerror}")
            sys.exit(EXIT_FAILURE)
        console.success(f"JSON report saved: {saved}")


def main() -> None:
    """Entry point for the ``elfhead`` console script."""
    elfhead_cli()


if __name__ == "__main__":
    main()
