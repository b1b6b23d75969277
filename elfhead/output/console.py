"""
ElfHead Console Output
=======================

Renders a :class:`~elfhead.core.models.HeaderReport` as the fixed-order,
column-aligned text block printed by ``readelf -h``::

    ELF Header:
      Magic:                             7f 45 4c 46 02 01 01 00 ...
      Class:                             ELF64
      ...

Every line shares one label width so the values line up in a column.
"""

from __future__ import annotations

from typing import Callable

import click

from elfhead.core.models import HeaderReport

HEADING: str = "ELF Header:"
DEFAULT_LABEL_WIDTH: int = 35

# Emission order; each entry pairs a label with its value extractor.
_FIELDS: list[tuple[str, Callable[[HeaderReport], str]]] = [
    ("Magic", lambda r: r.identification.magic_hex),
    ("Class", lambda r: r.identification.elf_class.label),
    ("Data", lambda r: r.identification.data_encoding.label),
    ("Version", lambda r: r.identification.version.label),
    ("OS/ABI", lambda r: r.identification.os_abi.label),
    ("ABI Version", lambda r: str(r.identification.abi_version)),
    ("Type", lambda r: r.object_type.label),
    ("Entry point address", lambda r: r.entry_point.label),
]


def format_line(label: str, value: str, width: int = DEFAULT_LABEL_WIDTH) -> str:
    """Format one ``"  Label:   value"`` line."""
    return f"  {label + ':':<{width}}{value}"


def render_lines(
    report: HeaderReport,
    label_width: int = DEFAULT_LABEL_WIDTH,
) -> list[str]:
    """Return the report as an ordered list of lines, without the heading."""
    return [format_line(label, get(report), label_width) for label, get in _FIELDS]


class HeaderConsoleOutput:
    """Write rendered header reports to stdout.

    Lines are emitted with :func:`click.echo` rather than Rich so the text
    is byte-for-byte stable regardless of terminal width or colour support.
    """

    def __init__(self, label_width: int = DEFAULT_LABEL_WIDTH) -> None:
        self._label_width = label_width

    def display(self, report: HeaderReport) -> None:
        click.echo(HEADING)
        for line in render_lines(report, self._label_width):
            click.echo(line)
