"""
ElfHead Console Interface
==========================

Rich-powered console abstraction giving every ElfHead component the same
severity-prefixed message style.

Diagnostics are meant for a console constructed with ``stderr=True`` so
that they never interleave with report text on stdout.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_TOOLKIT_THEME = Theme(
    {
        "toolkit.success": "bold green",
        "toolkit.error": "bold red",
    }
)


class ToolkitConsole:
    """Unified console interface for ElfHead.

    Wraps :pyclass:`rich.console.Console` with message helpers.  Message
    text is escaped, so file paths containing ``[`` are printed verbatim.

    Usage::

        con = ToolkitConsole(stderr=True)
        con.error("Not an ELF file")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            stderr: Write to standard error instead of standard output.
        """
        self._console = Console(
            theme=_TOOLKIT_THEME,
            quiet=quiet,
            stderr=stderr,
            highlight=False,
            soft_wrap=True,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[toolkit.success]Success:[/toolkit.success] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message on a single line."""
        self._console.print(
            f"[toolkit.error]Error:[/toolkit.error] {escape(message)}"
        )

