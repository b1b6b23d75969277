"""
ElfHead -- ELF Header Reader
=============================

Decodes the identification block and main header fields of ELF binaries
and prints them in the style of ``readelf -h``.

Capabilities:
    - Magic signature validation (set-membership or strict positional)
    - e_ident decoding: class, data encoding, version, OS/ABI, ABI version
    - Endianness-aware decoding of the object type and entry point
    - Column-aligned text report and JSON report output

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2.
    - GNU Binutils. readelf(1).
"""

__version__ = "1.0.0"
__all__ = [
    "HeaderEngine",
    "HeaderReport",
    "HeaderConsoleOutput",
    "HeaderReportGenerator",
]

from elfhead.core.engine import HeaderEngine
from elfhead.core.models import HeaderReport
from elfhead.output.console import HeaderConsoleOutput
from elfhead.output.report import HeaderReportGenerator
