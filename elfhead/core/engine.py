"""
ElfHead Engine
===============

Ties the file-reading collaborator to the pure header decoders.

Pipeline:
    1. Read the first ``read_size`` bytes of the file (default 64, the size
       of an ``Elf64_Ehdr``) and close it.
    2. Validate the magic signature.
    3. Check that the buffer reaches the end of ``e_entry`` for the
       declared class.
    4. Decode the identification block, type and entry point.

All failures surface as :class:`~elfhead.core.errors.ElfHeadError`
subclasses; the engine never exits the process.
"""

from __future__ import annotations

from pathlib import Path

from shared.config import ToolkitConfig
from shared.logger import ToolkitLogger

from elfhead.core.errors import HeaderReadError, TruncatedHeaderError
from elfhead.core.models import HeaderReport
from elfhead.parsers.header import ELFHeaderParser, required_size
from elfhead.parsers.ident import EI_CLASS, EI_NIDENT, validate_magic


class HeaderEngine:
    """Read and decode ELF headers.

    Usage::

        engine = HeaderEngine()
        report = engine.inspect("/bin/ls")
        print(report.entry_point.label)
    """

    def __init__(
        self,
        config: ToolkitConfig | None = None,
        logger: ToolkitLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Toolkit configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._config: ToolkitConfig = config or ToolkitConfig()
        self._logger: ToolkitLogger = logger or ToolkitLogger(
            "engine",
            log_level=self._config.global_settings.log_level,
        )

    # ------------------------------------------------------------------ #
    #  Public interface
    # ------------------------------------------------------------------ #

    def read_header(self, file_path: str | Path) -> bytes:
        """Read the header prefix of *file_path*.

        Raises:
            HeaderReadError: If the file cannot be opened or read.
        """
        path = Path(file_path)
        read_size = max(self._config.elfhead.read_size, EI_NIDENT)
        self._logger.debug("Reading %d bytes from %s", read_size, path)
        try:
            with open(path, "rb") as fh:
                data = fh.read(read_size)
        except OSError as exc:
            self._logger.debug("Cannot read %s: %s", path, exc.strerror or exc)
            raise HeaderReadError(str(file_path), exc.strerror or "") from exc
        self._logger.debug("Read %d bytes", len(data))
        return data

    def decode(self, data: bytes, file_path: str = "<memory>") -> HeaderReport:
        """Decode an in-memory header buffer.

        Args:
            data: Bytes from the start of an ELF file.
            file_path: Display path stored in the report.

        Raises:
            InvalidMagicError: If the signature check fails.
            TruncatedHeaderError: If *data* ends before ``e_entry``.
        """
        strict = self._config.elfhead.strict_magic
        with self._logger.operation("decode_header"):
            validate_magic(data, strict=strict)

            elf_class = data[EI_CLASS] if len(data) > EI_CLASS else 0
            needed = required_size(elf_class)
            if len(data) < needed:
                self._logger.debug(
                    "Header of %s is %d bytes, need %d",
                    file_path, len(data), needed,
                )
                raise TruncatedHeaderError(file_path, len(data), needed)

            report = ELFHeaderParser(data, path=file_path, strict=strict).parse()
            self._logger.debug(
                "Decoded %s %s, entry %s",
                report.identification.elf_class.label,
                report.object_type.label,
                report.entry_point.label,
            )
        return report

    def inspect(self, file_path: str | Path) -> HeaderReport:
        """Read *file_path* and decode its header."""
        with self._logger.timed(f"inspect {file_path}"):
            data = self.read_header(file_path)
            return self.decode(data, str(file_path))
