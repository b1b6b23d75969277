"""
ElfHead Report Generator
=========================

Structured JSON rendering of a decoded header, for scripting and for
archiving alongside other analysis artefacts.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from elfhead import __version__
from elfhead.core.models import FieldLabel, HeaderReport


def _field(label: FieldLabel) -> dict[str, Any]:
    return {"code": label.code, "label": label.label, "known": label.known}


class HeaderReportGenerator:
    """Generate JSON reports from decoded headers.

    Usage::

        generator = HeaderReportGenerator()
        text = generator.to_json(report)
        generator.generate_json(report, "header.json")
    """

    def to_dict(self, report: HeaderReport) -> dict[str, Any]:
        """Build the JSON-friendly report dictionary."""
        ident = report.identification
        return {
            "report_type": "elf_header",
            "version": __version__,
            "path": report.path,
            "magic": ident.magic_hex,
            "class": _field(ident.elf_class),
            "data": _field(ident.data_encoding),
            "version_field": {
                "value": ident.version.value,
                "is_current": ident.version.is_current,
                "label": ident.version.label,
            },
            "os_abi": _field(ident.os_abi),
            "abi_version": ident.abi_version,
            "type": _field(report.object_type),
            "entry_point": {
                "raw": report.entry_point.raw,
                "value": report.entry_point.value,
                "bits": report.entry_point.bits,
                "label": report.entry_point.label,
            },
        }

    def to_json(self, report: HeaderReport) -> str:
        return json.dumps(self.to_dict(report), indent=2, ensure_ascii=False)

    def generate_json(self, report: HeaderReport, output_path: str) -> str:
        """Write the JSON report to *output_path*.

        Returns:
            The absolute path of the generated report.
        """
        data = self.to_dict(report)
        data["generated_at"] = datetime.now(timezone.utc).isoformat()

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return str(path.resolve())
