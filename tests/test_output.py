import json

from elfhead.output.console import (
    HEADING,
    HeaderConsoleOutput,
    format_line,
    render_lines,
)
from elfhead.output.report import HeaderReportGenerator
from elfhead.parsers.header import ELFHeaderParser


def _line(label, value):
    return "  " + (label + ":").ljust(35) + value


def test_render_lines_system_v_elf64(header_builder):
    report = ELFHeaderParser(header_builder()).parse()

    assert render_lines(report) == [
        _line("Magic", "7f 45 4c 46 02 01 01 00 00 00 00 00 00 00 00 00"),
        _line("Class", "ELF64"),
        _line("Data", "2's complement, little endian"),
        _line("Version", "1 (current)"),
        _line("OS/ABI", "UNIX - System V"),
        _line("ABI Version", "0"),
        _line("Type", "EXEC (Executable file)"),
        _line("Entry point address", "0x400078"),
    ]


def test_values_share_one_column(header_builder):
    report = ELFHeaderParser(header_builder(elf_class=7, osabi=0x42)).parse()
    lines = render_lines(report, label_width=24)
    for line in lines:
        assert line[2:26].rstrip().endswith(":")
        assert line[26] != " "
    assert lines[1].endswith("<unknown: 0x7>")
    assert lines[4].endswith("<unknown: 0x42>")


def test_format_line_pads_label():
    assert format_line("Type", "X", width=8) == "  Type:   X"


def test_display_prints_heading_then_lines(header_builder, capsys):
    report = ELFHeaderParser(header_builder(elf_class=1, e_type=1, entry=0)).parse()
    HeaderConsoleOutput().display(report)

    out = capsys.readouterr().out.splitlines()
    assert out[0] == HEADING
    assert out[1:] == render_lines(report)
    assert out[-1].endswith("0x0")


def test_report_dict(header_builder):
    report = ELFHeaderParser(header_builder(osabi=3), path="/bin/true").parse()
    data = HeaderReportGenerator().to_dict(report)

    assert data["path"] == "/bin/true"
    assert data["class"] == {"code": 2, "label": "ELF64", "known": True}
    assert data["os_abi"]["label"] == "UNIX - Linux"
    assert data["version_field"]["is_current"] is True
    assert data["entry_point"]["label"] == "0x400078"
    assert data["entry_point"]["value"] == 0x400078


def test_generate_json_writes_file(header_builder, tmp_path):
    report = ELFHeaderParser(header_builder()).parse()
    target = tmp_path / "reports" / "header.json"

    saved = HeaderReportGenerator().generate_json(report, str(target))

    assert saved == str(target.resolve())
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["type"]["label"] == "EXEC (Executable file)"
    assert "generated_at" in data
