"""
文件级转换器与命令行测试
"""

from pathlib import Path

import openpyxl
import pytest

from sheetdown.core import cli
from sheetdown.core.converter import (
    MarkdownToSheetConverter,
    SheetToMarkdownConverter,
    convert_excel_to_md,
    convert_md_to_excel,
)
from sheetdown.core.sheet.classifier import GridClassifier

EXPECTED_REPORT_MD = "# Title\n\n|Name|Qty|\n|---|---:|\n|Apple|3|\n"


@pytest.fixture
def to_md() -> SheetToMarkdownConverter:
    return SheetToMarkdownConverter(classifier=GridClassifier())


# ============ Excel -> Markdown ============


def test_excel_to_markdown_file(to_md, sample_excel_path: Path) -> None:
    result = to_md.convert(sample_excel_path)

    assert result == sample_excel_path.with_suffix(".md")
    assert result.read_text(encoding="utf-8") == EXPECTED_REPORT_MD


def test_excel_to_markdown_sub_range(to_md, sample_excel_path: Path) -> None:
    content = to_md.to_markdown(sample_excel_path, sheet_name="Report", cell_range="A3:B3")
    assert content == "|Name|Qty|\n|---|---:|\n"


def test_missing_file(to_md, tmp_path: Path) -> None:
    assert to_md.convert(tmp_path / "missing.xlsx") is None


def test_unknown_sheet(to_md, sample_excel_path: Path) -> None:
    assert to_md.to_markdown(sample_excel_path, sheet_name="Nope") is None


def test_invalid_range(to_md, sample_excel_path: Path) -> None:
    assert to_md.to_markdown(sample_excel_path, cell_range="not a range") is None


def test_not_a_workbook(to_md, tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.xlsx"
    bogus.write_text("hello", encoding="utf-8")
    assert to_md.convert(bogus) is None


def test_convert_excel_to_md_function(settings, sample_excel_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "out.md"
    result = convert_excel_to_md(str(sample_excel_path), output_path=str(output))
    assert result == str(output)
    assert output.read_text(encoding="utf-8") == EXPECTED_REPORT_MD


# ============ Markdown -> Excel ============


def test_markdown_to_new_workbook(settings, tmp_path: Path) -> None:
    output = tmp_path / "out.xlsx"
    markdown = "# Notes\n| A | B |\n|---|---:|\n| **1** | 2 |\n"

    result = MarkdownToSheetConverter().convert(markdown, output)

    assert result == output
    sheet = openpyxl.load_workbook(str(output)).active
    assert sheet.title == settings.default_sheet_title
    assert sheet["A1"].value == "# Notes"
    assert sheet["A2"].value == "A"
    assert sheet["B3"].value == "2"
    assert sheet["B3"].alignment.horizontal == "right"


def test_markdown_into_existing_workbook(settings, sample_excel_path: Path) -> None:
    result = convert_md_to_excel("pasted", str(sample_excel_path), sheet_name="Extra", origin=(2, 3))

    assert result == str(sample_excel_path)
    workbook = openpyxl.load_workbook(str(sample_excel_path))
    assert workbook.sheetnames == ["Report", "Extra"]
    assert workbook["Extra"]["C2"].value == "pasted"
    assert workbook["Report"]["A1"].value == "Title"


def test_illegal_character_fails_cleanly(tmp_path: Path) -> None:
    output = tmp_path / "out.xlsx"
    assert MarkdownToSheetConverter().convert("page\x0cbreak\n", output) is None
    assert not output.exists()


def test_empty_markdown_is_skipped(tmp_path: Path) -> None:
    output = tmp_path / "out.xlsx"
    assert MarkdownToSheetConverter().convert("  \n ", output) is None
    assert not output.exists()


# ============ 命令行 ============


@pytest.fixture
def quiet_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)


def test_cli_to_md(quiet_cli, settings, sample_excel_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "cli.md"
    assert cli.main(["to-md", str(sample_excel_path), "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == EXPECTED_REPORT_MD


def test_cli_to_md_stdout(quiet_cli, settings, sample_excel_path: Path, capsys) -> None:
    assert cli.main(["to-md", str(sample_excel_path), "-r", "a3:b4", "-o", "-"]) == 0
    assert capsys.readouterr().out == "|Name|Qty|\n|---|---:|\n|Apple|3|\n"


def test_cli_to_md_missing_file(quiet_cli, settings, tmp_path: Path) -> None:
    assert cli.main(["to-md", str(tmp_path / "missing.xlsx")]) == 1


def test_cli_to_excel(quiet_cli, settings, tmp_path: Path) -> None:
    source = tmp_path / "in.md"
    source.write_text("| A |\n|:-:|\n| 1 |\n", encoding="utf-8")
    output = tmp_path / "out.xlsx"

    assert cli.main(["to-excel", str(source), "-o", str(output), "-c", "b2"]) == 0
    sheet = openpyxl.load_workbook(str(output)).active
    assert sheet["B2"].value == "A"
    assert sheet["B3"].alignment.horizontal == "center"


def test_cli_rejects_bad_start_cell(quiet_cli, settings, tmp_path: Path) -> None:
    source = tmp_path / "in.md"
    source.write_text("text", encoding="utf-8")
    assert cli.main(["to-excel", str(source), "-o", str(tmp_path / "x.xlsx"), "-c", "1A"]) == 1


def test_cli_to_excel_illegal_character(quiet_cli, settings, tmp_path: Path) -> None:
    source = tmp_path / "in.md"
    source.write_text("page\x0cbreak\n", encoding="utf-8")
    assert cli.main(["to-excel", str(source), "-o", str(tmp_path / "o.xlsx")]) == 1
