"""
pytest 共享 fixtures
"""

from pathlib import Path

import openpyxl
import pytest
from openpyxl.styles import Alignment as CellAlignment
from openpyxl.styles import Font

from sheetdown.core import config
from sheetdown.core.config import Settings
from sheetdown.core.models import Alignment, GridCell


@pytest.fixture
def sample_markdown() -> str:
    """示例 Markdown 文档"""
    return "# Title\n\n| A | B |\n|---|---|\n| 1 | 2 |\n"


@pytest.fixture
def cell():
    """构造抽象单元格的工厂"""

    def _make(
        text: str = "",
        font_size: float | None = 11.0,
        bold: bool = False,
        indent_level: int = 0,
        alignment: Alignment = Alignment.UNDEFINED,
    ) -> GridCell:
        return GridCell(
            text=text,
            font_size=font_size,
            bold=bold,
            indent_level=indent_level,
            alignment=alignment,
        )

    return _make


@pytest.fixture
def sample_excel_path(tmp_path: Path) -> Path:
    """示例 Excel：标题 + 空行 + 两列表格"""
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = "Report"

    sheet["A1"] = "Title"
    sheet["A1"].font = Font(sz=20, b=True)

    sheet["A3"] = "Name"
    sheet["B3"] = "Qty"
    sheet["B3"].alignment = CellAlignment(horizontal="right")
    sheet["A4"] = "Apple"
    sheet["B4"] = 3
    sheet["B4"].alignment = CellAlignment(horizontal="right")

    path = tmp_path / "report.xlsx"
    workbook.save(str(path))
    return path


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """使用临时目录的配置实例"""
    instance = Settings(temp_dir=tmp_path / "temp")
    monkeypatch.setattr(config, "_settings", instance)
    return instance
