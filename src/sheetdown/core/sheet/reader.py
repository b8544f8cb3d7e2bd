"""
工作表读取
将 openpyxl 工作表中的选区读取为带样式的抽象单元格网格
"""

import re
from datetime import date, datetime, time

from openpyxl.utils.cell import range_boundaries
from openpyxl.worksheet.worksheet import Worksheet

from ..models import Alignment, GridCell

# openpyxl 水平对齐 -> 列对齐，其余（general、justify 等）视为未定义
ALIGNMENT_FROM_EXCEL: dict[str, Alignment] = {
    "left": Alignment.LEFT,
    "center": Alignment.CENTER,
    "right": Alignment.RIGHT,
}


def read_range_as_grid(sheet: Worksheet, cell_range: str | None = None) -> list[list[GridCell]]:
    """读取选区为网格，未指定区域时读取已用区域"""
    min_col, min_row, max_col, max_row = _resolve_bounds(sheet, cell_range)

    grid: list[list[GridCell]] = []
    for row in sheet.iter_rows(
        min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col
    ):
        grid.append([read_cell(cell) for cell in row])
    return grid


def _resolve_bounds(sheet: Worksheet, cell_range: str | None) -> tuple[int, int, int, int]:
    """解析区域边界，整行/整列引用按已用区域补齐"""
    if not cell_range:
        return sheet.min_column, sheet.min_row, sheet.max_column, sheet.max_row

    min_col, min_row, max_col, max_row = range_boundaries(cell_range)
    return (
        min_col or sheet.min_column,
        min_row or sheet.min_row,
        max_col or sheet.max_column,
        max_row or sheet.max_row,
    )


def read_cell(cell) -> GridCell:
    """读取单个单元格的文本和样式"""
    font = cell.font
    alignment = cell.alignment
    horizontal = alignment.horizontal if alignment is not None else None
    indent = alignment.indent if alignment is not None else 0

    return GridCell(
        text=format_cell_value(cell),
        font_size=float(font.sz) if font is not None and font.sz is not None else None,
        bold=bool(font.b) if font is not None else False,
        indent_level=int(indent or 0),
        alignment=ALIGNMENT_FROM_EXCEL.get(horizontal or "", Alignment.UNDEFINED),
    )


def format_cell_value(cell) -> str:
    """按数字格式得到单元格的显示文本"""
    value = cell.value
    if value is None:
        return ""

    number_format = getattr(cell, "number_format", None) or "General"

    if isinstance(value, (datetime, date, time)):
        return _format_datetime(value, number_format)

    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"

    if not isinstance(value, (int, float)):
        return str(value)

    return _format_number(value, number_format)


def _format_datetime(value: datetime | date | time, number_format: str) -> str:
    """格式化日期时间"""
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, datetime) and ("H" in number_format or "h" in number_format):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value.strftime("%Y-%m-%d")


def _format_number(value: int | float, number_format: str) -> str:
    """格式化数字"""
    if "%" in number_format:
        return _format_percentage(value, number_format)

    if "E" in number_format.upper() and number_format != "General":
        return _format_scientific(value, number_format)

    if "#,##" in number_format or ",0" in number_format:
        return _format_thousands(value, number_format)

    if isinstance(value, float) and value == int(value):
        return str(int(value))
    return str(value)


def _format_percentage(value: float, number_format: str) -> str:
    decimal_match = re.search(r"0\.(0+)%", number_format)
    decimals = len(decimal_match.group(1)) if decimal_match else 0
    return f"{value * 100:.{decimals}f}%"


def _format_scientific(value: float, number_format: str) -> str:
    decimal_match = re.search(r"0\.(0+)E", number_format, re.IGNORECASE)
    decimals = len(decimal_match.group(1)) if decimal_match else 2
    return f"{value:.{decimals}E}"


def _format_thousands(value: float, number_format: str) -> str:
    """千分位（含货币符号）"""
    decimal_match = re.search(r"0\.(0+)", number_format)
    decimals = len(decimal_match.group(1)) if decimal_match else 0
    formatted = f"{value:,.{decimals}f}"
    if "¥" in number_format or "￥" in number_format:
        return f"¥{formatted}"
    if "$" in number_format:
        return f"${formatted}"
    return formatted
