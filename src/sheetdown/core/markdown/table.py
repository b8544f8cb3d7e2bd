"""
Markdown 表格解析器
将网格（含分隔行）解析为带列对齐的 Table
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from ..exceptions import FormatError
from ..models import Alignment, Table, TableCell, TableRow

SEPARATOR_CELL_PATTERN = re.compile(r"^:?-+:?$")


def parse_alignment(marker: str) -> Alignment:
    """由分隔行单元格推断对齐方式，不合法时返回 UNDEFINED"""
    marker = marker.strip()
    if not SEPARATOR_CELL_PATTERN.match(marker):
        return Alignment.UNDEFINED

    starts = marker.startswith(":")
    ends = marker.endswith(":")
    if starts and ends:
        return Alignment.CENTER
    if starts:
        return Alignment.LEFT
    if ends:
        return Alignment.RIGHT
    return Alignment.UNDEFINED


def is_separator_row(cells: Sequence[str]) -> bool:
    """至少一个单元格符合分隔符语法才视为分隔行"""
    return any(SEPARATOR_CELL_PATTERN.match(cell.strip()) for cell in cells)


@dataclass
class TableParser:
    """表格解析器"""

    def parse(self, grid: Sequence[Sequence[str]]) -> Table:
        """解析网格为 Table"""
        if len(grid) < 2:
            raise FormatError("缺少分隔行")

        header_texts, separator = grid[0], grid[1]
        if not is_separator_row(separator):
            raise FormatError(f"第 2 行不是分隔行: {list(separator)!r}")

        alignments = [
            parse_alignment(separator[i]) if i < len(separator) else Alignment.UNDEFINED
            for i in range(len(header_texts))
        ]

        header = TableRow(
            tuple(TableCell(text, alignment) for text, alignment in zip(header_texts, alignments))
        )
        rows = [header]
        for body_texts in grid[2:]:
            rows.append(self._build_body_row(body_texts, alignments))

        return Table(tuple(rows))

    def _build_body_row(self, texts: Sequence[str], alignments: list[Alignment]) -> TableRow:
        """数据行沿用表头同列的对齐方式"""
        cells = []
        for col, text in enumerate(texts):
            alignment = alignments[col] if col < len(alignments) else Alignment.UNDEFINED
            cells.append(TableCell(text, alignment))
        return TableRow(tuple(cells))


def parse_table(grid: Sequence[Sequence[str]]) -> Table:
    """解析表格（兼容函数接口）"""
    return TableParser().parse(grid)
