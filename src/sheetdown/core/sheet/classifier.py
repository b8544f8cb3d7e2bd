"""
区域分类器
将带样式的单元格网格归类为标题、列表、段落和表格

规则：
1. 多个非空单元格 -> 表格行
2. 表格内只有一个非空单元格 -> 若为标题则结束表格，否则视为稀疏表格行
3. 单个非空单元格 -> 标题（按字号/粗体）> 列表（缩进/项目符号）> 普通段落
4. 空行 -> 结束表格，不输出
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import get_settings
from ..models import Block, GridCell, Table, TableBlock, TableCell, TableRow, TextBlock

BULLET_PREFIXES = ("•", "- ", "* ")
_BULLET_CHARS = "•-*"


@dataclass
class GridClassifier:
    """区域分类器"""

    heading1_font_size: float = 18.0
    heading2_font_size: float = 14.0
    list_indent_width: int = 2

    @classmethod
    def from_settings(cls) -> "GridClassifier":
        """按全局配置创建"""
        settings = get_settings()
        return cls(
            heading1_font_size=settings.heading1_font_size,
            heading2_font_size=settings.heading2_font_size,
            list_indent_width=settings.list_indent_width,
        )

    def classify(self, grid: Sequence[Sequence[GridCell]]) -> list[Block]:
        """归类网格为文档块列表"""
        blocks: list[Block] = []
        table_rows: list[TableRow] | None = None

        def close_table() -> None:
            nonlocal table_rows
            if table_rows:
                blocks.append(TableBlock(Table(tuple(table_rows))))
            table_rows = None

        for row in grid:
            non_empty = [cell for cell in row if not cell.is_blank]

            if not non_empty:
                close_table()
                continue

            # TODO: 稀疏行并入表格的规则缺少依据，需结合真实样本重新评估
            is_table_row = len(non_empty) > 1 or (
                table_rows is not None and not self.heading_level(non_empty[0])
            )

            if is_table_row:
                if table_rows is None:
                    table_rows = []
                table_rows.append(self._build_table_row(row))
                continue

            close_table()
            blocks.append(self._classify_cell(non_empty[0]))

        close_table()
        return blocks

    def heading_level(self, cell: GridCell) -> int:
        """标题级别，非标题返回 0"""
        size = cell.font_size
        if size is not None and size >= self.heading1_font_size:
            return 1
        if size is not None and self.heading2_font_size <= size < self.heading1_font_size:
            return 2
        if cell.bold:
            return 3
        return 0

    def is_list_item(self, cell: GridCell) -> bool:
        """缩进或以项目符号开头视为列表项"""
        if cell.indent_level > 0:
            return True
        return cell.text.strip().startswith(BULLET_PREFIXES)

    def _classify_cell(self, cell: GridCell) -> TextBlock:
        """归类单个非空单元格"""
        text = _normalize_newlines(cell.text)

        level = self.heading_level(cell)
        if level:
            return TextBlock("#" * level + " " + text)

        if self.is_list_item(cell):
            content = text.strip()
            if content[:1] in _BULLET_CHARS:
                content = content[1:].lstrip()
            indentation = " " * (max(cell.indent_level, 0) * self.list_indent_width)
            return TextBlock(indentation + "* " + content)

        return TextBlock(text)

    def _build_table_row(self, row: Sequence[GridCell]) -> TableRow:
        return TableRow(tuple(TableCell(cell.text, cell.alignment) for cell in row))


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", " ")


def classify_grid(grid: Sequence[Sequence[GridCell]]) -> list[Block]:
    """归类网格（兼容函数接口）"""
    return GridClassifier.from_settings().classify(grid)
