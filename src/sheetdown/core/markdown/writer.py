"""
Markdown 序列化
将文档块输出为 Markdown 文本
"""

import re
from collections.abc import Iterable

from ..models import Alignment, Block, Table, TableBlock, TableRow, TextBlock

LINE_BREAK_MARKER = "<br>"

# 竖线前或末尾的连续反斜杠
_BACKSLASH_RUN_PATTERN = re.compile(r"\\+(?=\||\Z)")

_SEPARATOR_MARKERS = {
    Alignment.LEFT: ":---",
    Alignment.CENTER: ":-:",
    Alignment.RIGHT: "---:",
}


def escape_cell_text(text: str) -> str:
    """转义单元格中的竖线和换行

    紧邻竖线或位于单元格末尾的反斜杠加倍，与网格解析器的切分规则互逆
    """
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\n", LINE_BREAK_MARKER)
    text = _BACKSLASH_RUN_PATTERN.sub(lambda m: m.group(0) * 2, text)
    return text.replace("|", "\\|")


def render_table(table: Table) -> str:
    """输出 Markdown 表格，不含末尾换行"""
    if not table.rows:
        return ""

    header = table.rows[0]
    column_count = len(header)

    lines = [
        _render_row(header, column_count),
        "|" + "".join(
            _SEPARATOR_MARKERS.get(cell.alignment, "---") + "|" for cell in header
        ),
    ]
    # 短行补空单元格，超出表头宽度的单元格不输出
    lines.extend(_render_row(row, column_count) for row in table.body)

    return "\n".join(lines)


def _render_row(row: TableRow, column_count: int) -> str:
    parts = ["|"]
    for col in range(column_count):
        if col < len(row):
            parts.append(escape_cell_text(row[col].value))
        parts.append("|")
    return "".join(parts)


def render_block(block: Block) -> str:
    """输出单个文档块"""
    match block:
        case TextBlock(text=text):
            return text
        case TableBlock(table=table):
            return render_table(table)
        case _:
            raise TypeError(f"未知的文档块类型: {type(block).__name__}")


def render_document(blocks: Iterable[Block]) -> str:
    """输出完整文档，块之间以空行分隔"""
    rendered = [render_block(block) for block in blocks]
    if not rendered:
        return ""
    return "\n\n".join(rendered) + "\n"
