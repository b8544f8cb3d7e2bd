"""
工作表写入
将文档块写入 openpyxl 工作表，行内样式写为富文本
"""

from collections.abc import Iterable

from openpyxl.cell import Cell, rich_text
from openpyxl.cell.text import InlineFont
from openpyxl.styles import Alignment as CellAlignment
from openpyxl.worksheet.worksheet import Worksheet

from ..markdown.inline import InlineStyleParser, has_inline_markers
from ..models import Alignment, Block, StyledSegment, TableBlock, TextBlock

# 列对齐 -> openpyxl 水平对齐
ALIGNMENT_TO_EXCEL: dict[Alignment, str] = {
    Alignment.UNDEFINED: "general",
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
}

LINE_BREAK_MARKERS = ("<br/>", "<br>")


def write_blocks_to_sheet(
    blocks: Iterable[Block],
    sheet: Worksheet,
    origin_row: int,
    origin_column: int,
    inline_parser: InlineStyleParser | None = None,
) -> int:
    """从起始单元格开始写入文档块，返回写入的行数"""
    parser = inline_parser or InlineStyleParser()
    current_row = origin_row

    for block in blocks:
        match block:
            case TextBlock(text=text):
                cell = sheet.cell(row=current_row, column=origin_column)
                set_cell_text(cell, to_cell_value(text, parser))
                current_row += 1
            case TableBlock():
                current_row += write_table_block(
                    block, sheet, current_row, origin_column, parser
                )
            case _:
                raise TypeError(f"未知的文档块类型: {type(block).__name__}")

    return current_row - origin_row


def write_table_block(
    block: TableBlock,
    sheet: Worksheet,
    start_row: int,
    start_column: int,
    inline_parser: InlineStyleParser | None = None,
) -> int:
    """写入表格块，返回写入的行数"""
    parser = inline_parser or InlineStyleParser()
    rows = block.table.rows

    for i, row in enumerate(rows):
        for j, table_cell in enumerate(row):
            text = replace_line_breaks(table_cell.value)
            cell = sheet.cell(row=start_row + i, column=start_column + j)
            set_cell_text(cell, to_cell_value(text, parser))
            cell.alignment = CellAlignment(
                horizontal=ALIGNMENT_TO_EXCEL[table_cell.alignment],
                wrap_text=True if "\n" in text else None,
            )

    return len(rows)


def set_cell_text(cell: Cell, value: str | rich_text.CellRichText | None) -> None:
    """写入文本值；以 = 开头的字符串按文本保存，不作为公式"""
    cell.value = value
    if isinstance(value, str) and value.startswith("="):
        cell.data_type = "s"


def replace_line_breaks(text: str) -> str:
    """<br> / <br/> 还原为换行"""
    for marker in LINE_BREAK_MARKERS:
        text = text.replace(marker, "\n")
    return text


def to_cell_value(text: str, parser: InlineStyleParser) -> str | rich_text.CellRichText | None:
    """去除行内标记，有样式时返回富文本"""
    if not text:
        return None
    if not has_inline_markers(text):
        return text

    segments = parser.parse(text)
    if all(segment.is_plain for segment in segments):
        return "".join(segment.text for segment in segments)

    return rich_text.CellRichText(
        [_to_rich_part(segment) for segment in segments if segment.text]
    )


def _to_rich_part(segment: StyledSegment) -> str | rich_text.TextBlock:
    if segment.is_plain:
        return segment.text
    font = InlineFont(
        b=segment.bold or None,
        i=segment.italic or None,
        strike=segment.strikethrough or None,
    )
    return rich_text.TextBlock(font, segment.text)
