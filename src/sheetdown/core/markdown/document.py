"""
Markdown 文档解析器
单次遍历将文档切分为文本块与表格块，表格解析失败时回退为逐行文本
"""

import re
from dataclasses import dataclass, field

from loguru import logger

from ..models import Block, TableBlock, TextBlock
from .grid import GridParser, is_table_line
from .table import TableParser

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """按换行切分，末尾无换行符的行保留，最后一个换行符之后的空串丢弃"""
    lines = _LINE_BREAK_PATTERN.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class MarkdownDocumentParser:
    """Markdown 文档解析器"""

    grid_parser: GridParser = field(default_factory=GridParser)
    table_parser: TableParser = field(default_factory=TableParser)

    def parse(self, text: str) -> list[Block]:
        """解析 Markdown 文本为文档块列表"""
        blocks: list[Block] = []
        if not text:
            return blocks

        table_buffer: list[str] = []
        in_table = False

        for line in split_lines(text):
            if is_table_line(line):
                # 进入或延续表格模式
                in_table = True
                table_buffer.append(line)
                continue

            if in_table:
                self._flush_table(table_buffer, blocks)
                in_table = False

            # 紧跟表格之后的空行不输出
            if line.strip() or not blocks or not isinstance(blocks[-1], TableBlock):
                blocks.append(TextBlock(line))

        if in_table:
            self._flush_table(table_buffer, blocks)

        logger.debug(f"文档解析完成：{len(blocks)} 个块")
        return blocks

    def _flush_table(self, table_buffer: list[str], blocks: list[Block]) -> None:
        """解析缓冲区中的表格行，失败时按原文逐行输出"""
        if not table_buffer:
            return

        try:
            grid = self.grid_parser.parse("\n".join(table_buffer))
            table = self.table_parser.parse(grid)
            blocks.append(TableBlock(table))
        except Exception as e:
            logger.debug(f"表格解析失败，按文本处理: {e}")
            blocks.extend(TextBlock(line) for line in table_buffer if line.strip())
        finally:
            table_buffer.clear()


def parse_markdown(text: str) -> list[Block]:
    """解析 Markdown 文档（兼容函数接口）"""
    return MarkdownDocumentParser().parse(text)
