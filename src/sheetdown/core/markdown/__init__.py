"""
Markdown 解析与输出模块
"""

from .document import MarkdownDocumentParser, parse_markdown
from .grid import GridParser, is_table_line, parse_grid
from .inline import InlineStyleParser, parse_inline
from .table import TableParser, parse_alignment, parse_table
from .writer import LINE_BREAK_MARKER, escape_cell_text, render_block, render_document, render_table

__all__ = [
    "MarkdownDocumentParser",
    "GridParser",
    "TableParser",
    "InlineStyleParser",
    "parse_markdown",
    "parse_grid",
    "parse_table",
    "parse_inline",
    "parse_alignment",
    "is_table_line",
    "LINE_BREAK_MARKER",
    "escape_cell_text",
    "render_block",
    "render_document",
    "render_table",
]
