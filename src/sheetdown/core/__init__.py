"""
Core 模块
"""

from .config import Settings, configure_logging, get_settings
from .converter import (
    MarkdownToSheetConverter,
    SheetToMarkdownConverter,
    convert_excel_to_md,
    convert_md_to_excel,
)
from .exceptions import FormatError, SheetdownError
from .markdown import (
    GridParser,
    InlineStyleParser,
    MarkdownDocumentParser,
    TableParser,
    render_document,
)
from .models import (
    Alignment,
    Block,
    ExportRequest,
    GridCell,
    ImportRequest,
    StyledSegment,
    Table,
    TableBlock,
    TableCell,
    TableRow,
    TextBlock,
)
from .sheet import GridClassifier, read_range_as_grid, write_blocks_to_sheet

__all__ = [
    # 配置
    "Settings",
    "get_settings",
    "configure_logging",
    # 解析器
    "InlineStyleParser",
    "GridParser",
    "TableParser",
    "MarkdownDocumentParser",
    "GridClassifier",
    "render_document",
    # 宿主读写
    "read_range_as_grid",
    "write_blocks_to_sheet",
    # 转换器
    "SheetToMarkdownConverter",
    "MarkdownToSheetConverter",
    # 数据模型
    "Alignment",
    "Block",
    "GridCell",
    "StyledSegment",
    "Table",
    "TableBlock",
    "TableCell",
    "TableRow",
    "TextBlock",
    "ExportRequest",
    "ImportRequest",
    # 异常
    "SheetdownError",
    "FormatError",
    # 兼容函数
    "convert_excel_to_md",
    "convert_md_to_excel",
]
