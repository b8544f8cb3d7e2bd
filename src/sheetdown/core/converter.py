"""
Excel 与 Markdown 双向转换器

功能：
1. Excel 选区 -> Markdown（标题 / 列表 / 段落 / 表格）
2. Markdown -> Excel（行内样式写为富文本，表格保留列对齐）
"""

from dataclasses import dataclass, field
from pathlib import Path

import openpyxl
from loguru import logger
from openpyxl.worksheet.worksheet import Worksheet

from .config import get_settings
from .markdown.document import MarkdownDocumentParser
from .markdown.writer import render_document
from .models import TableBlock
from .sheet.classifier import GridClassifier
from .sheet.reader import read_range_as_grid
from .sheet.writer import write_blocks_to_sheet


@dataclass
class SheetToMarkdownConverter:
    """Excel 转 Markdown 转换器"""

    classifier: GridClassifier = field(default_factory=GridClassifier.from_settings)

    def convert(
        self,
        excel_path: Path,
        output_path: Path | None = None,
        sheet_name: str | None = None,
        cell_range: str | None = None,
    ) -> Path | None:
        """执行转换，输出 .md 文件"""
        source_path = Path(excel_path)
        content = self.to_markdown(source_path, sheet_name, cell_range)
        if content is None:
            return None

        out_path = Path(output_path) if output_path else source_path.with_suffix(".md")
        return self._write_output(out_path, content)

    def to_markdown(
        self,
        excel_path: Path,
        sheet_name: str | None = None,
        cell_range: str | None = None,
    ) -> str | None:
        """读取 Excel 选区并返回 Markdown 文本"""
        source_path = Path(excel_path)

        if not source_path.exists():
            logger.error(f"找不到文件 '{source_path}'")
            return None

        logger.info(f"正在处理: {source_path.name}")

        try:
            workbook = openpyxl.load_workbook(str(source_path), data_only=True)
        except Exception as e:
            logger.error(f"解析失败: {e}")
            return None

        sheet = self._select_sheet(workbook, sheet_name)
        if sheet is None:
            return None

        try:
            return self.convert_sheet(sheet, cell_range)
        except ValueError as e:
            logger.error(f"无效的区域 '{cell_range}': {e}")
            return None

    def convert_sheet(self, sheet: Worksheet, cell_range: str | None = None) -> str:
        """将工作表选区转换为 Markdown 文本"""
        grid = read_range_as_grid(sheet, cell_range)
        blocks = self.classifier.classify(grid)

        table_count = sum(isinstance(block, TableBlock) for block in blocks)
        logger.info(
            f"Sheet '{sheet.title}' {cell_range or '已用区域'}: "
            f"{len(grid)} 行 -> {len(blocks)} 个块（表格 {table_count} 个）"
        )
        return render_document(blocks)

    def _select_sheet(self, workbook, sheet_name: str | None) -> Worksheet | None:
        """选择工作表，未指定时使用活动工作表"""
        if sheet_name is None:
            return workbook.active
        if sheet_name not in workbook.sheetnames:
            logger.error(f"工作表不存在: '{sheet_name}'（可选: {', '.join(workbook.sheetnames)}）")
            return None
        return workbook[sheet_name]

    def _write_output(self, out_path: Path, content: str) -> Path | None:
        """写入输出文件"""
        try:
            out_path.write_text(content, encoding="utf-8")
            logger.info(f"转换成功！输出: {out_path.absolute()}")
            return out_path
        except OSError as e:
            logger.error(f"写入文件失败: {e}")
            return None


@dataclass
class MarkdownToSheetConverter:
    """Markdown 转 Excel 转换器"""

    parser: MarkdownDocumentParser = field(default_factory=MarkdownDocumentParser)

    def convert(
        self,
        markdown_text: str,
        output_path: Path,
        sheet_name: str | None = None,
        origin: tuple[int, int] = (1, 1),
    ) -> Path | None:
        """写入 .xlsx 文件；文件已存在时写入其中的工作表"""
        out_path = Path(output_path)

        if not markdown_text.strip():
            logger.warning("Markdown 内容为空，跳过")
            return None

        try:
            workbook = self._open_workbook(out_path)
        except Exception as e:
            logger.error(f"打开工作簿失败: {e}")
            return None

        try:
            sheet = self._select_sheet(workbook, sheet_name)
            rows_written = self.write(markdown_text, sheet, origin)
        except Exception as e:
            logger.error(f"写入工作表失败: {e}")
            return None
        logger.info(f"Sheet '{sheet.title}' 写入 {rows_written} 行")

        try:
            workbook.save(str(out_path))
            logger.info(f"转换成功！输出: {out_path.absolute()}")
            return out_path
        except OSError as e:
            logger.error(f"写入文件失败: {e}")
            return None

    def write(self, markdown_text: str, sheet: Worksheet, origin: tuple[int, int] = (1, 1)) -> int:
        """解析 Markdown 并写入工作表，返回写入行数"""
        blocks = self.parser.parse(markdown_text)
        origin_row, origin_column = origin
        return write_blocks_to_sheet(blocks, sheet, origin_row, origin_column)

    def _open_workbook(self, out_path: Path):
        if out_path.exists():
            logger.info(f"写入已有工作簿: {out_path.name}")
            return openpyxl.load_workbook(str(out_path), rich_text=True)
        workbook = openpyxl.Workbook()
        workbook.active.title = get_settings().default_sheet_title
        return workbook

    def _select_sheet(self, workbook, sheet_name: str | None) -> Worksheet:
        """选择工作表，不存在时新建"""
        if sheet_name is None:
            return workbook.active
        if sheet_name in workbook.sheetnames:
            return workbook[sheet_name]
        logger.info(f"新建工作表: '{sheet_name}'")
        return workbook.create_sheet(title=sheet_name)


def convert_excel_to_md(
    excel_path: str,
    output_path: str | None = None,
    sheet_name: str | None = None,
    cell_range: str | None = None,
) -> str | None:
    """将 Excel 选区转换为 Markdown 文件（兼容函数接口）"""
    converter = SheetToMarkdownConverter()
    result = converter.convert(
        Path(excel_path),
        Path(output_path) if output_path else None,
        sheet_name=sheet_name,
        cell_range=cell_range,
    )
    return str(result) if result else None


def convert_md_to_excel(
    markdown_text: str,
    output_path: str,
    sheet_name: str | None = None,
    origin: tuple[int, int] = (1, 1),
) -> str | None:
    """将 Markdown 文本写入 Excel 文件（兼容函数接口）"""
    converter = MarkdownToSheetConverter()
    result = converter.convert(markdown_text, Path(output_path), sheet_name=sheet_name, origin=origin)
    return str(result) if result else None
