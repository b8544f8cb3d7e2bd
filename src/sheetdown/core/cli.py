"""
命令行入口
Excel 选区 <-> Markdown 双向转换
"""

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .config import configure_logging
from .converter import MarkdownToSheetConverter, SheetToMarkdownConverter
from .models import ExportRequest, ImportRequest


def _run_to_md(args: argparse.Namespace) -> int:
    """Excel -> Markdown"""
    request = ExportRequest(sheet_name=args.sheet, cell_range=args.range)
    converter = SheetToMarkdownConverter()

    if args.output == "-":
        content = converter.to_markdown(
            Path(args.excel_file), request.sheet_name, request.cell_range
        )
        if content is None:
            return 1
        sys.stdout.write(content)
        return 0

    result = converter.convert(
        Path(args.excel_file),
        Path(args.output) if args.output else None,
        sheet_name=request.sheet_name,
        cell_range=request.cell_range,
    )
    return 0 if result else 1


def _run_to_excel(args: argparse.Namespace) -> int:
    """Markdown -> Excel"""
    if args.markdown_file == "-":
        markdown_text = sys.stdin.read()
    else:
        source_path = Path(args.markdown_file)
        if not source_path.exists():
            logger.error(f"找不到文件 '{source_path}'")
            return 1
        markdown_text = source_path.read_text(encoding="utf-8")

    request = ImportRequest(
        markdown_text=markdown_text, sheet_name=args.sheet, start_cell=args.start_cell
    )
    if not request.markdown_text.strip():
        logger.error("Markdown 内容为空")
        return 1

    result = MarkdownToSheetConverter().convert(
        request.markdown_text,
        Path(args.output),
        sheet_name=request.sheet_name,
        origin=request.origin,
    )
    return 0 if result else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetdown",
        description="Excel 选区与 Markdown 双向转换",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  sheetdown to-md report.xlsx
  sheetdown to-md report.xlsx -s 汇总 -r A1:F30 -o report.md
  sheetdown to-md report.xlsx -o -
  sheetdown to-excel notes.md -o notes.xlsx
  cat notes.md | sheetdown to-excel - -o notes.xlsx -c B2
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_md = subparsers.add_parser("to-md", help="Excel 选区转换为 Markdown")
    to_md.add_argument("excel_file", help="Excel 文件路径")
    to_md.add_argument("-s", "--sheet", default=None, help="工作表名称（默认活动工作表）")
    to_md.add_argument("-r", "--range", default=None, help="单元格区域，如 A1:D20（默认已用区域）")
    to_md.add_argument("-o", "--output", default=None, help="输出 .md 路径，'-' 表示标准输出")
    to_md.set_defaults(handler=_run_to_md)

    to_excel = subparsers.add_parser("to-excel", help="Markdown 写入 Excel")
    to_excel.add_argument("markdown_file", help="Markdown 文件路径，'-' 表示标准输入")
    to_excel.add_argument("-o", "--output", required=True, help="输出 .xlsx 路径（已存在则写入其中）")
    to_excel.add_argument("-s", "--sheet", default=None, help="工作表名称（不存在则新建）")
    to_excel.add_argument("-c", "--start-cell", default="A1", help="起始单元格（默认: A1）")
    to_excel.set_defaults(handler=_run_to_excel)

    return parser


def main(argv: list[str] | None = None) -> int:
    """命令行入口"""
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        return args.handler(args)
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"参数错误: {error['msg']}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
