"""
业务处理器 - Excel 与 Markdown 双向转换
使用类封装状态，消除全局变量
"""

import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

import openpyxl
from loguru import logger
from pydantic import ValidationError

from sheetdown.core.config import get_settings
from sheetdown.core.converter import MarkdownToSheetConverter, SheetToMarkdownConverter
from sheetdown.core.models import ExportRequest, ImportRequest


@dataclass
class ProcessingState:
    """处理状态（替代全局变量）"""

    markdown_path: Path | None = None
    excel_path: Path | None = None


def _upload_path(uploaded) -> Path:
    """兼容 Gradio 返回的文件路径或临时文件对象"""
    return Path(uploaded if isinstance(uploaded, (str, Path)) else uploaded.name)


def _validation_message(error: ValidationError) -> str:
    return "；".join(str(e["msg"]).removeprefix("Value error, ") for e in error.errors())


@dataclass
class SheetdownHandler:
    """Excel / Markdown 处理器"""

    state: ProcessingState = field(default_factory=ProcessingState)

    def export_markdown(
        self,
        excel_file,
        sheet_name: str | None,
        cell_range: str | None,
    ) -> tuple[str, str | None, str]:
        """Excel 选区 -> Markdown，返回 (Markdown 文本, .md 文件, 状态)"""
        if excel_file is None:
            return "", None, "⚠️ 请先上传 Excel 文件"

        try:
            request = ExportRequest(sheet_name=sheet_name, cell_range=cell_range)
        except ValidationError as e:
            return "", None, f"❌ 参数错误: {_validation_message(e)}"

        try:
            source_path = _upload_path(excel_file)
            converter = SheetToMarkdownConverter()
            content = converter.to_markdown(source_path, request.sheet_name, request.cell_range)
            if content is None:
                return "", None, "❌ Excel 转换失败，请检查文件、工作表名称和区域"

            md_path = self._work_dir() / f"{source_path.stem}.md"
            md_path.write_text(content, encoding="utf-8")
            self.state.markdown_path = md_path
        except Exception as e:
            logger.exception("处理出错")
            self._reset_state()
            return "", None, f"❌ 处理出错: {e!s}"

        if not content:
            status = "⚠️ 选区为空，未生成内容"
        else:
            status = self._build_status_message(
                source_path.name,
                request.sheet_name or "活动工作表",
                request.cell_range or "已用区域",
                f"生成 Markdown：{len(content.splitlines())} 行",
            )
        return content, str(md_path), status

    def import_markdown(
        self,
        markdown_text: str,
        sheet_name: str | None,
        start_cell: str | None,
        base_excel_file=None,
    ) -> tuple[str | None, str]:
        """Markdown -> Excel，返回 (.xlsx 文件, 状态)"""
        if not markdown_text or not markdown_text.strip():
            return None, "⚠️ 请先输入 Markdown 文本"

        try:
            request = ImportRequest(
                markdown_text=markdown_text, sheet_name=sheet_name, start_cell=start_cell
            )
        except ValidationError as e:
            return None, f"❌ 参数错误: {_validation_message(e)}"

        try:
            work_dir = self._work_dir()
            if base_excel_file is not None:
                base_path = _upload_path(base_excel_file)
                out_path = work_dir / base_path.name
                shutil.copy(base_path, out_path)
            else:
                out_path = work_dir / "markdown.xlsx"

            result = MarkdownToSheetConverter().convert(
                request.markdown_text,
                out_path,
                sheet_name=request.sheet_name,
                origin=request.origin,
            )
            if result is None:
                return None, "❌ 写入 Excel 失败"
            self.state.excel_path = result
        except Exception as e:
            logger.exception("处理出错")
            self._reset_state()
            return None, f"❌ 处理出错: {e!s}"

        status = self._build_status_message(
            result.name,
            request.sheet_name or "活动工作表",
            request.start_cell,
            f"输入 Markdown：{len(request.markdown_text.splitlines())} 行",
        )
        return str(result), status

    def list_sheets(self, excel_file) -> list[str]:
        """列出上传文件中的工作表名称"""
        if excel_file is None:
            return []
        try:
            workbook = openpyxl.load_workbook(str(_upload_path(excel_file)), read_only=True)
        except Exception as e:
            logger.warning(f"读取工作表列表失败: {e}")
            return []
        try:
            return list(workbook.sheetnames)
        finally:
            workbook.close()

    def _work_dir(self) -> Path:
        """创建本次处理的临时目录"""
        temp_root = get_settings().temp_dir
        temp_root.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(dir=temp_root))

    def _build_status_message(self, source: str, sheet: str, location: str, summary: str) -> str:
        """构建状态消息"""
        return f"""✅ 处理完成

文件：{source}
工作表：{sheet}
位置：{location}
{summary}"""

    def _reset_state(self) -> None:
        """重置状态"""
        self.state.markdown_path = None
        self.state.excel_path = None


# 全局处理器实例（用于 Gradio 回调）
_handler: SheetdownHandler | None = None


def _get_handler() -> SheetdownHandler:
    """获取处理器实例"""
    global _handler
    if _handler is None:
        _handler = SheetdownHandler()
    return _handler


def export_markdown(excel_file, sheet_name: str | None, cell_range: str | None):
    """Excel -> Markdown（Gradio 回调）"""
    return _get_handler().export_markdown(excel_file, sheet_name, cell_range)


def import_markdown(markdown_text: str, sheet_name: str | None, start_cell: str | None, base_excel_file=None):
    """Markdown -> Excel（Gradio 回调）"""
    return _get_handler().import_markdown(markdown_text, sheet_name, start_cell, base_excel_file)


def list_sheets(excel_file) -> list[str]:
    """工作表列表（Gradio 回调）"""
    return _get_handler().list_sheets(excel_file)
