"""
Markdown 表格网格解析器
将管道符表格文本切分为未类型化的单元格字符串网格
"""

import re
from dataclasses import dataclass

from ..exceptions import FormatError

TABLE_LINE_PATTERN = re.compile(r"^\|.*\|$")

# 竖线及其前面的连续反斜杠：奇数个表示转义竖线，偶数个表示字面反斜杠加分隔符
_PIPE_PATTERN = re.compile(r"(\\*)\|")
_TRAILING_BACKSLASHES = re.compile(r"\\+\Z")


def is_table_line(line: str) -> bool:
    """判断是否为表格行（去除首尾空白后以竖线开头和结尾）"""
    if not line or not line.strip():
        return False
    return bool(TABLE_LINE_PATTERN.match(line.strip()))


@dataclass
class GridParser:
    """表格网格解析器"""

    def parse(self, table_text: str) -> list[list[str]]:
        """解析表格文本为二维字符串网格"""
        lines = [line.strip() for line in table_text.splitlines() if line.strip()]

        # 至少需要表头行和分隔行
        if len(lines) < 2:
            raise FormatError(f"表格至少需要 2 行，实际 {len(lines)} 行")

        grid: list[list[str]] = []
        for line_no, line in enumerate(lines, start=1):
            if not TABLE_LINE_PATTERN.match(line):
                raise FormatError(f"第 {line_no} 行不是表格行: {line!r}")
            cells = self._split_line(line)
            if not cells:
                raise FormatError(f"第 {line_no} 行没有单元格: {line!r}")
            grid.append(cells)

        return grid

    def _split_line(self, line: str) -> list[str]:
        """去掉首尾竖线后按未转义竖线切分"""
        inner = line[1:-1]
        if not inner:
            return []

        cells: list[str] = []
        parts: list[str] = []
        pos = 0
        for match in _PIPE_PATTERN.finditer(inner):
            backslashes = len(match.group(1))
            parts.append(inner[pos : match.start()])
            parts.append("\\" * (backslashes // 2))
            if backslashes % 2:
                parts.append("|")
            else:
                cells.append("".join(parts).strip())
                parts = []
            pos = match.end()

        parts.append(_unescape_tail(inner[pos:]))
        cells.append("".join(parts).strip())
        return cells


def _unescape_tail(text: str) -> str:
    """行末单元格的结尾反斜杠成对出现时折半"""
    match = _TRAILING_BACKSLASHES.search(text)
    if match is None or len(match.group(0)) % 2:
        return text
    return text[: match.start()] + "\\" * (len(match.group(0)) // 2)


def parse_grid(table_text: str) -> list[list[str]]:
    """解析表格网格（兼容函数接口）"""
    return GridParser().parse(table_text)
