"""
行内样式解析器
将 Markdown 强调标记解析为带样式的文本片段

支持：
1. **粗体** / __粗体__
2. ~~删除线~~
3. *斜体* / _斜体_
4. `行内代码`（单元格无等宽样式，按普通文本输出）
"""

import re
from dataclasses import dataclass

from ..models import StyledSegment

# 按优先级排列：(正则, 粗体, 斜体, 删除线)，全部为非贪婪匹配
_INLINE_PATTERNS: tuple[tuple[re.Pattern[str], bool, bool, bool], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), True, False, False),
    (re.compile(r"__(.+?)__"), True, False, False),
    (re.compile(r"~~(.+?)~~"), False, False, True),
    (re.compile(r"\*(.+?)\*"), False, True, False),
    (re.compile(r"_(.+?)_"), False, True, False),
    (re.compile(r"`(.+?)`"), False, False, False),
)

MARKER_CHARS = frozenset("*_~`")


@dataclass
class InlineStyleParser:
    """行内样式解析器"""

    def parse(self, text: str) -> list[StyledSegment]:
        """解析文本，返回样式片段列表"""
        segments: list[StyledSegment] = []
        if not text:
            return segments

        position = 0
        length = len(text)
        while position < length:
            matched = self._match_at(text, position)
            if matched is not None:
                segment, position = matched
                segments.append(segment)
                continue

            # 无标记匹配：至少吃掉一个字符，直到下一个可能的标记起点
            end = position + 1
            while end < length and text[end] not in MARKER_CHARS:
                end += 1
            segments.append(StyledSegment(text[position:end]))
            position = end

        return self._merge_plain_segments(segments)

    def _match_at(self, text: str, position: int) -> tuple[StyledSegment, int] | None:
        """在当前位置按优先级尝试匹配"""
        if text[position] not in MARKER_CHARS:
            return None
        for pattern, bold, italic, strikethrough in _INLINE_PATTERNS:
            match = pattern.match(text, position)
            if match:
                segment = StyledSegment(
                    match.group(1),
                    bold=bold,
                    italic=italic,
                    strikethrough=strikethrough,
                )
                return segment, match.end()
        return None

    def _merge_plain_segments(self, segments: list[StyledSegment]) -> list[StyledSegment]:
        """合并相邻的普通片段"""
        merged: list[StyledSegment] = []
        plain_buffer: list[str] = []

        for segment in segments:
            if segment.is_plain:
                plain_buffer.append(segment.text)
                continue
            if plain_buffer:
                merged.append(StyledSegment("".join(plain_buffer)))
                plain_buffer = []
            merged.append(segment)

        if plain_buffer:
            merged.append(StyledSegment("".join(plain_buffer)))

        return merged


def has_inline_markers(text: str) -> bool:
    """文本是否包含可能的行内标记"""
    return any(ch in MARKER_CHARS for ch in text)


def parse_inline(text: str) -> list[StyledSegment]:
    """解析行内样式（兼容函数接口）"""
    return InlineStyleParser().parse(text)
