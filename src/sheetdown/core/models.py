"""
数据模型定义模块
包含枚举、文档块 dataclass 和 Pydantic 请求模型
"""

import re
from dataclasses import dataclass, field
from enum import StrEnum

from openpyxl.utils.cell import coordinate_to_tuple, range_boundaries
from openpyxl.utils.exceptions import CellCoordinatesException
from pydantic import BaseModel, Field, field_validator

# ============ 枚举定义 ============


class Alignment(StrEnum):
    """列对齐方式"""

    UNDEFINED = "undefined"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ============ 文档块模型 (dataclass) ============


@dataclass(frozen=True)
class StyledSegment:
    """带样式的文本片段"""

    text: str
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.strikethrough)


@dataclass(frozen=True)
class TableCell:
    """表格单元格"""

    value: str
    alignment: Alignment = Alignment.UNDEFINED


@dataclass(frozen=True)
class TableRow:
    """表格行"""

    cells: tuple[TableCell, ...] = ()

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> TableCell:
        return self.cells[index]


@dataclass(frozen=True)
class Table:
    """表格，第 0 行为表头，表头的对齐方式对整列生效"""

    rows: tuple[TableRow, ...] = ()

    @property
    def header(self) -> TableRow | None:
        return self.rows[0] if self.rows else None

    @property
    def body(self) -> tuple[TableRow, ...]:
        return self.rows[1:]

    @property
    def column_alignments(self) -> list[Alignment]:
        if not self.rows:
            return []
        return [cell.alignment for cell in self.rows[0]]


@dataclass(frozen=True)
class TextBlock:
    """文本块（标题 / 段落 / 列表项），前缀即结构"""

    text: str


@dataclass(frozen=True)
class TableBlock:
    """表格块"""

    table: Table = field(default_factory=Table)


# 文档块联合类型
type Block = TextBlock | TableBlock


@dataclass(frozen=True)
class GridCell:
    """宿主表格单元格的抽象（文本 + 样式）"""

    text: str = ""
    font_size: float | None = None
    bold: bool = False
    indent_level: int = 0
    alignment: Alignment = Alignment.UNDEFINED

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


# ============ 外部输入验证模型 (Pydantic) ============

_CELL_REF_PATTERN = re.compile(r"^[A-Z]{1,3}[1-9]\d*$")


class ExportRequest(BaseModel):
    """Excel → Markdown 请求"""

    sheet_name: str | None = Field(default=None)
    cell_range: str | None = Field(default=None)

    @field_validator("sheet_name", "cell_range", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """空字符串视为未指定"""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("cell_range")
    @classmethod
    def check_range(cls, v: str | None) -> str | None:
        """校验区域引用，如 A1:D20"""
        if v is None:
            return None
        v = v.upper()
        try:
            range_boundaries(v)
        except ValueError as e:
            raise ValueError(f"无效的区域引用: {v}") from e
        return v


class ImportRequest(BaseModel):
    """Markdown → Excel 请求"""

    markdown_text: str = Field(default="")
    sheet_name: str | None = Field(default=None, max_length=31)
    start_cell: str = Field(default="A1")

    @field_validator("sheet_name", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """空字符串视为未指定"""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("start_cell", mode="before")
    @classmethod
    def check_start_cell(cls, v: str | None) -> str:
        """校验起始单元格，如 B3"""
        v = (str(v).strip() if v is not None else "") or "A1"
        v = v.upper()
        if not _CELL_REF_PATTERN.match(v):
            raise ValueError(f"无效的单元格引用: {v}")
        try:
            coordinate_to_tuple(v)
        except (ValueError, CellCoordinatesException) as e:
            raise ValueError(f"无效的单元格引用: {v}") from e
        return v

    @property
    def origin(self) -> tuple[int, int]:
        """起始单元格 (行, 列)，1 起始"""
        return coordinate_to_tuple(self.start_cell)
