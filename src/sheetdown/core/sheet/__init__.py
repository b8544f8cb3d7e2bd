"""
工作表读写与区域分类模块
"""

from .classifier import GridClassifier, classify_grid
from .reader import format_cell_value, read_range_as_grid
from .writer import write_blocks_to_sheet, write_table_block

__all__ = [
    "GridClassifier",
    "classify_grid",
    "format_cell_value",
    "read_range_as_grid",
    "write_blocks_to_sheet",
    "write_table_block",
]
