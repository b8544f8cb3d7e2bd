"""
sheetdown - Excel 选区与 Markdown 双向转换
"""

__version__ = "0.1.0"
