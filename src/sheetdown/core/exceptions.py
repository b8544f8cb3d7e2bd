"""
异常定义模块
"""


class SheetdownError(Exception):
    """sheetdown 基础异常"""


class FormatError(SheetdownError, ValueError):
    """Markdown 表格结构错误（缺少分隔行、切分结果为空等）"""
