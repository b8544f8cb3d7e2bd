"""
应用配置管理模块
使用 pydantic-settings 统一管理环境变量和配置
"""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="SHEETDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 临时文件目录
    temp_dir: Path = Field(default=Path("./temp"))

    # 区域分类阈值（字号单位：磅）
    heading1_font_size: float = Field(default=18.0, gt=0)
    heading2_font_size: float = Field(default=14.0, gt=0)
    list_indent_width: int = Field(default=2, ge=0, le=8)

    # 写入 Excel 时新建工作表的名称
    default_sheet_title: str = Field(default="Sheet1", min_length=1, max_length=31)

    # 日志配置
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )


# 全局配置实例（懒加载）
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(level: str | None = None) -> None:
    """配置 loguru 日志"""
    settings = get_settings()

    # 移除默认 handler
    logger.remove()

    # 添加控制台输出
    logger.add(
        sys.stderr,
        format=settings.log_format,
        level=level or settings.log_level,
        colorize=True,
    )

    logger.debug("日志系统已初始化")
