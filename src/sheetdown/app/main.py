"""
应用主入口
配置 loguru 日志和加载设置
"""

from loguru import logger

from sheetdown.core.config import configure_logging

from .ui import create_ui


def create_app():
    """创建并返回 Gradio 应用"""
    configure_logging()
    return create_ui()


def run_app() -> None:
    """运行 Gradio 应用"""
    app = create_app()
    logger.info("启动 Gradio 应用")
    app.launch()


if __name__ == "__main__":
    run_app()
