"""
Gradio UI 组件定义
"""

import gradio as gr

from .handlers import export_markdown, import_markdown, list_sheets
from .styles import CUSTOM_CSS


def create_ui():
    """创建 Gradio 界面"""
    with gr.Blocks(css=CUSTOM_CSS) as app:
        gr.HTML('<h1 class="main-title">Excel ⇄ Markdown 转换工具</h1>')
        gr.HTML('<p class="sub-title">选区转 Markdown 标题、列表与表格，或将 Markdown 粘贴回 Excel</p>')

        with gr.Tab("Excel → Markdown"):
            with gr.Row(equal_height=False):
                # 左侧：输入区
                with gr.Column(scale=1):
                    excel_input = gr.File(
                        label="上传 Excel 文件",
                        file_types=[".xlsx", ".xlsm"],
                        elem_classes=["file-upload"],
                    )

                    gr.HTML('<div class="gap"></div>')

                    sheet_input = gr.Dropdown(
                        label="工作表",
                        choices=[],
                        value=None,
                        allow_custom_value=True,
                        info="留空使用活动工作表",
                    )
                    range_input = gr.Textbox(
                        label="单元格区域（可选）",
                        placeholder="如：A1:F30，留空使用已用区域",
                    )

                    gr.HTML('<div class="gap"></div>')

                    export_btn = gr.Button(
                        "复制为 Markdown",
                        variant="primary",
                        elem_classes=["primary-btn"],
                        size="lg",
                    )

                # 右侧：输出区
                with gr.Column(scale=1):
                    export_status = gr.Textbox(
                        label="处理状态",
                        lines=6,
                        interactive=False,
                        elem_classes=["status-box"],
                        placeholder="处理结果将显示在这里...",
                    )
                    markdown_output = gr.Textbox(
                        label="Markdown",
                        lines=16,
                        interactive=False,
                        show_copy_button=True,
                        elem_classes=["markdown-box"],
                    )
                    md_file_output = gr.File(
                        label="下载 .md",
                        elem_classes=["file-download"],
                    )

            # 上传后刷新工作表列表
            excel_input.change(
                fn=lambda f: gr.update(choices=list_sheets(f), value=None),
                inputs=[excel_input],
                outputs=[sheet_input],
            )

            export_btn.click(
                fn=export_markdown,
                inputs=[excel_input, sheet_input, range_input],
                outputs=[markdown_output, md_file_output, export_status],
                show_progress="minimal",
            )

        with gr.Tab("Markdown → Excel"):
            with gr.Row(equal_height=False):
                with gr.Column(scale=1):
                    markdown_input = gr.Textbox(
                        label="粘贴 Markdown",
                        lines=16,
                        placeholder="# 标题\n\n| 列1 | 列2 |\n|:---|---:|\n| **a** | 1 |",
                        elem_classes=["markdown-box"],
                    )
                    base_excel_input = gr.File(
                        label="写入已有 Excel（可选）",
                        file_types=[".xlsx", ".xlsm"],
                        elem_classes=["file-upload"],
                    )
                    with gr.Row():
                        target_sheet_input = gr.Textbox(
                            label="工作表（可选）",
                            placeholder="不存在则新建",
                        )
                        start_cell_input = gr.Textbox(
                            label="起始单元格",
                            value="A1",
                        )

                    gr.HTML('<div class="gap"></div>')

                    import_btn = gr.Button(
                        "从 Markdown 粘贴",
                        variant="primary",
                        elem_classes=["primary-btn"],
                        size="lg",
                    )

                with gr.Column(scale=1):
                    import_status = gr.Textbox(
                        label="处理状态",
                        lines=6,
                        interactive=False,
                        elem_classes=["status-box"],
                        placeholder="处理结果将显示在这里...",
                    )
                    excel_output = gr.File(
                        label="下载 .xlsx",
                        elem_classes=["file-download"],
                    )

            import_btn.click(
                fn=import_markdown,
                inputs=[markdown_input, target_sheet_input, start_cell_input, base_excel_input],
                outputs=[excel_output, import_status],
                show_progress="minimal",
            )

        # 使用说明
        gr.HTML('<div class="gap"></div>')

        with gr.Accordion("使用说明", open=False, elem_classes=["accordion"]):
            gr.Markdown("""
**Excel → Markdown**

- 多个非空单元格的行 -> 表格行，列对齐取自表头单元格的水平对齐
- 只有一个非空单元格的行：
  - 字号 ≥ 18 -> `#`，14 ~ 18 -> `##`，加粗 -> `###`
  - 有缩进或以 `•` `-` `*` 开头 -> 列表项（缩进 1 级 = 2 个空格）
  - 其余 -> 普通段落
- 表格中出现非标题的单列行时视为表格的稀疏行；空行结束表格
- 单元格内换行输出为 `<br>`

**Markdown → Excel**

- 每个文本行写入一个单元格，`**粗体**` `*斜体*` `~~删除线~~` 写为富文本，`` `代码` `` 写为普通文本
- 表格按行列写入，分隔行 `:---` `:-:` `---:` 决定整列对齐
- 格式错误的表格按原文逐行写入
""")

    return app
