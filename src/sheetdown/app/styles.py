"""
Gradio UI 自定义 CSS 样式（仅包含 ui.py 中引用的类）
"""

CUSTOM_CSS = """
.main-title {
    text-align: center;
    font-size: 2rem !important;
    font-weight: 600;
    margin-bottom: 4px;
}

.sub-title {
    text-align: center;
    color: #6b7280;
    margin-bottom: 24px;
}

/* Markdown 输入输出使用等宽字体，保留表格对齐 */
.markdown-box textarea {
    font-family: "JetBrains Mono", Menlo, Consolas, monospace !important;
    font-size: 0.9rem !important;
    white-space: pre !important;
    overflow-x: auto !important;
}

.status-box textarea {
    font-family: Menlo, Consolas, monospace !important;
    background: #f3f4f6 !important;
}

.primary-btn {
    margin-top: 12px !important;
    font-weight: 600 !important;
}

.file-upload {
    min-height: 100px !important;
}

.file-download .wrap {
    border: 1px dashed #9ca3af !important;
    border-radius: 6px !important;
}

.gap {
    margin-top: 20px !important;
}

.accordion {
    margin-top: 24px !important;
}
"""
