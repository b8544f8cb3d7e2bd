"""
Gradio Web 应用
"""
