"""
Gradio 预览应用
"""
