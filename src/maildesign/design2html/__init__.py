"""
设计树转 HTML 模块
"""

from .plaintext import extract_text
from .renderer import DesignToHtmlRenderer, render

__all__ = [
    "DesignToHtmlRenderer",
    "render",
    "extract_text",
]
