"""
HTML 转设计树核心模块
"""

from .converter import HtmlToDesignConverter, parse
from .layout import TableLayoutConverter, find_layout_table, grid_widths
from .styles import StyleIndex, expand_shorthands
from .stylesheet import parse_css, parse_internal_styles

__all__ = [
    # 类
    "HtmlToDesignConverter",
    "TableLayoutConverter",
    "StyleIndex",
    # 函数
    "parse",
    "parse_css",
    "parse_internal_styles",
    "expand_shorthands",
    "find_layout_table",
    "grid_widths",
]
