"""
maildesign - 邮件 HTML 与栅格设计稿双向转换
"""

from .config import Settings, configure_logging, get_settings
from .design2html import DesignToHtmlRenderer, extract_text, render
from .html2design import HtmlToDesignConverter, parse
from .models import (
    Body,
    BodyValues,
    ButtonComponent,
    Column,
    Component,
    ComponentType,
    Design,
    HtmlComponent,
    ImageComponent,
    OpaqueComponent,
    Row,
    TextComponent,
)
from .store import DesignStore

__all__ = [
    # 配置
    "Settings",
    "get_settings",
    "configure_logging",
    # 转换器
    "HtmlToDesignConverter",
    "DesignToHtmlRenderer",
    "DesignStore",
    # 数据模型
    "Design",
    "Body",
    "BodyValues",
    "Row",
    "Column",
    "Component",
    "ComponentType",
    "TextComponent",
    "ImageComponent",
    "ButtonComponent",
    "HtmlComponent",
    "OpaqueComponent",
    # 兼容函数
    "parse",
    "render",
    "extract_text",
]
