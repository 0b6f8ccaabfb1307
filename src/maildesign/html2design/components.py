"""
内容组件识别
把叶子 DOM 节点归类为 text / image / button 组件，并填充样式字段
"""

import html
import re
from dataclasses import dataclass
from typing import Any

from bs4 import PageElement, Tag

from ..models import (
    ButtonColors,
    ButtonComponent,
    ButtonValues,
    Component,
    FontFamily,
    ImageComponent,
    ImageSource,
    ImageValues,
    Link,
    TextComponent,
    TextValues,
)
from .nodes import detect_social_platform, is_text, tag_name
from .styles import StyleIndex
from .stylesheet import parse_declarations

TYPOGRAPHY_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6", "p", "div", "span", "strong", "b", "font", "ul", "li"}

TEXT_NODE_TEMPLATE = '<p style="margin:0;line-height:140%;font-family:inherit;">{text}</p>'
PLACEHOLDER_TEXT = "<p>&nbsp;</p>"
DEFAULT_PADDING = "10px"

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def normalize_font_weight(value: str | None) -> int | str | None:
    """bold -> 700, normal -> 400, 数字原样转 int"""
    if not value:
        return None
    if value == "bold":
        return 700
    if value == "normal":
        return 400
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else value


def font_family(value: str | None) -> FontFamily | None:
    return FontFamily(label=value, value=value) if value else None


def create_placeholder() -> TextComponent:
    """空列占位组件"""
    return TextComponent(values=TextValues(text=PLACEHOLDER_TEXT, padding=DEFAULT_PADDING))


def _pixel_attr(value: str | None) -> int | None:
    value = (value or "").strip()
    return int(value) if value.isdigit() else None


@dataclass
class ComponentClassifier:
    """组件识别器"""

    styles: StyleIndex

    def classify(self, node: PageElement) -> Component:
        """为一个节点生成且只生成一个组件"""
        if is_text(node):
            return self._text_node(node)

        el: Tag = node
        name = tag_name(el)
        styles = self.styles.styles(el)
        base = self._base_values(styles)

        if name in ("img", "figure") or (name == "a" and el.find("img") is not None):
            image = self._image(el, name, styles, base)
            if image is not None:
                return image

        if name == "a" and self._is_button_like(el, styles):
            return self._button(el, styles, base)

        if name in TYPOGRAPHY_TAGS:
            return self._typography(el, styles, base)

        return TextComponent(values=TextValues(**base, text=self.styles.markup(el)))

    def _text_node(self, node: PageElement) -> TextComponent:
        """纯文本节点"""
        text = TEXT_NODE_TEMPLATE.format(text=html.escape(node.strip(), quote=False))
        return TextComponent(values=TextValues(text=text, padding=DEFAULT_PADDING))

    def _base_values(self, styles: dict[str, str]) -> dict[str, Any]:
        """所有元素组件共享的盒模型字段"""
        text_align = styles.get("textAlign", "inherit")
        background = styles.get("backgroundColor")
        return {
            "padding": styles.get("padding") or DEFAULT_PADDING,
            "text_align": text_align if text_align != "inherit" else None,
            "background_color": background if background != "transparent" else None,
            "border_top": styles.get("borderTop"),
            "border_bottom": styles.get("borderBottom"),
            "border_left": styles.get("borderLeft"),
            "border_right": styles.get("borderRight"),
            "border_radius": styles.get("borderRadius"),
            "box_shadow": styles.get("boxShadow"),
        }

    def _image(
        self, el: Tag, name: str, styles: dict[str, str], base: dict[str, Any]
    ) -> ImageComponent | None:
        """图片（含链接包裹的图片和 figure）"""
        img = el
        link_href = None
        if name == "a":
            img = el.find("img")
            link_href = el.get("href")
        elif name == "figure":
            img = el.find("img") or el

        if tag_name(img) != "img":
            return None

        img_styles = self.styles.styles(img)
        src = str(img.get("src") or "")
        alt = img.get("alt")
        platform = detect_social_platform(src, alt)

        width_attr = str(img.get("width") or "").strip()
        explicit_width = f"{width_attr}px" if width_attr.isdigit() else width_attr
        inline_width = self._declared_width(img) or self._declared_width(el)
        width = explicit_width or inline_width or "100%"

        values = {
            **base,
            "src": ImageSource(
                url=src,
                width=_pixel_attr(img.get("width")),
                height=_pixel_attr(img.get("height")),
            ),
            "alt_text": alt or platform or "Image",
            "width": width,
            "auto_width": not explicit_width and not inline_width,
            "padding": styles.get("padding") or img_styles.get("padding") or DEFAULT_PADDING,
            "border_radius": img_styles.get("borderRadius") or styles.get("borderRadius"),
            "box_shadow": styles.get("boxShadow") or img_styles.get("boxShadow"),
            "href": Link(url=str(link_href)) if link_href else None,
        }
        return ImageComponent(values=ImageValues(**values))

    def _declared_width(self, el: Tag) -> str | None:
        """样式（内联或样式表）中声明的宽度，不含 width 属性"""
        styles = self.styles.sheet_styles(el)
        styles.update(parse_declarations(str(el.get("style") or "")))
        return styles.get("width")

    def _is_button_like(self, el: Tag, styles: dict[str, str]) -> bool:
        """是否为按钮样式的链接"""
        background = styles.get("backgroundColor")
        if background and background != "transparent":
            return True
        if el.get("bgcolor") or "button" in el.get("class", []):
            return True
        text = self._inner_text(el)
        return bool(text) and len(text) < 30 and styles.get("display") == "inline-block"

    def _inner_text(self, el: Tag) -> str:
        return " ".join(el.get_text().split())

    def _button(self, el: Tag, styles: dict[str, str], base: dict[str, Any]) -> ButtonComponent:
        """按钮"""
        values = {
            **base,
            "text": html.escape(self._inner_text(el), quote=False) or "Button",
            "href": Link(url=str(el.get("href") or "")),
            "button_colors": ButtonColors(
                color=styles.get("color") or "#ffffff",
                background_color=styles.get("backgroundColor") or "#3AAEE0",
            ),
            "font_size": styles.get("fontSize"),
            "font_weight": normalize_font_weight(styles.get("fontWeight")),
            "line_height": styles.get("lineHeight"),
            "letter_spacing": styles.get("letterSpacing"),
            "font_family": font_family(styles.get("fontFamily")),
            "border_radius": styles.get("borderRadius"),
        }
        return ButtonComponent(values=ButtonValues(**values))

    def _typography(self, el: Tag, styles: dict[str, str], base: dict[str, Any]) -> TextComponent:
        """标题 / 段落等排版元素：保留原始标记并提取排版字段"""
        values = {
            **base,
            "text": self.styles.markup(el),
            "color": styles.get("color"),
            "font_size": styles.get("fontSize"),
            "font_weight": normalize_font_weight(styles.get("fontWeight")),
            "line_height": styles.get("lineHeight"),
            "letter_spacing": styles.get("letterSpacing"),
            "font_family": font_family(styles.get("fontFamily")),
        }
        for prop in ("padding", "margin"):
            for side in ("Top", "Right", "Bottom", "Left"):
                values[f"{prop}_{side.lower()}"] = styles.get(f"{prop}{side}")
        return TextComponent(values=TextValues(**values))
