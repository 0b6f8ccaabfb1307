"""
元素样式提取
合并内联样式、内部样式表和旧式展示属性，并展开盒模型简写

样式表规则在遍历前一次性匹配，结果按节点身份保存在 StyleIndex 中，
之后所有阶段只读查询，不修改源文档。
"""

import copy
import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag
from loguru import logger
from soupsieve import SelectorSyntaxError

from ..models import CssRule
from .stylesheet import kebabize, parse_declarations

SIDES = ("Top", "Right", "Bottom", "Left")

# 展示属性 -> 样式键（优先级最低）
PRESENTATIONAL_ATTRS = {
    "align": "textAlign",
    "valign": "verticalAlign",
    "bgcolor": "backgroundColor",
}

_PERCENT_RE = re.compile(r"^\s*(\d+)")


def _split_border(value: str | None) -> list[str] | None:
    """拆分 "宽度 样式 颜色" 三段式边框简写"""
    if not value:
        return None
    parts = value.split()
    return parts if len(parts) == 3 else None


def _expand_borders(styles: dict[str, str]) -> None:
    """展开 border / border{Side} 简写"""
    explicit = set(styles)
    all_sides = _split_border(styles.get("border"))

    for side in SIDES:
        side_key = f"border{side}"
        parts = _split_border(styles.get(side_key)) or all_sides
        if parts:
            for prop, value in zip(("Width", "Style", "Color"), parts):
                if f"{side_key}{prop}" not in explicit:
                    styles[f"{side_key}{prop}"] = value

        width = styles.get(f"{side_key}Width")
        style = styles.get(f"{side_key}Style")
        color = styles.get(f"{side_key}Color")
        if width or style or color:
            styles[side_key] = f"{width or '1px'} {style or 'solid'} {color or '#000000'}"


def _expand_box(styles: dict[str, str], prop: str) -> None:
    """展开 padding / margin 简写（标准 1~4 值规则）"""
    value = styles.get(prop)
    if not value:
        return

    parts = value.split()
    match len(parts):
        case 1:
            sides = (parts[0], parts[0], parts[0], parts[0])
        case 2:
            sides = (parts[0], parts[1], parts[0], parts[1])
        case 3:
            sides = (parts[0], parts[1], parts[2], parts[1])
        case 4:
            sides = (parts[0], parts[1], parts[2], parts[3])
        case _:
            return

    for side, side_value in zip(SIDES, sides):
        styles.setdefault(f"{prop}{side}", side_value)


def expand_shorthands(styles: dict[str, str]) -> dict[str, str]:
    """展开简写并规范化取值，返回新字典"""
    result = dict(styles)

    _expand_borders(result)
    _expand_box(result, "padding")
    _expand_box(result, "margin")

    background = result.get("background", "").split()
    if len(background) == 1 and not background[0].startswith("url("):
        result.setdefault("backgroundColor", background[0])

    if result.get("verticalAlign") == "center":
        result["verticalAlign"] = "middle"

    line_height = result.get("lineHeight", "")
    if line_height.endswith("%"):
        match = _PERCENT_RE.match(line_height)
        if match:
            result["lineHeight"] = f"{int(match.group(1)) / 100:.2f}"

    return result


def _attr_text(el: Tag, name: str) -> str:
    value = el.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


@dataclass
class StyleIndex:
    """单次解析的样式查询表"""

    root: BeautifulSoup | Tag | None = None
    _sheet_styles: dict[int, dict[str, str]] = field(default_factory=dict, repr=False)

    @classmethod
    def build(cls, root: BeautifulSoup | Tag, rules: list[CssRule]) -> "StyleIndex":
        """按规则顺序匹配元素，后出现的规则覆盖先出现的同名属性"""
        index = cls(root=root)

        for rule in rules:
            for selector in (s.strip() for s in rule.selector.split(",")):
                if not selector:
                    continue
                try:
                    matched = root.select(selector)
                except (SelectorSyntaxError, NotImplementedError) as e:
                    logger.debug(f"跳过无效选择器 '{selector}': {e}")
                    continue
                for el in matched:
                    index._sheet_styles.setdefault(id(el), {}).update(rule.styles)

        if index._sheet_styles:
            logger.debug(f"内部样式表命中 {len(index._sheet_styles)} 个元素")
        return index

    def sheet_styles(self, el) -> dict[str, str]:
        """样式表为该元素提供的声明"""
        return dict(self._sheet_styles.get(id(el), {}))

    def styles(self, el) -> dict[str, str]:
        """提取元素的扁平样式表（文本节点返回空字典）"""
        if not isinstance(el, Tag):
            return {}

        # 1. 内联样式优先
        styles = parse_declarations(_attr_text(el, "style"))

        # 2. 样式表只补充内联中没有的属性
        for key, value in self._sheet_styles.get(id(el), {}).items():
            styles.setdefault(key, value)

        # 3. 展示属性优先级最低
        for attr, key in PRESENTATIONAL_ATTRS.items():
            value = _attr_text(el, attr)
            if value:
                styles.setdefault(key, value)

        for attr in ("width", "height"):
            value = _attr_text(el, attr)
            if value:
                styles.setdefault(attr, f"{value}px" if value.isdigit() else value)

        # 4. 简写展开
        return expand_shorthands(styles)

    def markup(self, el) -> str:
        """输出元素 HTML，并把样式表声明写入副本的内联样式"""
        if not isinstance(el, Tag) or not self._sheet_styles:
            return str(el)

        clone = copy.copy(el)
        for source, target in zip([el, *el.find_all(True)], [clone, *clone.find_all(True)]):
            extra = self._sheet_styles.get(id(source))
            if not extra:
                continue

            current = _attr_text(source, "style")
            inline = parse_declarations(current)
            missing = [(k, v) for k, v in extra.items() if k not in inline]
            if not missing:
                continue

            sheet_css = ";".join(f"{kebabize(k)}:{v}" for k, v in missing)
            target["style"] = f"{sheet_css};{current}" if current else sheet_css

        return str(clone)
