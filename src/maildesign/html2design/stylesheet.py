"""
内部样式表解析
提取 <style> 块，去掉 @media 段，解析为按文档顺序排列的规则列表
"""

import re

from bs4 import BeautifulSoup

from ..models import CssRule

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
# 只能处理一层嵌套花括号（如 data URI 中带花括号的声明会切错）
_MEDIA_RE = re.compile(r"@media[^{]+\{([\s\S]+?\}\s*)\}")
_RULE_RE = re.compile(r"([^{]+)\s*\{\s*([^}]+)\s*\}")
_KEBAB_RE = re.compile(r"-([a-z0-9])")


def camelize(prop: str) -> str:
    """font-size -> fontSize"""
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), prop)


def kebabize(prop: str) -> str:
    """fontSize -> font-size"""
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", prop).lower()


def parse_declarations(text: str) -> dict[str, str]:
    """解析 "prop: value; ..." 声明串，键名转 camelCase，去掉 !important"""
    styles: dict[str, str] = {}
    for pair in text.split(";"):
        prop, sep, value = pair.partition(":")
        if not sep:
            continue
        prop = prop.strip()
        value = value.replace("!important", "").strip()
        if prop and value:
            styles[camelize(prop)] = value
    return styles


def strip_media_blocks(css: str) -> str:
    """去掉 @media 段（只关注桌面端布局）"""
    return _MEDIA_RE.sub("", css)


def parse_css(css: str) -> list[CssRule]:
    """解析一段 CSS 文本"""
    clean_css = strip_media_blocks(_COMMENT_RE.sub("", css))

    rules = []
    for match in _RULE_RE.finditer(clean_css):
        selector = match.group(1).strip()
        styles = parse_declarations(match.group(2).strip())
        if selector and styles:
            rules.append(CssRule(selector=selector, styles=styles))
    return rules


def parse_internal_styles(soup: BeautifulSoup) -> list[CssRule]:
    """提取文档中所有 <style> 块的规则"""
    rules: list[CssRule] = []
    for tag in soup.find_all("style"):
        rules.extend(parse_css(tag.get_text()))
    return rules
