"""
纯文本提取
从邮件 HTML 中提取可见文本（用于 multipart 邮件的 text/plain 部分）
"""

import re

from bs4 import BeautifulSoup
from loguru import logger

from ..html2design.nodes import is_text

INVISIBLE_TAGS = {"style", "script", "title", "head"}

_BLANK_LINES_RE = re.compile(r"(\n\s*){2,}")


def _is_visible(node) -> bool:
    return not any(parent.name in INVISIBLE_TAGS for parent in node.parents)


def extract_text(html: str) -> str:
    """提取可见文本，每个文本节点一行，连续空行压缩为一个空行"""
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup

    lines = [
        node.strip()
        for node in root.descendants
        if is_text(node) and node.strip() and _is_visible(node)
    ]
    text = _BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()

    logger.debug(f"提取纯文本 {len(text)} 字符")
    return text
