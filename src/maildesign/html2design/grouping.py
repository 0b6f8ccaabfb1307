"""
行内元素分组
把连续的链接图片 / 社交图标合并为一个文本组件，避免每个图标各占一列
"""

from collections.abc import Callable

from bs4 import PageElement, Tag

from ..models import TextComponent, TextValues
from .nodes import is_blank_text, is_social_icon, tag_name

type GroupedNode = PageElement | TextComponent


def is_inline_group_member(node: PageElement) -> bool:
    """是否为可分组的行内元素"""
    name = tag_name(node)
    if name == "a" and node.find("img") is not None:
        return True
    if name == "img" and is_social_icon(node):
        return True
    return False


def group_inline_nodes(
    nodes: list[PageElement], markup: Callable[[PageElement], str] = str
) -> list[GroupedNode]:
    """合并连续的行内元素（容忍中间的空白文本）

    参数:
        nodes: 同级节点序列
        markup: 节点序列化函数（默认 str，可传入带样式表内联的版本）

    返回:
        原节点与合成 TextComponent 混合的列表；长度为 1 的连续段保持原样
    """
    results: list[GroupedNode] = []
    i = 0

    while i < len(nodes):
        current = nodes[i]
        if not is_inline_group_member(current):
            results.append(current)
            i += 1
            continue

        group: list[Tag] = [current]
        next_idx = i + 1
        while next_idx < len(nodes) and (
            is_inline_group_member(nodes[next_idx]) or is_blank_text(nodes[next_idx])
        ):
            if is_inline_group_member(nodes[next_idx]):
                group.append(nodes[next_idx])
            next_idx += 1

        if len(group) > 1:
            combined_html = "".join(markup(node) for node in group)
            results.append(
                TextComponent(
                    values=TextValues(
                        text=f'<div style="text-align: inherit;">{combined_html}</div>',
                        padding="10px",
                    )
                )
            )
            i = next_idx
            continue

        results.append(current)
        i += 1

    return results
