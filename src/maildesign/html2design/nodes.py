"""
DOM 节点判断工具
"""

from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString

SKIPPED_TAGS = {"style", "script"}

SOCIAL_TOKENS = (
    "facebook",
    "twitter",
    "instagram",
    "linkedin",
    "youtube",
    "pinterest",
    "x.com",
    "tiktok",
    "social",
)

# (匹配词, 平台名)，按顺序匹配
SOCIAL_PLATFORMS = (
    (("facebook",), "Facebook"),
    (("instagram",), "Instagram"),
    (("linkedin",), "LinkedIn"),
    (("youtube",), "YouTube"),
    (("twitter", "x.com"), "Twitter"),
)


def is_text(node: PageElement) -> bool:
    """普通文本节点（注释、DOCTYPE 等不算）"""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_blank_text(node: PageElement) -> bool:
    return is_text(node) and not node.strip()


def tag_name(node: PageElement) -> str | None:
    return node.name.lower() if isinstance(node, Tag) and node.name else None


def meaningful_children(node: Tag) -> list[PageElement]:
    """有效子节点：排除 style/script、注释和空白文本"""
    children = []
    for child in node.children:
        if isinstance(child, Tag):
            if tag_name(child) not in SKIPPED_TAGS:
                children.append(child)
        elif is_text(child) and child.strip():
            children.append(child)
    return children


def detect_social_platform(src: str, alt: str | None) -> str | None:
    """根据图片地址和 alt 识别社交平台"""
    text = f"{src} {alt or ''}".lower()
    for tokens, platform in SOCIAL_PLATFORMS:
        if any(token in text for token in tokens):
            return platform
    return None


def is_social_icon(img: Tag) -> bool:
    src = str(img.get("src") or "").lower()
    alt = str(img.get("alt") or "").lower()
    return any(token in src or token in alt for token in SOCIAL_TOKENS)
