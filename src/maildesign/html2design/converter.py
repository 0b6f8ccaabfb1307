"""
HTML 转设计树
解析任意 HTML 片段 / 文档为 Row -> Column -> Component 结构

处理流程：
1. 构建 DOM（html.parser，容错）
2. 解析内部样式表并一次性匹配到元素
3. 顶层节点分组、识别布局表格、表格转行
4. 提取全局样式（背景色、内容宽度、字体）
"""

from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from loguru import logger

from ..config import Settings, get_settings
from ..models import Body, BodyValues, Design, FontFamily
from .layout import TableLayoutConverter
from .styles import StyleIndex
from .stylesheet import parse_internal_styles


@dataclass
class HtmlToDesignConverter:
    """HTML -> Design 转换器"""

    settings: Settings = field(default_factory=get_settings)

    def parse(self, html: str) -> Design | None:
        """执行解析；空输入返回 None"""
        if not html or not html.strip():
            logger.debug("输入为空，不生成设计稿")
            return None

        try:
            soup = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            logger.error(f"HTML 解析失败: {e}")
            return None

        rules = parse_internal_styles(soup)
        styles = StyleIndex.build(soup, rules)
        root = soup.body or soup.html or soup

        layout = TableLayoutConverter(styles=styles)
        rows = layout.process_elements(list(root.children))

        design = Design(body=Body(rows=rows, values=self._body_values(soup, root, styles)))
        self._log_summary(design, len(rules))
        return design

    def _body_values(self, soup: BeautifulSoup, root: Tag, styles: StyleIndex) -> BodyValues:
        """全局样式"""
        return BodyValues(
            background_color=self._body_background(soup, root, styles) or self.settings.background_color,
            content_width=self.settings.content_width,
            font_family=FontFamily(
                label=self.settings.font_family_label,
                value=self.settings.font_family_value,
            ),
            text_color=self.settings.text_color,
        )

    def _body_background(self, soup: BeautifulSoup, root: Tag, styles: StyleIndex) -> str | None:
        """背景色：先取 <body>，再取第一个表格"""
        candidates = [soup.body, root.find("table")]
        for el in candidates:
            if el is None:
                continue
            background = styles.styles(el).get("backgroundColor")
            if background and background != "transparent":
                return background
        return None

    def _log_summary(self, design: Design, rule_count: int) -> None:
        """记录解析结果"""
        rows = design.body.rows
        column_count = sum(len(row.columns) for row in rows)
        component_count = sum(len(col.contents) for row in rows for col in row.columns)
        logger.info(
            f"解析完成: {len(rows)} 行 | {column_count} 列 | "
            f"{component_count} 个组件 | {rule_count} 条样式规则"
        )


def parse(html: str) -> Design | None:
    """解析 HTML 为设计稿（兼容函数接口）"""
    return HtmlToDesignConverter().parse(html)
