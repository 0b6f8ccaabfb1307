"""
布局表格识别与表格转行
HTML 表格的每个 <tr> 对应一个设计行，每个 <td> 对应一列，
colspan 比例换算为 12 栅格；只用于包裹/背景的单格表格会被拆掉
"""

import math
from dataclasses import dataclass, field

from bs4 import PageElement, Tag

from ..models import Column, ColumnValues, Component, Row, RowValues, TextComponent
from .components import ComponentClassifier, create_placeholder
from .grouping import group_inline_nodes
from .nodes import is_text, meaningful_children, tag_name
from .styles import StyleIndex

GRID_UNITS = 12

IGNORED_TAGS = {"style", "script", "meta", "title", "head", "link"}
BLOCK_TAGS = {
    "div", "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "center", "section", "article", "header", "footer", "blockquote", "figure",
}
# 单子节点时可以穿透的包裹标签
WRAPPER_TAGS = {"div", "center", "section", "main", "td", "figure"}
# 单元格内含表格时需要展开的容器
CELL_CONTAINER_TAGS = {"div", "section", "center", "header", "footer"}

type CellItem = Row | Component


def table_rows(table: Tag) -> list[Tag]:
    """表格自身的行（含 thead/tbody/tfoot 中的行，不含嵌套表格）"""
    rows = []
    for child in table.find_all(True, recursive=False):
        name = tag_name(child)
        if name == "tr":
            rows.append(child)
        elif name in ("thead", "tbody", "tfoot"):
            rows.extend(child.find_all("tr", recursive=False))
    return rows


def row_cells(tr: Tag) -> list[Tag]:
    return tr.find_all(["td", "th"], recursive=False)


def col_span(td: Tag) -> int:
    try:
        return max(int(str(td.get("colspan", 1)).strip()), 1)
    except ValueError:
        return 1


def round_half_up(value: float) -> int:
    """四舍五入（Python 内置 round 为银行家舍入）"""
    return math.floor(value + 0.5)


def grid_widths(spans: list[int]) -> list[int]:
    """colspan 换算为 12 栅格，舍入误差由最后一列吸收"""
    total = sum(spans)
    widths = [max(round_half_up(span / total * GRID_UNITS), 1) for span in spans]
    correction = GRID_UNITS - sum(widths)
    if widths and correction:
        widths[-1] += correction
    return widths


def find_layout_table(node: Tag) -> Tag | None:
    """沿单子节点包裹链向下查找真正承载多列布局的表格"""
    children = meaningful_children(node)
    if len(children) != 1:
        return None

    child = children[0]
    name = tag_name(child)
    if name == "table":
        rows = table_rows(child)
        if len(rows) == 1 and len(row_cells(rows[0])) == 1:
            return find_layout_table(row_cells(rows[0])[0])
        return child
    if name in WRAPPER_TAGS:
        return find_layout_table(child)
    return None


def create_simple_row(components: list[Component]) -> Row:
    """单列整行"""
    return Row(
        cells=[GRID_UNITS],
        columns=[
            Column(
                contents=components,
                values=ColumnValues(width="100%", padding="0px"),
            )
        ],
        values=RowValues(background_color="transparent", padding="0px"),
    )


@dataclass
class TableLayoutConverter:
    """表格布局转换器（每次解析一个实例，样式查询表显式传入）"""

    styles: StyleIndex
    classifier: ComponentClassifier = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.classifier = ComponentClassifier(styles=self.styles)

    # ===== 顶层内容 =====
    def process_elements(self, nodes: list[PageElement]) -> list[Row]:
        """顶层节点序列 -> 行列表（连续的行内内容合并为一行）"""
        results: list[Row] = []
        pending: list[Component] = []

        def flush() -> None:
            if pending:
                results.append(create_simple_row(list(pending)))
                pending.clear()

        for node in group_inline_nodes(nodes, self.styles.markup):
            if isinstance(node, TextComponent):
                pending.append(node)
                continue

            name = tag_name(node)
            if name is None:
                if is_text(node) and node.strip():
                    pending.append(self.classifier.classify(node))
                continue

            if name in IGNORED_TAGS:
                continue

            if name == "table":
                flush()
                results.extend(self.process_table(node))
            elif name in BLOCK_TAGS:
                flush()
                inner_table = find_layout_table(node)
                if inner_table is not None:
                    results.extend(self.process_table(inner_table))
                else:
                    results.append(create_simple_row([self.classifier.classify(node)]))
            elif name != "br":
                pending.append(self.classifier.classify(node))

        flush()
        return results

    # ===== 表格 =====
    def process_table(self, table: Tag) -> list[Row]:
        """表格 -> 行列表"""
        rows: list[Row] = []
        table_styles = self.styles.styles(table)

        for tr in table_rows(table):
            cells = row_cells(tr)
            if not cells:
                continue

            if len(cells) == 1:
                spliced = self._splice_wrapper_row(tr, cells[0], table_styles)
                if spliced is not None:
                    rows.extend(spliced)
                    continue

            rows.append(self._grid_row(tr, cells))

        return rows

    def _splice_wrapper_row(
        self, tr: Tag, td: Tag, table_styles: dict[str, str]
    ) -> list[Row] | None:
        """单格且内含表格的包裹行：不生成行，直接展开内部内容"""
        children = meaningful_children(td)
        if not any(tag_name(child) == "table" for child in children):
            return None

        wrapper_bg = (
            self.styles.styles(tr).get("backgroundColor")
            or self.styles.styles(td).get("backgroundColor")
            or table_styles.get("backgroundColor")
        )

        spliced = self.process_elements(children)
        if wrapper_bg and wrapper_bg != "transparent":
            for row in spliced:
                if row.values.background_color in (None, "transparent"):
                    row.values.background_color = wrapper_bg
        return spliced

    def _grid_row(self, tr: Tag, cells: list[Tag]) -> Row:
        """多列行"""
        spans = [col_span(td) for td in cells]
        total = sum(spans)
        columns = [self._column(td, span / total * 100) for td, span in zip(cells, spans)]
        return Row(cells=grid_widths(spans), columns=columns, values=self._row_values(tr))

    def _row_values(self, tr: Tag) -> RowValues:
        """行样式（每个 <tr> 提取一次）"""
        styles = self.styles.styles(tr)
        return RowValues(
            background_color=styles.get("backgroundColor") or "transparent",
            vertical_align=styles.get("verticalAlign") or "top",
            padding_top=styles.get("paddingTop") or "0px",
            padding_right=styles.get("paddingRight") or "0px",
            padding_bottom=styles.get("paddingBottom") or "0px",
            padding_left=styles.get("paddingLeft") or "0px",
            border_top=styles.get("borderTop"),
            border_bottom=styles.get("borderBottom"),
            border_left=styles.get("borderLeft"),
            border_right=styles.get("borderRight"),
        )

    def _column(self, td: Tag, width_pct: float) -> Column:
        """单元格 -> 列，嵌套行的内容直接提升到本列"""
        styles = self.styles.styles(td)
        values = ColumnValues(
            width=f"{width_pct:.2f}%",
            padding=styles.get("padding") or "10px",
            background_color=styles.get("backgroundColor") or "transparent",
            vertical_align=styles.get("verticalAlign") or "top",
            border_top=styles.get("borderTop"),
            border_bottom=styles.get("borderBottom"),
            border_left=styles.get("borderLeft"),
            border_right=styles.get("borderRight"),
            border_radius=styles.get("borderRadius"),
        )

        contents: list[Component] = []
        for item in self.process_cell_content(list(td.children)):
            if isinstance(item, Row):
                for column in item.columns:
                    contents.extend(column.contents)
            else:
                contents.append(item)

        if not contents:
            contents.append(create_placeholder())
        return Column(contents=contents, values=values)

    # ===== 单元格内容 =====
    def process_cell_content(self, nodes: list[PageElement]) -> list[CellItem]:
        """单元格子节点 -> 组件与嵌套行的混合列表"""
        results: list[CellItem] = []

        for node in group_inline_nodes(nodes, self.styles.markup):
            if isinstance(node, TextComponent):
                results.append(node)
                continue

            name = tag_name(node)
            if name is None:
                if is_text(node) and node.strip():
                    results.append(self.classifier.classify(node))
                continue

            if name in IGNORED_TAGS or name == "br":
                continue

            if name == "table":
                results.extend(self.process_table(node))
            elif name in CELL_CONTAINER_TAGS and node.find("table") is not None:
                results.extend(self.process_cell_content(list(node.children)))
            else:
                results.append(self.classifier.classify(node))

        return results
