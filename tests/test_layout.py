"""
布局表格识别与表格转行测试
"""

import pytest
from bs4 import BeautifulSoup

from maildesign import parse
from maildesign.html2design.components import PLACEHOLDER_TEXT
from maildesign.html2design.layout import (
    GRID_UNITS,
    create_simple_row,
    find_layout_table,
    grid_widths,
    round_half_up,
)


class TestGrid:
    def test_colspan_ratio(self):
        assert grid_widths([1, 1, 4]) == [2, 2, 8]

    @pytest.mark.parametrize("count", range(1, 7))
    def test_equal_columns_sum_to_grid(self, count):
        widths = grid_widths([1] * count)
        assert sum(widths) == GRID_UNITS
        assert all(width >= 1 for width in widths)

    @pytest.mark.parametrize(
        "spans",
        [[3], [1, 2], [7, 7, 1], [2, 1, 1], [1, 1, 1, 5], [2, 3, 1, 1, 4], [1, 2, 3, 4, 5, 6]],
    )
    def test_uneven_spans_sum_to_grid(self, spans):
        widths = grid_widths(spans)
        assert len(widths) == len(spans)
        assert sum(widths) == GRID_UNITS

    def test_remainder_can_empty_last_column(self):
        assert grid_widths([7, 7, 1]) == [6, 6, 0]

    def test_last_column_absorbs_remainder(self):
        assert grid_widths([1] * 5) == [2, 2, 2, 2, 4]

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.49) == 1


class TestFindLayoutTable:
    def test_descends_wrapper_chain(self):
        soup = BeautifulSoup(
            "<div><center><table><tr><td>"
            '<table id="layout"><tr><td>a</td><td>b</td></tr></table>'
            "</td></tr></table></center></div>",
            "html.parser",
        )
        table = find_layout_table(soup.div)
        assert table is not None
        assert table["id"] == "layout"

    def test_multiple_children(self):
        soup = BeautifulSoup("<div><p>a</p><table><tr><td>b</td></tr></table></div>", "html.parser")
        assert find_layout_table(soup.div) is None

    def test_single_cell_table_without_inner_table(self):
        soup = BeautifulSoup("<div><table><tr><td><p>only</p></td></tr></table></div>", "html.parser")
        assert find_layout_table(soup.div) is None


class TestTableToRows:
    def test_wrapper_table_spliced_with_background(self):
        design = parse(
            '<table bgcolor="#123456"><tr><td>'
            "<table><tr><td>A</td><td>B</td></tr></table>"
            "</td></tr></table>"
        )
        rows = design.body.rows
        assert len(rows) == 1
        assert rows[0].cells == [6, 6]
        assert rows[0].values.background_color == "#123456"

    def test_explicit_row_background_kept(self):
        design = parse(
            '<table bgcolor="#123456"><tr><td>'
            '<table><tr style="background-color:#ffffff"><td>A</td><td>B</td></tr></table>'
            "</td></tr></table>"
        )
        assert design.body.rows[0].values.background_color == "#ffffff"

    def test_nested_rows_flattened_into_column(self):
        design = parse(
            "<table><tr>"
            "<td><p>Intro</p><table><tr><td>x</td><td>y</td></tr></table></td>"
            "<td>side</td>"
            "</tr></table>"
        )
        row = design.body.rows[0]
        assert row.cells == [6, 6]
        assert len(row.columns[0].contents) == 3

    def test_empty_cell_gets_placeholder(self):
        design = parse("<table><tr><td></td><td>b</td></tr></table>")
        first = design.body.rows[0].columns[0]
        assert len(first.contents) == 1
        assert first.contents[0].values.text == PLACEHOLDER_TEXT

    def test_line_breaks_ignored_in_cells(self):
        design = parse("<table><tr><td><br></td><td>b</td></tr></table>")
        assert design.body.rows[0].columns[0].contents[0].values.text == PLACEHOLDER_TEXT

    def test_colspan_widths(self):
        design = parse('<table><tr><td colspan="2">a</td><td>b</td></tr></table>')
        row = design.body.rows[0]
        assert row.cells == [8, 4]
        assert [column.values.width for column in row.columns] == ["66.67%", "33.33%"]

    def test_column_defaults(self):
        design = parse('<table><tr><td>a</td><td style="padding:0;vertical-align:middle">b</td></tr></table>')
        first, second = design.body.rows[0].columns
        assert first.values.padding == "10px"
        assert first.values.background_color == "transparent"
        assert first.values.vertical_align == "top"
        assert second.values.padding == "0"
        assert second.values.vertical_align == "middle"

    def test_row_defaults(self):
        design = parse("<table><tr><td>a</td><td>b</td></tr></table>")
        values = design.body.rows[0].values
        assert values.background_color == "transparent"
        assert values.padding_top == "0px"

    def test_thead_and_tbody_rows(self):
        design = parse(
            "<table><thead><tr><th>h1</th><th>h2</th></tr></thead>"
            "<tbody><tr><td>a</td><td>b</td></tr></tbody></table>"
        )
        assert len(design.body.rows) == 2


class TestTopLevel:
    def test_inline_content_merged_into_one_row(self):
        design = parse("Hello <b>world</b>")
        rows = design.body.rows
        assert len(rows) == 1
        assert rows[0].cells == [12]
        assert len(rows[0].columns[0].contents) == 2

    def test_block_elements_get_own_rows(self):
        design = parse("<div>A</div><div>B</div>")
        assert len(design.body.rows) == 2

    def test_block_wrapping_layout_table(self):
        design = parse("<div><table><tr><td>a</td><td>b</td><td>c</td></tr></table></div>")
        assert design.body.rows[0].cells == [4, 4, 4]

    def test_scripts_and_styles_ignored(self):
        design = parse("<script>var a = 1;</script><style>p {}</style><p>text</p>")
        assert len(design.body.rows) == 1

    def test_simple_row_shape(self):
        row = create_simple_row([])
        assert row.cells == [12]
        assert row.columns[0].values.width == "100%"
        assert row.values.background_color == "transparent"
