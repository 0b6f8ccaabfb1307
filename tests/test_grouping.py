"""
行内元素分组测试
"""

from bs4 import BeautifulSoup

from maildesign import parse
from maildesign.html2design.grouping import group_inline_nodes, is_inline_group_member
from maildesign.models import TextComponent


def _nodes(html: str) -> list:
    return list(BeautifulSoup(html, "html.parser").children)


def test_social_links_grouped_into_one_text(social_html):
    grouped = group_inline_nodes(_nodes(social_html))

    assert len(grouped) == 1
    component = grouped[0]
    assert isinstance(component, TextComponent)
    assert component.values.text.startswith('<div style="text-align: inherit;">')
    assert component.values.text.count("<a ") == 3
    assert component.values.padding == "10px"


def test_whitespace_between_members_tolerated():
    html = '<a href="#"><img src="a.png"></a>\n  <a href="#"><img src="b.png"></a>'
    grouped = group_inline_nodes(_nodes(html))
    assert len(grouped) == 1
    assert isinstance(grouped[0], TextComponent)


def test_single_member_left_as_is():
    nodes = _nodes('<a href="#"><img src="a.png"></a><p>text</p>')
    grouped = group_inline_nodes(nodes)
    assert grouped == nodes


def test_social_icon_without_link_is_member():
    soup = BeautifulSoup('<img src="x.png" alt="LinkedIn"><img src="hero.png">', "html.parser")
    first, second = soup.find_all("img")
    assert is_inline_group_member(first)
    assert not is_inline_group_member(second)


def test_custom_markup_function_used():
    html = '<a href="#"><img src="a.png"></a><a href="#"><img src="b.png"></a>'
    grouped = group_inline_nodes(_nodes(html), markup=lambda node: "[x]")
    assert grouped[0].values.text == '<div style="text-align: inherit;">[x][x]</div>'


def test_parse_social_row(social_html):
    design = parse(social_html)

    assert len(design.body.rows) == 1
    row = design.body.rows[0]
    assert row.cells == [12]
    assert len(row.columns[0].contents) == 1
    assert row.columns[0].contents[0].type == "text"
