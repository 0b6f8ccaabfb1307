"""
pytest 共享 fixtures
"""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from maildesign.html2design.styles import StyleIndex
from maildesign.html2design.stylesheet import parse_internal_styles
from maildesign.models import (
    Body,
    BodyValues,
    ButtonComponent,
    ButtonValues,
    Column,
    ColumnValues,
    Design,
    ImageComponent,
    ImageSource,
    ImageValues,
    Link,
    Row,
    RowValues,
    TextComponent,
    TextValues,
)


@pytest.fixture
def two_cell_html() -> str:
    """两列布局：文本 + 图片"""
    return '<table><tr><td>Hello</td><td><img src="a.png" width="100"></td></tr></table>'


@pytest.fixture
def newsletter_html() -> str:
    """带样式表、包裹表格和按钮的完整邮件"""
    return """<!DOCTYPE html>
<html>
<head>
<title>Newsletter</title>
<style>
.hero { background-color: #f4f4f4; padding: 20px; }
.cta { background-color: #e91e63; color: #ffffff; }
@media only screen and (max-width: 480px) { .hero { padding: 0; } }
</style>
</head>
<body style="background-color:#eeeeee;">
<table width="100%" bgcolor="#eeeeee">
  <tr>
    <td align="center">
      <table width="600" style="background-color:#ffffff;">
        <tr>
          <td class="hero"><h1 style="color:#333333;font-size:28px;">Welcome</h1></td>
        </tr>
        <tr>
          <td><p>Left</p></td>
          <td><a class="cta" href="https://example.com">Shop now</a></td>
        </tr>
      </table>
    </td>
  </tr>
</table>
</body>
</html>
"""


@pytest.fixture
def social_html() -> str:
    """三个社交图标链接"""
    return (
        '<a href="https://facebook.com/acme"><img src="https://cdn.example.com/facebook.png"></a>'
        '<a href="https://twitter.com/acme"><img src="https://cdn.example.com/twitter.png"></a>'
        '<a href="https://instagram.com/acme"><img src="https://cdn.example.com/instagram.png"></a>'
    )


@pytest.fixture
def sample_design() -> Design:
    """两行设计稿：单列文本行 + 三列（文本 / 图片 / 按钮）行"""
    return Design(
        body=Body(
            rows=[
                Row(
                    cells=[12],
                    columns=[
                        Column(
                            contents=[TextComponent(values=TextValues(text="<h1>Title</h1>"))],
                            values=ColumnValues(width="100%", padding="10px"),
                        )
                    ],
                    values=RowValues(background_color="#fafafa"),
                ),
                Row(
                    cells=[4, 4, 4],
                    columns=[
                        Column(
                            contents=[TextComponent(values=TextValues(text="<p>First column</p>"))],
                            values=ColumnValues(width="33.33%"),
                        ),
                        Column(
                            contents=[
                                ImageComponent(
                                    values=ImageValues(
                                        src=ImageSource(url="https://example.com/my image.png", width=200),
                                        alt_text="Logo",
                                        href=Link(url="https://example.com"),
                                    )
                                )
                            ],
                            values=ColumnValues(width="33.33%"),
                        ),
                        Column(
                            contents=[
                                ButtonComponent(
                                    values=ButtonValues(text="Buy", href=Link(url="https://example.com/buy"))
                                )
                            ],
                            values=ColumnValues(width="33.33%", background_color="#eeeeee"),
                        ),
                    ],
                    values=RowValues(background_color="transparent"),
                ),
            ],
            values=BodyValues(background_color="#f0f0f0", content_width="640px"),
        )
    )


@pytest.fixture
def make_index():
    """由 HTML 构建 (soup, StyleIndex)"""

    def _make(html: str) -> tuple[BeautifulSoup, StyleIndex]:
        soup = BeautifulSoup(html, "html.parser")
        return soup, StyleIndex.build(soup, parse_internal_styles(soup))

    return _make


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """临时存储槽路径"""
    return tmp_path / "store" / "email_design.json"
