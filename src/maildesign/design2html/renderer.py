"""
设计树转邮件 HTML
生成基于表格、兼容 Outlook（MSO 条件注释）的完整 HTML 文档

结构：
- Body -> 外层全宽表格 + MSO 固定像素宽度表格 + max-width 内容表格
- Row -> 独立的嵌套表格，单个 <tr>，各列按 100/列数 平分宽度
- Column -> 组件依次拼接
"""

import re
from dataclasses import dataclass
from html import escape
from typing import Any

from loguru import logger
from pydantic import ValidationError

from ..models import (
    ButtonComponent,
    ButtonValues,
    Column,
    Design,
    HtmlComponent,
    ImageComponent,
    ImageValues,
    Row,
    TextComponent,
)

DEFAULT_CONTAINER_WIDTH = 600
DEFAULT_IMAGE_WIDTH = 600

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")
_BODY_RE = re.compile(r"<body[^>]*>([\s\S]*)</body>", re.IGNORECASE)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_HTML_TAG_RE = re.compile(r"</?html[^>]*>", re.IGNORECASE)
_HEAD_RE = re.compile(r"<head[^>]*>([\s\S]*)</head>", re.IGNORECASE)

HEAD = """<head>
<title></title>
<!--[if !mso]><!-->
<meta http-equiv="X-UA-Compatible" content="IE=edge">
<!--<![endif]-->
<meta http-equiv="Content-Type" content="text/html; charset=UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<style type="text/css">
#outlook a { padding: 0; }
body { margin: 0; padding: 0; -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; }
table, td { border-collapse: collapse; mso-table-lspace: 0pt; mso-table-rspace: 0pt; }
img { border: 0; height: auto; line-height: 100%; outline: none; text-decoration: none; -ms-interpolation-mode: bicubic; }
p { display: block; margin: 13px 0; }
</style>
<!--[if mso]>
<noscript>
<xml>
<o:OfficeDocumentSettings>
<o:AllowPNG/>
<o:PixelsPerInch>96</o:PixelsPerInch>
</o:OfficeDocumentSettings>
</xml>
</noscript>
<![endif]-->
<style type="text/css">
@media only screen and (max-width:480px) {
.mj-column-per-100 { width: 100% !important; max-width: 100%; }
table.mj-full-width-mobile { width: 100% !important; }
td.mj-full-width-mobile { width: auto !important; }
}
</style>
</head>"""


def _pixels(value: Any) -> int | None:
    """"600px" / "600" / 600 -> 600；百分比等返回 None"""
    if isinstance(value, int):
        return value
    text = str(value or "").strip()
    if text.endswith("%"):
        return None
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


def _attr(value: Any) -> str:
    return escape(str(value or ""), quote=True)


@dataclass
class DesignToHtmlRenderer:
    """Design -> HTML 渲染器"""

    def render(self, design: Design | dict | None) -> str:
        """渲染完整文档；设计稿或 body 缺失时返回空字符串"""
        model = self._coerce(design)
        if model is None or model.body is None:
            return ""

        body = model.body
        values = body.values
        background = values.background_color or "#FFFFFF"
        container_width = values.content_width or f"{DEFAULT_CONTAINER_WIDTH}px"
        container_px = _pixels(container_width) or DEFAULT_CONTAINER_WIDTH
        rows_html = "".join(self.render_row(row) for row in body.rows)

        logger.debug(f"渲染 {len(body.rows)} 行，内容宽度 {container_width}")

        return f"""<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" xmlns:v="urn:schemas-microsoft-com:vml" xmlns:o="urn:schemas-microsoft-com:office:office">
{HEAD}
<body style="word-spacing:normal;background-color:{background};">
<!-- Outer Wrapper -->
<table border="0" cellpadding="0" cellspacing="0" width="100%" style="background-color:{background};">
<tr>
<td align="center">
<!--[if mso | IE]>
<table align="center" border="0" cellpadding="0" cellspacing="0" style="width:{container_width};" width="{container_px}">
<tr>
<td>
<![endif]-->
<table border="0" cellpadding="0" cellspacing="0" role="presentation" style="width:100%;max-width:{container_width};">
<tbody>
{rows_html}
</tbody>
</table>
<!--[if mso | IE]>
</td>
</tr>
</table>
<![endif]-->
</td>
</tr>
</table>
</body>
</html>
"""

    def _coerce(self, design: Design | dict | None) -> Design | None:
        """接受模型或 JSON 字典"""
        if design is None or isinstance(design, Design):
            return design
        if isinstance(design, dict):
            if "body" not in design:
                logger.debug("设计稿缺少 body，输出为空")
                return None
            try:
                return Design.model_validate(design)
            except ValidationError as e:
                logger.error(f"设计稿结构无效: {e.error_count()} 处错误")
                return None
        raise TypeError(f"不支持的设计稿类型: {type(design).__name__}")

    # ===== 行 / 列 =====
    def render_row(self, row: Row) -> str:
        """每行一个独立表格；无列时返回空字符串"""
        if not row.columns:
            return ""

        column_width = f"{100 / len(row.columns):.2f}"
        columns_html = "".join(self._render_column(column, column_width) for column in row.columns)

        background = row.values.background_color
        row_style = (
            f' style="background-color:{background};"'
            if background and background != "transparent"
            else ""
        )

        return f"""<tr>
<td align="center">
<table border="0" cellpadding="0" cellspacing="0" role="presentation" style="width:100%;">
<tbody>
<tr{row_style}>
{columns_html}
</tr>
</tbody>
</table>
</td>
</tr>
"""

    def _render_column(self, column: Column, width: str) -> str:
        values = column.values
        vertical_align = values.vertical_align or "top"
        style = f"width:{width}%;vertical-align:{vertical_align};"
        if values.background_color and values.background_color != "transparent":
            style += f"background-color:{values.background_color};"
        if values.padding:
            style += f"padding:{values.padding};"

        contents = "".join(self.render_content(content) for content in column.contents)
        return f'<td style="{style}" valign="{vertical_align}"><div>{contents}</div></td>'

    # ===== 组件 =====
    def render_content(self, content) -> str:
        """按组件类型渲染"""
        match content:
            case TextComponent():
                return content.values.text
            case ImageComponent():
                return self._render_image(content.values)
            case ButtonComponent():
                return self._render_button(content.values)
            case HtmlComponent():
                return self._render_html(content.values.html or content.values.content or "")
            case _:
                logger.debug(f"跳过不支持的组件类型: {getattr(content, 'type', '?')}")
                return ""

    def _render_image(self, values: ImageValues) -> str:
        """图片：显式宽高属性 + display:block"""
        url = values.src.url.replace(" ", "%20") if values.src.url else ""
        width = _pixels(values.src.width) or _pixels(values.width) or DEFAULT_IMAGE_WIDTH
        height = _pixels(values.src.height)
        alt_text = values.alt_text or "Image"

        height_attr = f' height="{height}"' if height else ""
        height_css = f"{height}px" if height else "auto"
        img = (
            f'<img alt="{_attr(alt_text)}" src="{_attr(url)}" width="{width}"{height_attr} '
            f'style="display:block;height:{height_css};width:100%;max-width:{width}px;border:0;" />'
        )

        if values.href and values.href.url:
            return f'<a href="{_attr(values.href.url)}" target="{_attr(values.href.target)}">{img}</a>'
        return img

    def _render_button(self, values: ButtonValues) -> str:
        """Bulletproof 按钮：单格表格 + 链接，Outlook 使用 mso-padding-alt"""
        background = values.button_colors.background_color
        color = values.button_colors.color
        radius = values.border_radius or "3px"
        font_family = values.font_family.value if values.font_family else "Arial, sans-serif"
        font_size = values.font_size or "13px"
        font_weight = values.font_weight or "normal"

        td_style = f"border:none;border-radius:{radius};cursor:auto;mso-padding-alt:10px 25px;background:{background};"
        link_style = (
            f"display:inline-block;background:{background};color:{color};"
            f"font-family:{font_family};font-size:{font_size};font-weight:{font_weight};"
            f"line-height:120%;margin:0;text-decoration:none;text-transform:none;"
            f"padding:10px 25px;mso-padding-alt:0px;border-radius:{radius};"
        )

        return (
            '<table border="0" cellpadding="0" cellspacing="0" role="presentation" '
            'style="border-collapse:separate;line-height:100%;">'
            "<tr>"
            f'<td align="center" bgcolor="{_attr(background)}" role="presentation" style="{_attr(td_style)}" valign="middle">'
            f'<a href="{_attr(values.href.url)}" target="{_attr(values.href.target)}" style="{_attr(link_style)}">'
            f"{values.text}"
            "</a>"
            "</td>"
            "</tr>"
            "</table>"
        )

    def _render_html(self, html_value: str) -> str:
        """原始 HTML：完整文档只保留 <body> 内部"""
        if "<body" in html_value.lower():
            match = _BODY_RE.search(html_value)
            return match.group(1).strip() if match else html_value

        html_value = _DOCTYPE_RE.sub("", html_value)
        html_value = _HTML_TAG_RE.sub("", html_value)
        html_value = _HEAD_RE.sub("", html_value)
        return html_value.strip()


def render(design: Design | dict | None) -> str:
    """渲染设计稿为 HTML（兼容函数接口）"""
    return DesignToHtmlRenderer().render(design)
