"""
业务处理器 - 邮件 HTML 导入、渲染和预览
使用类封装状态，消除全局变量
"""

import json
from dataclasses import dataclass, field
from html import escape

from loguru import logger

from ..design2html import extract_text, render
from ..html2design import parse
from ..models import Design, ProcessingState
from ..store import DesignStore

# (设计稿 JSON, 结构摘要, 渲染 HTML, 预览, 纯文本, 状态)
type HandlerOutput = tuple[str, str, str, str, str, str]


def summarize_design(design: Design | None) -> str:
    """设计稿结构摘要：行、列宽度和背景、组件类型"""
    if design is None or design.body is None:
        return "（空设计稿）"

    rows = design.body.rows
    lines = [f"共 {len(rows)} 行，背景 {design.body.values.background_color}"]
    for i, row in enumerate(rows, start=1):
        background = row.values.background_color or "transparent"
        lines.append(f"行 {i}: 栅格 {row.cells}，背景 {background}")
        for j, column in enumerate(row.columns, start=1):
            types = ", ".join(content.type for content in column.contents) or "无"
            lines.append(
                f"  列 {j} ({column.values.width or '-'}, "
                f"{column.values.background_color or 'transparent'}): {types}"
            )
    return "\n".join(lines)


def preview_frame(html: str) -> str:
    """用 iframe srcdoc 隔离预览邮件文档"""
    if not html:
        return '<p class="empty-preview">暂无预览</p>'
    return (
        f'<iframe srcdoc="{escape(html, quote=True)}" '
        'style="width:100%;height:720px;border:1px solid #e5e7eb;border-radius:8px;"></iframe>'
    )


@dataclass
class DesignHandler:
    """设计稿处理器"""

    state: ProcessingState = field(default_factory=ProcessingState)
    store: DesignStore = field(default_factory=DesignStore)

    def import_html(self, html: str) -> HandlerOutput:
        """导入 HTML：解析为设计稿并重新渲染"""
        if not html or not html.strip():
            return self._outputs("⚠️ 请先粘贴 HTML 内容")

        try:
            design = parse(html)
        except Exception as e:
            logger.exception("解析出错")
            self._reset_state()
            return self._outputs(f"❌ 解析出错: {e!s}")

        return self._apply(design, "✅ 导入完成")

    def render_json(self, design_json: str) -> HandlerOutput:
        """根据编辑后的设计稿 JSON 重新渲染"""
        if not design_json or not design_json.strip():
            return self._outputs("⚠️ 设计稿 JSON 为空")

        try:
            design = Design.model_validate(json.loads(design_json))
        except Exception as e:
            logger.exception("设计稿 JSON 无效")
            return self._outputs(f"❌ 设计稿 JSON 无效: {e!s}")

        return self._apply(design, "✅ 渲染完成")

    def save(self) -> str:
        """保存当前设计稿"""
        if self.state.design is None:
            return "⚠️ 当前没有可保存的设计稿"
        if self.store.save(self.state.design):
            return f"✅ 已保存到 {self.store.path}"
        return "❌ 保存失败"

    def load(self) -> HandlerOutput:
        """加载已保存的设计稿"""
        design = self.store.load()
        if design.body is None or not design.body.rows:
            self._reset_state()
            return self._outputs("ℹ️ 没有已保存的设计稿")
        return self._apply(design, f"✅ 已加载 {self.store.path}")

    def clear(self) -> HandlerOutput:
        """清除存储槽和当前状态"""
        self.store.clear()
        self._reset_state()
        return self._outputs("🗑️ 已清除保存的设计稿")

    def _apply(self, design: Design | None, message: str) -> HandlerOutput:
        """更新状态并生成全部输出"""
        if design is None:
            self._reset_state()
            return self._outputs("⚠️ 未解析出任何内容")

        html = render(design)
        self.state.design = design
        self.state.html = html
        self.state.plain_text = extract_text(html)

        row_count = len(design.body.rows) if design.body else 0
        return self._outputs(f"{message}\n\n行数：{row_count}\n输出 HTML：{len(html)} 字符")

    def _outputs(self, status: str) -> HandlerOutput:
        design = self.state.design
        return (
            design.to_json() if design else "",
            summarize_design(design),
            self.state.html,
            preview_frame(self.state.html),
            self.state.plain_text,
            status,
        )

    def _reset_state(self) -> None:
        """重置状态"""
        self.state.design = None
        self.state.html = ""
        self.state.plain_text = ""


# 全局处理器实例（用于 Gradio 回调）
_handler: DesignHandler | None = None


def _get_handler() -> DesignHandler:
    """获取处理器实例"""
    global _handler
    if _handler is None:
        _handler = DesignHandler()
    return _handler


def import_html(html: str) -> HandlerOutput:
    return _get_handler().import_html(html)


def render_json(design_json: str) -> HandlerOutput:
    return _get_handler().render_json(design_json)


def save_design() -> str:
    return _get_handler().save()


def load_design() -> HandlerOutput:
    return _get_handler().load()


def clear_design() -> HandlerOutput:
    return _get_handler().clear()
