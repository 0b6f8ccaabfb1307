"""
Gradio UI 组件定义
"""

import gradio as gr

from .handlers import clear_design, import_html, load_design, render_json, save_design
from .styles import CUSTOM_CSS


def create_ui():
    """创建 Gradio 界面"""
    with gr.Blocks(css=CUSTOM_CSS) as app:
        gr.HTML('<h1 class="main-title">邮件 HTML 设计稿转换工具</h1>')
        gr.HTML('<p class="sub-title">将表格布局的邮件 HTML 导入为栅格设计稿，并重新渲染为兼容各邮件客户端的 HTML</p>')

        with gr.Row(equal_height=False):
            # 左侧：输入区
            with gr.Column(scale=1):
                html_input = gr.Code(
                    label="邮件 HTML",
                    language="html",
                    lines=20,
                    elem_classes=["html-input"],
                )

                gr.HTML('<div class="gap"></div>')

                import_btn = gr.Button(
                    "导入",
                    variant="primary",
                    elem_classes=["primary-btn"],
                    size="lg",
                )

                gr.HTML('<div class="gap"></div>')

                with gr.Row(elem_classes=["action-row"]):
                    save_btn = gr.Button("保存", elem_classes=["secondary-btn"], size="sm")
                    load_btn = gr.Button("加载", elem_classes=["secondary-btn"], size="sm")
                    clear_btn = gr.Button("清除", elem_classes=["secondary-btn"], size="sm")

                status_output = gr.Textbox(
                    label="处理状态",
                    lines=6,
                    interactive=False,
                    elem_classes=["status-box"],
                    placeholder="处理结果将显示在这里...",
                )

                summary_output = gr.Textbox(
                    label="结构摘要",
                    lines=10,
                    interactive=False,
                    elem_classes=["status-box"],
                )

            # 右侧：输出区
            with gr.Column(scale=1):
                with gr.Tabs():
                    with gr.Tab("预览"):
                        preview_output = gr.HTML(elem_classes=["preview-frame"])
                    with gr.Tab("设计稿 JSON"):
                        design_output = gr.Code(label="设计稿 JSON", language="json", lines=24)
                        rerender_btn = gr.Button("按 JSON 重新渲染", elem_classes=["secondary-btn"], size="sm")
                    with gr.Tab("HTML"):
                        html_output = gr.Code(label="渲染结果", language="html", lines=24)
                    with gr.Tab("纯文本"):
                        text_output = gr.Textbox(label="纯文本", lines=24, interactive=False)

        outputs = [
            design_output,
            summary_output,
            html_output,
            preview_output,
            text_output,
            status_output,
        ]

        import_btn.click(fn=import_html, inputs=[html_input], outputs=outputs, show_progress="minimal")
        rerender_btn.click(fn=render_json, inputs=[design_output], outputs=outputs)
        load_btn.click(fn=load_design, inputs=[], outputs=outputs)
        clear_btn.click(fn=clear_design, inputs=[], outputs=outputs)
        save_btn.click(fn=save_design, inputs=[], outputs=[status_output])

        # 使用说明
        gr.HTML('<div class="gap"></div>')

        with gr.Accordion("使用说明", open=False, elem_classes=["accordion"]):
            gr.Markdown("""
**导入规则**

- **布局表格**：每个 `<tr>` 对应一行，每个 `<td>` 对应一列，colspan 按比例换算为 12 栅格
- **包裹表格**：只起居中或背景作用的单格表格会被拆掉，背景色下沉到内部行
- **组件识别**：图片（含链接图片）、按钮样式的链接、标题段落等排版元素分别识别
- **行内合并**：连续的文本、链接和社交图标合并为一个文本组件
- **样式表**：`<style>` 中的规则会合并到元素样式，`@media` 块忽略

**输出**

- **HTML**：基于表格、带 Outlook 条件注释的完整邮件文档
- **纯文本**：邮件 text/plain 部分

**保存 / 加载**

- 只保留一份设计稿，保存会整体覆盖
""")

    return app
