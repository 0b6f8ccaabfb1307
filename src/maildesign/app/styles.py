"""
Gradio UI 自定义 CSS 样式
"""

CUSTOM_CSS = """
/* 整体容器 */
.gradio-container {
    max-width: 1400px !important;
    margin: auto !important;
    padding: 40px 60px !important;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif !important;
}

/* 标题样式 */
.main-title {
    text-align: center;
    color: #1a1a1a;
    font-size: 2.2rem !important;
    font-weight: 600;
    margin-bottom: 8px;
    letter-spacing: -0.5px;
}

.sub-title {
    text-align: center;
    color: #666;
    font-size: 1.1rem !important;
    margin-bottom: 40px;
}

label, .label-wrap span {
    font-size: 1rem !important;
    font-weight: 500 !important;
    color: #333 !important;
}

/* 主按钮样式 */
.primary-btn {
    background: #2563eb !important;
    border: none !important;
    font-size: 1.1rem !important;
    font-weight: 500 !important;
    padding: 16px 32px !important;
    border-radius: 10px !important;
}

.primary-btn:hover {
    background: #1d4ed8 !important;
}

/* 次要按钮 */
.secondary-btn {
    background: #f3f4f6 !important;
    border: 1px solid #d1d5db !important;
    color: #374151 !important;
    font-size: 0.9rem !important;
    border-radius: 6px !important;
}

.secondary-btn:hover {
    background: #e5e7eb !important;
    border-color: #9ca3af !important;
}

.action-row {
    gap: 12px;
}

/* 状态输出框 */
.status-box textarea {
    font-family: "SF Mono", Monaco, "Cascadia Code", Consolas, monospace !important;
    font-size: 0.9rem !important;
    line-height: 1.7 !important;
    background: #f8f9fa !important;
}

/* 预览区 */
.preview-frame {
    min-height: 720px;
}

.empty-preview {
    color: #9ca3af;
    text-align: center;
    padding: 80px 0;
}

.gap {
    margin-top: 24px !important;
}

.accordion {
    margin-top: 32px !important;
}

.accordion .prose {
    font-size: 0.95rem !important;
    line-height: 1.8 !important;
    padding: 20px !important;
}

/* 强制双栏布局始终显示 */
.gradio-container .row {
    flex-wrap: nowrap !important;
}

.gradio-container .row > .column {
    min-width: 0 !important;
    flex: 1 1 50% !important;
}
"""
