"""
纯文本提取测试
"""

from maildesign import extract_text, render


def test_empty():
    assert extract_text("") == ""
    assert extract_text("   ") == ""


def test_invisible_content_skipped():
    html = (
        "<html><head><title>Subject</title><style>p { color: red }</style></head>"
        "<body><p>  Hello  </p><!-- note --><script>track()</script><p>World</p></body></html>"
    )
    assert extract_text(html) == "Hello\nWorld"


def test_fragment_without_body():
    assert extract_text("<p>a</p>\n\n\n<p>b</p>") == "a\nb"


def test_nested_text_in_document_order():
    html = "<table><tr><td>One <b>two</b></td><td>three</td></tr></table>"
    assert extract_text(html) == "One\ntwo\nthree"


def test_rendered_design(sample_design):
    text = extract_text(render(sample_design))

    assert "Title" in text
    assert "First column" in text
    assert "Buy" in text
    assert "<" not in text
    assert "\n\n\n" not in text
    assert "mso" not in text
