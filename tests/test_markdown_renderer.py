import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notes_app.services.markdown_renderer import MarkdownRenderer


def test_plain_text_is_a_paragraph():
    body = MarkdownRenderer().render_body("Milk, eggs")
    assert body == "<p>Milk, eggs</p>"


def test_angle_brackets_are_shown_not_dropped():
    body = MarkdownRenderer().render_body("Use <tab> to indent")
    assert "&lt;tab&gt;" in body
    assert "to indent" in body


def test_tags_are_escaped():
    body = MarkdownRenderer().render_body("a <b>x</b>")
    assert body == "<p>a &lt;b&gt;x&lt;/b&gt;</p>"


def test_script_is_escaped():
    body = MarkdownRenderer().render_body("<script>alert(1)</script>")
    assert "<script" not in body
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body


def test_heading_and_list_markers_are_kept():
    renderer = MarkdownRenderer()

    assert renderer.render_body("# not a heading") == "<p># not a heading</p>"
    assert renderer.render_body("1. first") == "<p>1. first</p>"
    assert renderer.render_body("- item") == "<p>- item</p>"


def test_emphasis_markers_are_kept():
    body = MarkdownRenderer().render_body("**bold** and *it*")
    assert body == "<p>**bold** and *it*</p>"


def test_newlines_become_breaks():
    body = MarkdownRenderer().render_body("Milk\neggs")
    assert "Milk<br" in body
    assert "eggs" in body


def test_renderer_is_reusable():
    renderer = MarkdownRenderer()
    renderer.render_body("first")
    assert renderer.render_body("second") == "<p>second</p>"


def test_page_wraps_body():
    page = MarkdownRenderer().render_page("Hello")
    assert page.startswith("<html>")
    assert "<p>Hello</p>" in page
