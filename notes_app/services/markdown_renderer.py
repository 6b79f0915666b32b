from __future__ import annotations

import markdown as md

from notes_app.services.sanitize import sanitize_rendered_html

# Only paragraphs and line breaks are produced. Headings, lists, quotes,
# code blocks, emphasis and raw HTML are left as typed.
_BLOCK_PROCESSORS_OFF = (
    "indent", "code", "hashheader", "setextheader", "hr",
    "olist", "ulist", "quote", "reference",
)
_INLINE_PATTERNS_OFF = (
    "backtick", "escape", "reference", "link", "image_link",
    "image_reference", "short_reference", "short_image_ref",
    "autolink", "automail", "html", "entity",
    "not_strong", "em_strong", "em_strong2",
)


def _literal_markdown() -> md.Markdown:
    converter = md.Markdown(extensions=["nl2br"])
    converter.preprocessors.deregister("html_block", strict=False)
    for name in _BLOCK_PROCESSORS_OFF:
        converter.parser.blockprocessors.deregister(name, strict=False)
    for name in _INLINE_PATTERNS_OFF:
        converter.inlinePatterns.deregister(name, strict=False)
    return converter


class MarkdownRenderer:
    """Render note text for the read-only detail screen, character for character."""

    def __init__(self) -> None:
        self._md = _literal_markdown()

    def render_body(self, text: str) -> str:
        self._md.reset()
        rendered = self._md.convert(text)
        return sanitize_rendered_html(rendered)

    def render_page(self, text: str) -> str:
        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    body {{ font-family: sans-serif; line-height: 1.5; }}
  </style>
</head>
<body>{self.render_body(text)}</body>
</html>
"""
