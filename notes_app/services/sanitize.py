from __future__ import annotations

import bleach

ALLOWED_TAGS = frozenset({"p", "br"})
ALLOWED_ATTRS: dict[str, list[str]] = {}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize_rendered_html(rendered_html: str) -> str:
    return bleach.clean(
        rendered_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
