# plandash/render/template.py
from __future__ import annotations

from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK
from .inline_js import JS_BLOCK

# Static parts are baked in; page-specific markers are filled by build_html.
HTML_TEMPLATE = (
    HTML_SHELL
    .replace("__CSS_BLOCK__", CSS_BLOCK)
    .replace("__JS_BLOCK__", JS_BLOCK)
)

PAGE_MARKERS = ("__HTML_LANG__", "__PAGE_TITLE__", "__BODY_MARKUP__", "__DATA_JSON__")
