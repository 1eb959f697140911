# plandash/render/inline_js.py
from __future__ import annotations

from .js.tabs import JS_PART as JS_01

JS_BLOCK = "\n".join([
  JS_01,
])
