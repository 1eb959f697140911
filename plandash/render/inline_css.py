# plandash/render/inline_css.py
from __future__ import annotations

from .css.part01_tokens import CSS_PART as CSS_01
from .css.part02_header_tabs import CSS_PART as CSS_02
from .css.part03_kanban import CSS_PART as CSS_03
from .css.part04_timeline import CSS_PART as CSS_04
from .css.part05_gantt import CSS_PART as CSS_05

CSS_BLOCK = "\n".join([
  CSS_01, CSS_02, CSS_03, CSS_04, CSS_05
])
