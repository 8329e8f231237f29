"""Note markup: inline spans, block classification, rendering and checkbox edits."""

from .blocks import (
    Blank,
    Block,
    BlockKind,
    Bullet,
    Checkbox,
    FencedCode,
    Header,
    Paragraph,
    classify,
    join_lines,
    split_lines,
)
from .checkbox import is_checked, toggle_checkbox
from .options import RenderConfig
from .renderer import (
    DisplayNode,
    NodeKind,
    NoteRenderer,
    render,
    render_note_page,
    to_html,
)
from .spans import Span, SpanKind, tokenize

__all__ = [
    "Blank",
    "Block",
    "BlockKind",
    "Bullet",
    "Checkbox",
    "DisplayNode",
    "FencedCode",
    "Header",
    "NodeKind",
    "NoteRenderer",
    "Paragraph",
    "RenderConfig",
    "Span",
    "SpanKind",
    "classify",
    "is_checked",
    "render",
    "render_note_page",
    "join_lines",
    "split_lines",
    "to_html",
    "toggle_checkbox",
    "tokenize",
]
