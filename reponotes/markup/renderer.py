"""
Pure renderer for classified notes.

Maps blocks to framework-neutral display nodes and, for callers that want
markup, display nodes to an HTML fragment or a standalone page. No I/O.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple

from .blocks import (
    Blank,
    Block,
    Bullet,
    Checkbox,
    FencedCode,
    Header,
    Paragraph,
    classify,
)
from .options import RenderConfig
from .spans import Span, SpanKind


class NodeKind(str, Enum):
    # Block level
    CODE_BLOCK = "code_block"
    CHECKBOX = "checkbox"
    BULLET = "bullet"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LINE_BREAK = "line_break"
    # Inline
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    STRONG_EMPHASIS = "strong_emphasis"
    INLINE_CODE = "inline_code"


_INLINE_KINDS = {
    SpanKind.TEXT: NodeKind.TEXT,
    SpanKind.BOLD: NodeKind.STRONG,
    SpanKind.ITALIC: NodeKind.EMPHASIS,
    SpanKind.BOLD_ITALIC: NodeKind.STRONG_EMPHASIS,
    SpanKind.CODE: NodeKind.INLINE_CODE,
}


@dataclass(frozen=True)
class DisplayNode:
    kind: NodeKind
    text: str = ""
    children: Tuple["DisplayNode", ...] = ()
    attrs: Tuple[Tuple[str, Any], ...] = ()

    def attr(self, name: str, default: Any = None) -> Any:
        for key, value in self.attrs:
            if key == name:
                return value
        return default


def render_spans(spans: Iterable[Span]) -> Tuple[DisplayNode, ...]:
    return tuple(DisplayNode(_INLINE_KINDS[s.kind], text=s.content) for s in spans)


def _is_whitespace_only(spans: Sequence[Span]) -> bool:
    return all(s.kind is SpanKind.TEXT and not s.content.strip() for s in spans)


def render_block(block: Block, config: Optional[RenderConfig] = None) -> DisplayNode:
    cfg = config or RenderConfig()
    if isinstance(block, FencedCode):
        attrs: Tuple[Tuple[str, Any], ...] = (("line", block.line),)
        if cfg.show_language_tag and block.language:
            attrs += (("language", block.language),)
        return DisplayNode(NodeKind.CODE_BLOCK, text="\n".join(block.lines), attrs=attrs)
    if isinstance(block, Checkbox):
        return DisplayNode(
            NodeKind.CHECKBOX,
            children=render_spans(block.spans),
            attrs=(
                ("line", block.line),
                ("checked", block.checked),
                ("strikethrough", block.checked),
            ),
        )
    if isinstance(block, Bullet):
        return DisplayNode(
            NodeKind.BULLET,
            text=cfg.bullet_glyph,
            children=render_spans(block.spans),
            attrs=(("line", block.line),),
        )
    if isinstance(block, Header):
        return DisplayNode(
            NodeKind.HEADING,
            children=render_spans(block.spans),
            attrs=(("line", block.line), ("level", block.level)),
        )
    if isinstance(block, Paragraph):
        if _is_whitespace_only(block.spans):
            return DisplayNode(NodeKind.LINE_BREAK, attrs=(("line", block.line),))
        return DisplayNode(
            NodeKind.PARAGRAPH,
            children=render_spans(block.spans),
            attrs=(("line", block.line),),
        )
    if isinstance(block, Blank):
        return DisplayNode(NodeKind.LINE_BREAK, attrs=(("line", block.line),))
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render(
    blocks: Iterable[Block], config: Optional[RenderConfig] = None
) -> Tuple[DisplayNode, ...]:
    """Map blocks to display nodes, one node per block."""
    return tuple(render_block(b, config) for b in blocks)


# ------------------------------- HTML ----------------------------------------


def _inline_html(node: DisplayNode) -> str:
    esc = html.escape(node.text)
    if node.kind is NodeKind.STRONG:
        return f"<strong>{esc}</strong>"
    if node.kind is NodeKind.EMPHASIS:
        return f"<em>{esc}</em>"
    if node.kind is NodeKind.STRONG_EMPHASIS:
        return f"<strong><em>{esc}</em></strong>"
    if node.kind is NodeKind.INLINE_CODE:
        return f"<code>{esc}</code>"
    return esc


def _children_html(node: DisplayNode) -> str:
    return "".join(_inline_html(c) for c in node.children)


def node_to_html(node: DisplayNode, config: Optional[RenderConfig] = None) -> str:
    cfg = config or RenderConfig()
    if node.kind is NodeKind.CODE_BLOCK:
        lang = node.attr("language")
        label = (
            f'<span class="note-code-lang">{html.escape(lang)}</span>' if lang else ""
        )
        lang_attr = f' data-language="{html.escape(lang)}"' if lang else ""
        return (
            f'<pre class="note-code"{lang_attr}>{label}'
            f"<code>{html.escape(node.text)}</code></pre>"
        )
    if node.kind is NodeKind.CHECKBOX:
        checked = " checked" if node.attr("checked") else ""
        disabled = "" if cfg.interactive_checkboxes else " disabled"
        body = _children_html(node)
        if node.attr("strikethrough"):
            body = f'<span style="text-decoration:line-through">{body}</span>'
        return (
            f'<div class="note-checkbox">'
            f'<input type="checkbox" data-line="{int(node.attr("line", 0))}"'
            f"{checked}{disabled}> {body}</div>"
        )
    if node.kind is NodeKind.BULLET:
        return (
            f'<div class="note-bullet"><span class="note-bullet-glyph">'
            f"{html.escape(node.text)}</span> {_children_html(node)}</div>"
        )
    if node.kind is NodeKind.HEADING:
        level = int(node.attr("level", 1))
        return f"<h{level}>{_children_html(node)}</h{level}>"
    if node.kind is NodeKind.PARAGRAPH:
        return f"<p>{_children_html(node)}</p>"
    if node.kind is NodeKind.LINE_BREAK:
        return "<br>"
    return _inline_html(node)


def to_html(nodes: Iterable[DisplayNode], config: Optional[RenderConfig] = None) -> str:
    """Join display nodes into an HTML fragment."""
    return "".join(node_to_html(n, config) for n in nodes)


def render_note_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.4;background:#fff;color:#000}"
        "h1,h2,h3,h4{margin:.4em 0 .2em}"
        "p{margin:0}"
        "code{font-family:ui-monospace,Menlo,Consolas,monospace;background:#f2f2f2;padding:0 .2em;border-radius:3px}"
        "pre.note-code{white-space:pre-wrap;background:#f6f6f6;padding:.5em;border-radius:4px}"
        "pre.note-code code{background:none;padding:0}"
        ".note-code-lang{display:block;font-size:.75em;color:#777;margin-bottom:.3em}"
        ".note-bullet-glyph{color:#666}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "code{background:#222}"
        "pre.note-code{background:#1b1b1b;color:#eee}"
        ".note-code-lang{color:#aaa}"
        "}"
        f'{extra_css}</style><div class="note-content">{html_fragment}</div>'
    )


class NoteRenderer:
    """Class-based interface for note rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, text: str) -> Tuple[DisplayNode, ...]:
        """Classify ``text`` and return its display nodes."""
        return render(classify(text), self.config)

    def render_html(self, text: str) -> str:
        """Render the note text to an HTML fragment string."""
        return to_html(self.render(text), self.config)

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_note_page(title, html_fragment, self.config.extra_css)


__all__ = [
    "DisplayNode",
    "NodeKind",
    "NoteRenderer",
    "node_to_html",
    "render",
    "render_block",
    "render_note_page",
    "render_spans",
    "to_html",
]
