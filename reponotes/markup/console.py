"""Terminal rendering of display nodes with rich."""

from __future__ import annotations

from typing import Iterable, List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .renderer import DisplayNode, NodeKind

_INLINE_STYLES = {
    NodeKind.TEXT: "",
    NodeKind.STRONG: "bold",
    NodeKind.EMPHASIS: "italic",
    NodeKind.STRONG_EMPHASIS: "bold italic",
    NodeKind.INLINE_CODE: "bold cyan",
}

_HEADING_STYLES = {
    1: "bold underline",
    2: "bold",
    3: "bold dim",
    4: "dim",
}


def _inline_text(node: DisplayNode, base_style: str = "") -> Text:
    text = Text(style=base_style)
    for child in node.children:
        text.append(child.text, style=_INLINE_STYLES.get(child.kind, ""))
    return text


def node_to_rich(node: DisplayNode) -> RenderableType:
    if node.kind is NodeKind.CODE_BLOCK:
        lang = node.attr("language")
        return Panel(
            Text(node.text),
            title=Text(lang) if lang else None,
            title_align="left",
            border_style="dim",
            expand=False,
        )
    if node.kind is NodeKind.CHECKBOX:
        checked = bool(node.attr("checked"))
        line = Text()
        line.append("[x] " if checked else "[ ] ", style="green" if checked else "")
        line.append_text(_inline_text(node, "strike dim" if node.attr("strikethrough") else ""))
        return line
    if node.kind is NodeKind.BULLET:
        line = Text(f"{node.text} ", style="dim")
        line.append_text(_inline_text(node))
        return line
    if node.kind is NodeKind.HEADING:
        return _inline_text(node, _HEADING_STYLES.get(int(node.attr("level", 1)), "bold"))
    if node.kind is NodeKind.PARAGRAPH:
        return _inline_text(node)
    if node.kind is NodeKind.LINE_BREAK:
        return Text("")
    return Text(node.text, style=_INLINE_STYLES.get(node.kind, ""))


def to_rich(nodes: Iterable[DisplayNode]) -> Group:
    """Group display nodes into a single renderable for ``Console.print``."""
    renderables: List[RenderableType] = [node_to_rich(n) for n in nodes]
    return Group(*renderables)
