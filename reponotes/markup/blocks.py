"""
Block-line classifier.

Turns raw note text into an ordered tuple of blocks. Lines are examined in
order; a line opening a fence consumes every following line up to and
including the closing fence (or the rest of the note when the fence is never
closed). Every other line goes through the ordered rule list below, first
match wins:

    checkbox > bullet > header > blank > paragraph

Fence detection runs before all of them. Rules look at the line with
surrounding whitespace removed; paragraphs keep the untrimmed line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import (
    Callable,
    ClassVar,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .spans import Span, tokenize

FENCE = "```"
BULLET_MARKERS = ("• ", "- ")
MAX_HEADER_LEVEL = 4

_CHECKBOX_RE = re.compile(r"^- \[([ x])\]\s?(.*)$")
_HEADER_RE = re.compile(r"^(#+) (.*)$")
_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


class BlockKind(str, Enum):
    FENCED_CODE = "fenced_code"
    CHECKBOX = "checkbox"
    BULLET = "bullet"
    HEADER = "header"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass(frozen=True)
class FencedCode:
    kind: ClassVar[BlockKind] = BlockKind.FENCED_CODE

    line: int
    language: Optional[str]
    lines: Tuple[str, ...]
    closed: bool = True

    @property
    def end_line(self) -> int:
        """Index of the last source line covered, closing fence included."""
        return self.line + len(self.lines) + (1 if self.closed else 0)


@dataclass(frozen=True)
class Checkbox:
    kind: ClassVar[BlockKind] = BlockKind.CHECKBOX

    line: int
    checked: bool
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class Bullet:
    kind: ClassVar[BlockKind] = BlockKind.BULLET

    line: int
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class Header:
    kind: ClassVar[BlockKind] = BlockKind.HEADER

    line: int
    level: int
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class Paragraph:
    kind: ClassVar[BlockKind] = BlockKind.PARAGRAPH

    line: int
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class Blank:
    kind: ClassVar[BlockKind] = BlockKind.BLANK

    line: int


Block = Union[FencedCode, Checkbox, Bullet, Header, Paragraph, Blank]


def split_lines(text: str) -> Tuple[List[str], List[str]]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` or ``\\n``, keeping empty lines.

    Returns the lines and the terminator found after each line but the last,
    so ``join_lines`` can rebuild the text byte for byte.
    """
    parts = _LINE_BREAK_RE.split(text)
    return parts[0::2], parts[1::2]


def join_lines(lines: Sequence[str], terminators: Sequence[str]) -> str:
    """Inverse of ``split_lines``."""
    out = [lines[0]] if lines else []
    for terminator, line in zip(terminators, lines[1:]):
        out.append(terminator)
        out.append(line)
    return "".join(out)


# ------------------------------ Line rules -----------------------------------


def _checkbox(index: int, raw: str, trimmed: str) -> Optional[Block]:
    m = _CHECKBOX_RE.match(trimmed)
    if m is None:
        return None
    return Checkbox(line=index, checked=m.group(1) == "x", spans=tokenize(m.group(2)))


def _bullet(index: int, raw: str, trimmed: str) -> Optional[Block]:
    if not trimmed.startswith(BULLET_MARKERS):
        return None
    return Bullet(line=index, spans=tokenize(trimmed[2:]))


def _header(index: int, raw: str, trimmed: str) -> Optional[Block]:
    m = _HEADER_RE.match(trimmed)
    if m is None:
        return None
    level = min(len(m.group(1)), MAX_HEADER_LEVEL)
    return Header(line=index, level=level, spans=tokenize(m.group(2)))


def _blank(index: int, raw: str, trimmed: str) -> Optional[Block]:
    return Blank(line=index) if not trimmed else None


LineRule = Callable[[int, str, str], Optional[Block]]

LINE_RULES: Tuple[LineRule, ...] = (_checkbox, _bullet, _header, _blank)


def classify_line(index: int, raw: str) -> Block:
    """Classify a single line that is not part of a fence."""
    trimmed = raw.strip()
    for rule in LINE_RULES:
        block = rule(index, raw, trimmed)
        if block is not None:
            return block
    return Paragraph(line=index, spans=tokenize(raw))


def is_fence(raw: str) -> bool:
    return raw.strip().startswith(FENCE)


def classify(text: str) -> Tuple[Block, ...]:
    """Classify ``text`` into blocks.

    The empty note has no blocks, so it also renders to no display nodes.
    Any other text yields at least one block; a trailing line break adds a
    final Blank.
    """
    if not text:
        return ()
    lines, _ = split_lines(text)
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        raw = lines[i]
        if is_fence(raw):
            language = raw.strip()[len(FENCE) :].strip() or None
            j = i + 1
            while j < len(lines) and not is_fence(lines[j]):
                j += 1
            closed = j < len(lines)
            blocks.append(
                FencedCode(
                    line=i,
                    language=language,
                    lines=tuple(lines[i + 1 : j]),
                    closed=closed,
                )
            )
            i = j + 1
            continue
        blocks.append(classify_line(i, raw))
        i += 1
    return tuple(blocks)


def find_block(blocks: Iterable[Block], line_index: int) -> Optional[Block]:
    """Return the block that starts at or covers ``line_index``."""
    for block in blocks:
        if block.line == line_index:
            return block
        if isinstance(block, FencedCode) and block.line < line_index <= block.end_line:
            return block
    return None
