"""
Inline span tokenizer.

Splits one line of note text into typed spans. The scan is leftmost-match-wins:
at each position the earliest complete code span or emphasis span is taken,
code winning a tie. Marker runs that never close are kept as literal text and
do not stop later spans from matching.

Emphasis markers are runs of ``*``: one for italic, two for bold, three for
bold-italic. A run only closes on a later run of exactly the same length;
runs longer than three never open a span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class SpanKind(str, Enum):
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    CODE = "code"


_EMPHASIS_KINDS = {
    1: SpanKind.ITALIC,
    2: SpanKind.BOLD,
    3: SpanKind.BOLD_ITALIC,
}

_CODE_RE = re.compile(r"`([^`]+)`")
_MARKER_RUN_RE = re.compile(r"\*+")


@dataclass(frozen=True)
class Span:
    kind: SpanKind
    content: str

    @property
    def is_text(self) -> bool:
        return self.kind is SpanKind.TEXT


# (start, end, span)
_Match = Tuple[int, int, Span]


class _LineScanner:
    """
    Finds the leftmost code or emphasis span at or after a position.

    Positions passed to ``next_match`` never decrease, so marker runs are
    indexed once per line and the last code match is reused until the scan
    moves past it.
    """

    def __init__(self, line: str):
        self.line = line
        self._runs = [(m.start(), m.end()) for m in _MARKER_RUN_RE.finditer(line)]
        # Index of the nearest later run with the same length, for runs of 1-3
        self._closers: List[Optional[int]] = [None] * len(self._runs)
        latest: Dict[int, int] = {}
        for i in range(len(self._runs) - 1, -1, -1):
            start, end = self._runs[i]
            if end - start in _EMPHASIS_KINDS:
                self._closers[i] = latest.get(end - start)
                latest[end - start] = i
        # First run at or after i that has a closer; the extra slot is the end
        self._openers: List[Optional[int]] = [None] * (len(self._runs) + 1)
        for i in range(len(self._runs) - 1, -1, -1):
            if self._closers[i] is not None:
                self._openers[i] = i
            else:
                self._openers[i] = self._openers[i + 1]
        self._run = 0
        self._code = None
        self._code_exhausted = False

    def _find_code(self, pos: int) -> Optional[_Match]:
        if self._code_exhausted:
            return None
        if self._code is None or self._code.start() < pos:
            self._code = _CODE_RE.search(self.line, pos)
            if self._code is None:
                self._code_exhausted = True
                return None
        m = self._code
        return m.start(), m.end(), Span(SpanKind.CODE, m.group(1))

    def _find_emphasis(self, pos: int) -> Optional[_Match]:
        while self._run < len(self._runs) and self._runs[self._run][0] < pos:
            self._run += 1
        opener = self._openers[self._run]
        if opener is None:
            return None
        start, end = self._runs[opener]
        close_start, close_end = self._runs[self._closers[opener]]
        kind = _EMPHASIS_KINDS[end - start]
        return start, close_end, Span(kind, self.line[end:close_start])

    def next_match(self, pos: int) -> Optional[_Match]:
        code = self._find_code(pos)
        emphasis = self._find_emphasis(pos)
        if code is None:
            return emphasis
        if emphasis is None or code[0] <= emphasis[0]:
            return code
        return emphasis


def tokenize(line: str) -> Tuple[Span, ...]:
    """Split ``line`` into spans. Never returns an empty sequence."""
    spans: List[Span] = []
    scanner = _LineScanner(line)
    pos = 0
    while pos < len(line):
        match = scanner.next_match(pos)
        if match is None:
            break
        start, end, span = match
        if start > pos:
            spans.append(Span(SpanKind.TEXT, line[pos:start]))
        spans.append(span)
        pos = end
    if pos < len(line):
        spans.append(Span(SpanKind.TEXT, line[pos:]))
    if not spans:
        spans.append(Span(SpanKind.TEXT, ""))
    return tuple(spans)


def plain_text(spans) -> str:
    """Concatenate span contents without markup."""
    return "".join(s.content for s in spans)
