"""
Checkbox mutation handler.

Toggling rewrites the single character between the brackets of a checkbox
line and leaves every other character of the note untouched, so the note text
stays the only source of truth for checkbox state. Each line keeps its own
terminator, so notes with mixed line endings survive a toggle unchanged
elsewhere.
"""

from __future__ import annotations

from ..exceptions import InvalidIndex, NotACheckbox
from .blocks import Checkbox, classify, find_block, join_lines, split_lines

CHECKED_MARK = "x"
UNCHECKED_MARK = " "
_MARK_OFFSET = len("- [")


def toggle_checkbox(note_text: str, line_index: int, new_checked: bool) -> str:
    """Return ``note_text`` with the checkbox on ``line_index`` set to ``new_checked``.

    Raises InvalidIndex when the index is outside the note and NotACheckbox when
    the line is not classified as a checkbox item (for example inside a fence).
    The input text is returned as-is when the box already has the wanted state.
    """
    lines, terminators = split_lines(note_text)
    if not 0 <= line_index < len(lines):
        raise InvalidIndex(line_index, len(lines))

    block = find_block(classify(note_text), line_index)
    if not isinstance(block, Checkbox) or block.line != line_index:
        raise NotACheckbox(line_index, len(lines))
    if block.checked == new_checked:
        return note_text

    raw = lines[line_index]
    pos = len(raw) - len(raw.lstrip()) + _MARK_OFFSET
    mark = CHECKED_MARK if new_checked else UNCHECKED_MARK
    lines[line_index] = raw[:pos] + mark + raw[pos + 1 :]
    return join_lines(lines, terminators)


def is_checked(note_text: str, line_index: int) -> bool:
    """Current state of the checkbox on ``line_index``."""
    lines, _ = split_lines(note_text)
    if not 0 <= line_index < len(lines):
        raise InvalidIndex(line_index, len(lines))
    block = find_block(classify(note_text), line_index)
    if not isinstance(block, Checkbox) or block.line != line_index:
        raise NotACheckbox(line_index, len(lines))
    return block.checked
