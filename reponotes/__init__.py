"""Formatted per-repository notes with a local store and a best-effort remote mirror."""

from .markup import (
    NoteRenderer,
    RenderConfig,
    classify,
    render,
    to_html,
    toggle_checkbox,
    tokenize,
)
from .store import FileStorage, HttpNotesMirror, MemoryStorage, NoteStore

__all__ = [
    "NoteStore",
    "FileStorage",
    "MemoryStorage",
    "HttpNotesMirror",
    "NoteRenderer",
    "RenderConfig",
    "classify",
    "render",
    "to_html",
    "toggle_checkbox",
    "tokenize",
]
