"""Note persistence: durable local stores, the remote mirror, and the controller."""

from .controller import NoteStore
from .local import DEFAULT_STORE_KEY, DurableStore, FileStorage, MemoryStorage
from .mirror import DEFAULT_MIRROR_PATH, HttpNotesMirror, NotesMirror

__all__ = [
    "DEFAULT_MIRROR_PATH",
    "DEFAULT_STORE_KEY",
    "DurableStore",
    "FileStorage",
    "HttpNotesMirror",
    "MemoryStorage",
    "NoteStore",
    "NotesMirror",
]
