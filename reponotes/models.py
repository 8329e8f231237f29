"""
Wire models for the remote notes mirror and the local notes mapping.

The mirror speaks JSON:
  POST {"repo": "<owner/name>", "note": "<text>"} -> {"success": true}
  GET                                             -> [{"repo": ..., "note": ...}, ...]
Invalid input is answered with HTTP 400 and {"error": "Invalid input"}.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class MirrorModel(BaseModel):
    """Base model for mirror payloads; unknown server fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class MirrorNote(MirrorModel):
    repo: str = Field(min_length=1)
    note: str


class MirrorSubmitResult(MirrorModel):
    success: bool = False
    error: Optional[str] = None


MirrorNoteList = TypeAdapter(List[MirrorNote])

# Serialized form of the whole repoKey -> note text mapping in the local store
NotesMapping = TypeAdapter(Dict[str, str])


__all__ = [
    "MirrorModel",
    "MirrorNote",
    "MirrorNoteList",
    "MirrorSubmitResult",
    "NotesMapping",
]
