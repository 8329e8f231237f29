"""
Render configuration for note output.

Centralizes presentation flags so callers can tune defaults without touching
the renderer itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Glyph shown in front of bullet items, whichever marker the source used
    bullet_glyph: str = "•"

    # Show the fence language tag above code blocks when one was given
    show_language_tag: bool = True

    # When False, HTML checkboxes are emitted disabled (read-only export)
    interactive_checkboxes: bool = True

    # Extra CSS appended to full HTML pages
    extra_css: str = ""
