"""
Note store and sync controller.

Owns the repoKey -> note text mapping for one session. Every ``set`` updates
the mapping, writes the whole mapping to the durable local store before
returning, then hands the single changed note to the remote mirror on a
background worker without waiting for it. The local store is authoritative:
mirror failures are logged and dropped, never retried, never rolled back.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import ValidationError

from ..exceptions import LocalStoreCorrupt, MirrorError
from ..markup.checkbox import toggle_checkbox
from ..models import NotesMapping
from .local import DurableStore, FileStorage
from .mirror import HttpNotesMirror, NotesMirror

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    import requests

    from ..config import NotesConfig

LOGGER = logging.getLogger(__name__)


class NoteStore:
    """Session-scoped notes mapping with local persistence and remote mirroring."""

    def __init__(
        self,
        storage: DurableStore,
        mirror: Optional[NotesMirror] = None,
        *,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self._storage = storage
        self._mirror = mirror
        self._notes: Dict[str, str] = {}
        self._executor = executor
        self._owns_executor = executor is None
        self._pending: List[Future] = []
        self._closed = False

    @classmethod
    def from_config(
        cls, config: "NotesConfig", session: Optional["requests.Session"] = None
    ) -> "NoteStore":
        """Build a loaded store from configuration."""
        storage = FileStorage(config.store_path, key=config.store_key)
        mirror = None
        if config.mirror_url:
            mirror = HttpNotesMirror(
                config.mirror_url,
                session=session,
                path=config.mirror_path,
                timeout=config.mirror_timeout,
            )
        store = cls(storage, mirror)
        store.load()
        return store

    # ------------------------------ Public API --------------------------------

    def load(self) -> Dict[str, str]:
        """Replace the in-memory mapping with the durable store's contents.

        An absent or undecodable store yields an empty mapping.
        """
        mapping: Dict[str, str] = {}
        try:
            raw = self._storage.read_all()
        except LocalStoreCorrupt as exc:
            LOGGER.warning("Local note store is unreadable, starting empty: %s", exc)
            raw = None
        if raw is not None:
            try:
                mapping = NotesMapping.validate_json(raw)
            except ValidationError as exc:
                LOGGER.warning(
                    "Local note store holds an invalid mapping, starting empty: %s",
                    exc.error_count(),
                )
        self._notes = dict(mapping)
        LOGGER.debug("Loaded %d notes from local store", len(self._notes))
        return dict(self._notes)

    def get(self, repo_key: str) -> str:
        """Note text for ``repo_key``; empty when there is none."""
        return self._notes.get(repo_key, "")

    def notes(self) -> Dict[str, str]:
        """Copy of the current mapping."""
        return dict(self._notes)

    def set(self, repo_key: str, text: str) -> None:
        """Store ``text`` for ``repo_key`` locally, then mirror it in the background."""
        notes = dict(self._notes)
        notes[repo_key] = text
        # The in-memory mapping only changes once the durable write succeeded
        self._storage.write_all(NotesMapping.dump_json(notes).decode("utf-8"))
        self._notes = notes
        LOGGER.debug("Saved note for %s (%d characters)", repo_key, len(text))
        self._dispatch_mirror(repo_key, text)

    def toggle_checkbox(self, repo_key: str, line_index: int, checked: bool) -> str:
        """Set the checkbox on ``line_index`` of a note and store the result."""
        current = self.get(repo_key)
        updated = toggle_checkbox(current, line_index, checked)
        if updated != current:
            self.set(repo_key, updated)
        return updated

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for in-flight mirror writes. Returns False if some are still running."""
        if not self._pending:
            return True
        _, not_done = wait(self._pending, timeout=timeout)
        self._pending = list(not_done)
        return not not_done

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=True)
        self._closed = True

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------ Mirroring ---------------------------------

    def _dispatch_mirror(self, repo_key: str, text: str) -> None:
        if self._mirror is None:
            return
        if self._closed:
            LOGGER.debug("Store closed, not mirroring note for %s", repo_key)
            return
        if self._executor is None:
            # One worker keeps mirror writes in submission order
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="reponotes-mirror"
            )
        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(self._executor.submit(self._submit, repo_key, text))

    def _submit(self, repo_key: str, text: str) -> bool:
        mirror = self._mirror
        if mirror is None:
            return False
        try:
            accepted = mirror.submit(repo_key, text)
        except MirrorError as exc:
            LOGGER.warning("Mirror write for %s failed: %s", repo_key, exc)
            return False
        except Exception:
            LOGGER.exception("Mirror write for %s failed unexpectedly", repo_key)
            return False
        if accepted:
            LOGGER.debug("Mirrored note for %s", repo_key)
        else:
            LOGGER.warning("Mirror did not accept note for %s", repo_key)
        return bool(accepted)
