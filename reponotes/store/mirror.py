"""
HTTP client for the remote notes mirror.

The mirror is a best-effort copy of local notes: one POST per changed note,
plus a GET for inspecting what the server holds. Failures raise MirrorError
subclasses; callers that treat the mirror as advisory catch and log them.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

import requests
from pydantic import ValidationError

from ..exceptions import MirrorApiError, MirrorAuthError, MirrorRateLimited
from ..models import MirrorNote, MirrorNoteList, MirrorSubmitResult

LOGGER = logging.getLogger(__name__)

DEFAULT_MIRROR_PATH = "/api/github/notes"


class NotesMirror(Protocol):
    """Remote collaborator that receives single note changes."""

    def submit(self, repo: str, note: str) -> bool: ...


class HttpNotesMirror:
    """
    Minimal HTTP transport:
      - JSON requests via `json=payload`
      - One endpoint: POST to submit a note, GET to list mirrored notes
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        *,
        path: str = DEFAULT_MIRROR_PATH,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._url = f"{self._base_url}/{path.lstrip('/')}"
        self._session = session or requests.Session()
        self._timeout = timeout
        LOGGER.debug("Initialized HttpNotesMirror with url: %s", self._url)

    @property
    def url(self) -> str:
        return self._url

    def _raise_for_status(self, method: str, resp) -> None:
        code = getattr(resp, "status_code", 0)
        LOGGER.debug("%s to %s returned status %d", method, self._url, code)
        if code < 400:
            return
        if code in (401, 403):
            LOGGER.error("%s to %s failed with auth error: %d", method, self._url, code)
            raise MirrorAuthError(f"HTTP {code}: unauthorized")
        if code == 429:
            retry_after = None
            hdr = getattr(resp, "headers", {}).get("Retry-After")
            if hdr:
                try:
                    retry_after = float(hdr)
                except (TypeError, ValueError):
                    retry_after = None
            LOGGER.warning(
                "%s to %s was rate-limited. Retry after: %s",
                method,
                self._url,
                retry_after,
            )
            raise MirrorRateLimited("HTTP 429: rate limited", retry_after=retry_after)
        # Try to include the server's json error if possible
        try:
            body = resp.json()
        except ValueError:
            body = getattr(resp, "text", None)
        LOGGER.error("%s to %s failed with code %d", method, self._url, code)
        raise MirrorApiError(f"HTTP {code}", payload=body)

    def _send(self, method: str, payload: Optional[Dict] = None):
        LOGGER.info("%s to %s", method, self._url)
        try:
            if method == "POST":
                resp = self._session.post(self._url, json=payload, timeout=self._timeout)
            else:
                resp = self._session.get(self._url, timeout=self._timeout)
        except requests.RequestException as exc:
            LOGGER.error("%s to %s failed: %s", method, self._url, exc)
            raise MirrorApiError(f"{method} to {self._url} failed: {exc}") from exc
        self._raise_for_status(method, resp)
        try:
            return resp.json()
        except ValueError:
            LOGGER.error("Failed to parse JSON response from %s", self._url)
            raise MirrorApiError(
                "Invalid JSON response", payload=getattr(resp, "text", None)
            )

    def submit(self, repo: str, note: str) -> bool:
        """Send one note to the mirror. Returns the server's success flag."""
        try:
            payload = MirrorNote(repo=repo, note=note).model_dump()
        except ValidationError as e:
            raise MirrorApiError("Invalid input", payload=e.errors()) from e
        data = self._send("POST", payload)
        try:
            result = MirrorSubmitResult.model_validate(data)
        except ValidationError:
            LOGGER.error("Submit response validation failed.")
            raise MirrorApiError("Submit response validation failed", payload=data)
        if not result.success:
            LOGGER.warning("Mirror rejected note for %s: %s", repo, result.error)
        return result.success

    def fetch_all(self) -> List[MirrorNote]:
        """Return every note the mirror currently holds."""
        data = self._send("GET")
        try:
            notes = MirrorNoteList.validate_python(data)
        except ValidationError:
            LOGGER.error("List response validation failed.")
            raise MirrorApiError("List response validation failed", payload=data)
        LOGGER.info("Mirror returned %d notes.", len(notes))
        return notes
