"""Library exceptions."""

from typing import Optional


class RepoNotesError(Exception):
    """Base reponotes error."""


# ------------------------------- Markup --------------------------------------


class InvalidIndex(RepoNotesError):
    """A checkbox toggle addressed a line outside the note."""

    def __init__(self, index: int, line_count: int, message: Optional[str] = None):
        super().__init__(
            message or f"line index {index} out of range (note has {line_count} lines)"
        )
        self.index = index
        self.line_count = line_count


class NotACheckbox(InvalidIndex):
    """A checkbox toggle addressed a line that is not a checkbox item."""

    def __init__(self, index: int, line_count: int):
        super().__init__(index, line_count, f"line {index} is not a checkbox item")


# ------------------------------- Local store ---------------------------------


class LocalStoreError(RepoNotesError):
    """Durable local store failure."""


class LocalStoreCorrupt(LocalStoreError):
    """The durable local store could not be decoded."""


# ------------------------------- Mirror --------------------------------------


class MirrorError(RepoNotesError):
    """Base remote mirror transport error."""


class MirrorAuthError(MirrorError):
    """401/403 from the mirror endpoint."""


class MirrorRateLimited(MirrorError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class MirrorApiError(MirrorError):
    """Catch-all mirror error."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload
