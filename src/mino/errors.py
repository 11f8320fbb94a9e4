from __future__ import annotations

ERR_NOT_FOUND = "NotFound"
ERR_PERMISSION_DENIED = "PermissionDenied"
ERR_ALREADY_EXISTS = "AlreadyExists"
ERR_OTHER_IO = "OtherIo"

_MESSAGES = {
    ERR_NOT_FOUND: "File not found",
    ERR_PERMISSION_DENIED: "Permission denied",
    ERR_ALREADY_EXISTS: "File already exists",
}


class EditorIOError(OSError):
    """A failed load, save or rename, tagged with one of the ``ERR_*`` kinds."""

    def __init__(self, kind: str, path: str | None = None, detail: str = "") -> None:
        super().__init__(_MESSAGES.get(kind, detail or "I/O error"))
        self.kind = kind
        self.path = path
        self.detail = detail

    @classmethod
    def from_exc(cls, exc: BaseException, path: str | None = None) -> EditorIOError:
        if isinstance(exc, FileNotFoundError):
            kind = ERR_NOT_FOUND
        elif isinstance(exc, PermissionError):
            kind = ERR_PERMISSION_DENIED
        elif isinstance(exc, FileExistsError):
            kind = ERR_ALREADY_EXISTS
        else:
            kind = ERR_OTHER_IO
        detail = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        return cls(kind, path, detail)
