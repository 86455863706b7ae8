from __future__ import annotations
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_DATA = "invalid_data"
    IO = "io"


class Error(Exception):
    """Error raised by project discovery and environment loading.

    Callers decide how to recover by inspecting ``kind``; ``message`` is for humans.
    """

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_os_error(cls, exc: OSError, message: Optional[str] = None) -> "Error":
        """Classify an ``OSError``: a missing file is NOT_FOUND, anything else is IO."""
        kind = ErrorKind.NOT_FOUND if isinstance(exc, FileNotFoundError) else ErrorKind.IO
        return cls(kind, message or str(exc), exc)

    def __str__(self) -> str:
        if self.cause is not None and self.message != str(self.cause):
            return f"{self.message}: {self.cause}"
        return self.message

    def __repr__(self) -> str:
        return f"Error(kind={self.kind.value!r}, message={self.message!r})"
