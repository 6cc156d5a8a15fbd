"""Error classes for the HumanCode SDK."""
from __future__ import annotations


class HumanCodeError(Exception):
    """Base error for HumanCode SDK operations."""


class EncodingError(HumanCodeError):
    """Raised when a request body cannot be serialized."""


class TransportError(HumanCodeError):
    """Raised when the HTTP exchange itself fails (no envelope was read)."""


class ApiError(HumanCodeError):
    """Raised when the API rejects a request.

    Either the envelope carried a non-zero ``code`` or the HTTP status
    indicated an error.
    """

    def __init__(self, code: int, msg: str, status_code: int | None = None):
        super().__init__(f"API error: code: {code}, msg: {msg}")
        self.code = code
        self.msg = msg
        self.status_code = status_code
