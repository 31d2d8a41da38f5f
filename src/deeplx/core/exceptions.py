from __future__ import annotations

from typing import Optional


class TranslationError(RuntimeError):
    """Base class for every failure of a translate call."""

    code = "translation_error"
    retryable = False


class InvalidInput(TranslationError):
    """Raised before any network I/O when the request cannot be sent."""

    code = "invalid_input"


class NetworkError(TranslationError):
    code = "network_error"
    retryable = True


class BackendError(TranslationError):
    """The backend answered, but not with a successful translation."""

    code = "backend_error"

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        if self.status_code is None:
            return False
        return self.status_code == 429 or self.status_code >= 500


class DecodeError(TranslationError):
    code = "decode_error"
