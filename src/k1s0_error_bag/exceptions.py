"""Error bag exceptions."""

from __future__ import annotations


class ErrorBagError(Exception):
    """Base error for the error bag library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ErrorBagErrorCodes:
    """ErrorBagError code constants."""

    INVALID_CONFIG: str = "INVALID_CONFIG"
