"""Base exception types carrying a message and optional argument details."""

from __future__ import annotations


class VlException(Exception):
    """Base type of all library exceptions."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArgumentException(VlException):
    """Raised when a function receives an invalid argument."""

    def __init__(self, message: str = "", function: str = "", name: str = "") -> None:
        super().__init__(message)
        self.function = function
        self.name = name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"function={self.function!r}, name={self.name!r})"
        )