"""Absence errors raised by :class:`optval.value.Value` extraction."""

from __future__ import annotations

from typing import Any

from optval.errors.base import BaseError


class NoValueError(BaseError):
    """The optional value holds nothing.

    Recoverable: returned inside ``Err`` by ``Value.get()`` so callers can
    branch on absence by type instead of by message.
    """

    default_code = "no_value"

    def __init__(self, message: str = "no value", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MissingValuePanic(BaseException):
    """``must_get()`` was called on an absent value.

    A defect at the call site, not a runtime condition. Derives from
    :class:`BaseException` so ``except Exception`` handlers let it through.
    """

    def __init__(self, message: str = "no value in optional value") -> None:
        super().__init__(message)
        self.message = message


__all__ = ["MissingValuePanic", "NoValueError"]
