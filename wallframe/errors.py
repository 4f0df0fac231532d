"""Exceptions raised by the framing engine."""

from __future__ import annotations


class FramingError(Exception):
    """Base class for engine errors that callers can report to a user."""

    code = "framing_error"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class StockError(FramingError):
    """The stock lengths offered to the optimizer cannot hold any cut."""

    code = "invalid_stock"
