"""Exceptions raised by hierarchy-table."""

from typing import Any


class NormalizationError(ValueError):
    """Input matched neither the nested nor the flat record shape."""

    def __init__(self, message: str, *, fragment: Any) -> None:
        super().__init__(message)
        self.fragment = fragment
