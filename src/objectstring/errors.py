"""
Error types for objectstring.
"""

__docformat__ = 'google'

__all__ = [
    'ObjectStringError',
    'InvalidRangeSpec'
]

from typing import Optional


class ObjectStringError(Exception):
    """Base exception for all objectstring errors."""

    pass


class InvalidRangeSpec(ObjectStringError, ValueError):
    """Raised when a character-range specification cannot be parsed.

    Args:
        spec: The specification as supplied by the caller
        reason: Human readable description of the problem
        position: 0-indexed offset into `spec` where the problem was found
    """

    def __init__(self, spec, reason: str, position: Optional[int] = None) -> None:
        self.spec = spec
        self.reason = reason
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.position is None:
            return f"{self.reason}: {self.spec!r}"
        return f"[{self.position}] {self.reason}: {self.spec!r}"
