"""
Base exceptions for stpp.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from StppUserError.

Fatal preprocessing errors abort the whole pass: they unwind through every
open conditional frame and the pass reports failure. Programming errors and
bugs should NOT inherit from these classes: they propagate with full
tracebacks.
"""

from __future__ import annotations

from typing import Optional


class StppUserError(Exception):
    """
    Base class for all user-facing errors in stpp.

    These errors indicate problems that the user can fix:
    configuration issues, missing files, bad command-line arguments.
    """
    pass


class FatalPreprocessError(StppUserError):
    """Ошибка, прерывающая весь проход препроцессора."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(prefix + message)


class MissingTagNameError(FatalPreprocessError):
    """Директива define/undef без имени тега."""
    pass


class MalformedGroupError(FatalPreprocessError):
    """
    Нарушение структуры условной группы в строгом режиме:
    повторный else, elif после else, незакрытый if.
    """
    pass


__all__ = [
    "StppUserError",
    "FatalPreprocessError",
    "MissingTagNameError",
    "MalformedGroupError",
]
