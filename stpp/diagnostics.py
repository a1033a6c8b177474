"""
Диагностика одного прохода препроцессора.

Нефатальные проблемы (кривые выражения, одиночные '&'/'|', лишние
директивы) не прерывают обработку: они накапливаются здесь и сразу
пишутся в лог. Фатальные ошибки фиксируются как severity=error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class Diagnostics:
    """Накопитель сообщений прохода с немедленным выводом в лог."""

    def __init__(self) -> None:
        self._items: List[Diagnostic] = []

    def warning(self, message: str, line: Optional[int] = None) -> Diagnostic:
        return self._add(Diagnostic(Severity.WARNING, message, line))

    def error(self, message: str, line: Optional[int] = None) -> Diagnostic:
        return self._add(Diagnostic(Severity.ERROR, message, line))

    def _add(self, diag: Diagnostic) -> Diagnostic:
        self._items.append(diag)
        if diag.severity is Severity.ERROR:
            logger.error("%s", diag)
        else:
            logger.warning("%s", diag)
        return diag

    @property
    def items(self) -> List[Diagnostic]:
        return list(self._items)


__all__ = ["Severity", "Diagnostic", "Diagnostics"]
