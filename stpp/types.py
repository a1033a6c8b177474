from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List

from .diagnostics import Diagnostic, Severity


# -----------------------------
@dataclass(frozen=True)
class RunOptions:
    tags: FrozenSet[str] = field(default_factory=frozenset)  # начальные теги
    marker: str = "#"
    # Политики для спорных мест формата
    keep_separator: bool = False     # не терять пробелы при эхо нераспознанных директив
    strict_operators: bool = False   # одиночный '&'/'|' считать ошибкой разбора
    strict_clauses: bool = False     # повторный else, elif после else, незакрытый if фатальны

    def __post_init__(self) -> None:
        if len(self.marker) != 1:
            raise ValueError(f"Marker must be a single character, got {self.marker!r}")
        if self.marker.isspace():
            raise ValueError("Marker must not be whitespace")


@dataclass
class RunResult:
    """
    Итог одного прохода.

    ok=False означает фатальную ошибку; вывод, сделанный до неё,
    остаётся в приёмнике.
    """
    ok: bool
    diagnostics: List[Diagnostic] = field(default_factory=list)
    final_tags: List[str] = field(default_factory=list)
    chars_written: int = 0

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]


__all__ = ["RunOptions", "RunResult"]
