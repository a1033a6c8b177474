"""
Модель файла конфигурации препроцессора.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, Iterable, List

from ..errors import StppUserError
from ..types import RunOptions


class ConfigLoadError(StppUserError):
    """Ошибка загрузки конфигурации с указанием пути поля."""
    pass


@dataclass
class PreprocessorConfig:
    """
    Настройки прохода, задаваемые файлом.

    Пример:
        defines: [linux, debug]
        marker: "#"
        keep_separator: false
        strict_operators: false
        strict_clauses: false
    """
    defines: List[str] = field(default_factory=list)
    marker: str = "#"
    keep_separator: bool = False
    strict_operators: bool = False
    strict_clauses: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], origin: str = "<config>") -> "PreprocessorConfig":
        """Создание экземпляра из словаря (из YAML) со строгой проверкой ключей."""
        allowed = {f.name for f in fields(cls)}
        extras = set(data.keys()) - allowed
        if extras:
            raise ConfigLoadError(f"{origin}: unexpected keys: {sorted(extras)!r}")

        defines = data.get("defines", [])
        if defines is None:
            defines = []
        if isinstance(defines, str) or not isinstance(defines, list):
            raise ConfigLoadError(f"{origin}: defines: expected a list of tag names")
        for tag in defines:
            if not isinstance(tag, str) or not tag.strip() or any(ch.isspace() for ch in tag):
                raise ConfigLoadError(f"{origin}: defines: invalid tag name {tag!r}")

        marker = data.get("marker", "#")
        if not isinstance(marker, str) or len(marker) != 1 or marker.isspace():
            raise ConfigLoadError(f"{origin}: marker: expected a single non-blank character, got {marker!r}")

        flags = {}
        for name in ("keep_separator", "strict_operators", "strict_clauses"):
            value = data.get(name, False)
            if not isinstance(value, bool):
                raise ConfigLoadError(f"{origin}: {name}: expected boolean, got {type(value).__name__}")
            flags[name] = value

        return cls(defines=list(defines), marker=marker, **flags)

    def to_options(self, extra_tags: Iterable[str] = ()) -> RunOptions:
        """Собирает RunOptions; теги из командной строки добавляются к defines."""
        tags: FrozenSet[str] = frozenset(self.defines) | frozenset(extra_tags)
        return RunOptions(
            tags=tags,
            marker=self.marker,
            keep_separator=self.keep_separator,
            strict_operators=self.strict_operators,
            strict_clauses=self.strict_clauses,
        )


__all__ = ["ConfigLoadError", "PreprocessorConfig"]
