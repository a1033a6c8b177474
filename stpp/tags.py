"""
Контекст тегов препроцессора.

Множество имён тегов, которое читается каждым условием и изменяется
директивами define/undef на протяжении одного прохода.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set


class TagContext:
    """
    Изменяемое множество тегов документа.

    Область видимости: весь проход; вложенные блоки не создают своих
    копий, а изменения не откатываются при выходе из блока.
    Сравнение имён точное и чувствительное к регистру.
    """

    def __init__(self, initial: Optional[Iterable[str]] = None):
        # Копия: исходное множество вызывающей стороны не изменяется
        self._tags: Set[str] = set(initial or ())

    def define(self, name: str) -> None:
        """Добавляет тег. Повторное добавление ничего не меняет."""
        self._tags.add(name)

    def undef(self, name: str) -> None:
        """Удаляет тег. Удаление отсутствующего тега ничего не меняет."""
        self._tags.discard(name)

    def is_defined(self, name: str) -> bool:
        """Проверяет, определён ли указанный тег."""
        return name in self._tags

    def snapshot(self) -> List[str]:
        """Текущее множество тегов в детерминированном порядке."""
        return sorted(self._tags)

    def __contains__(self, name: object) -> bool:
        return name in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagContext({self.snapshot()!r})"


__all__ = ["TagContext"]
