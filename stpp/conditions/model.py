"""
Модели данных для системы условий.

AST булевых выражений над тегами: имя тега, группа в скобках,
отрицание и бинарные операции &&, ||, ^.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ConditionType(Enum):
    """Типы узлов условия."""
    TAG = "tag"
    GROUP = "group"  # явная группировка в скобках
    NOT = "not"
    AND = "and"
    OR = "or"
    XOR = "xor"


_OPERATOR_SYMBOLS = {
    ConditionType.AND: "&&",
    ConditionType.OR: "||",
    ConditionType.XOR: "^",
}


@dataclass
class Condition(ABC):
    """Базовый абстрактный класс для всех условий."""

    @abstractmethod
    def get_type(self) -> ConditionType:
        """Возвращает тип условия."""
        pass

    def __str__(self) -> str:
        return self._to_string()

    @abstractmethod
    def _to_string(self) -> str:
        pass


@dataclass
class TagCondition(Condition):
    """
    Голое имя тега.

    Истинно, если тег определён в текущем контексте.
    """
    name: str

    def get_type(self) -> ConditionType:
        return ConditionType.TAG

    def _to_string(self) -> str:
        return self.name


@dataclass
class GroupCondition(Condition):
    """Группа условий в скобках: (condition)"""
    condition: Condition

    def get_type(self) -> ConditionType:
        return ConditionType.GROUP

    def _to_string(self) -> str:
        return f"({self.condition})"


@dataclass
class NotCondition(Condition):
    """Отрицание: !condition"""
    condition: Condition

    def get_type(self) -> ConditionType:
        return ConditionType.NOT

    def _to_string(self) -> str:
        return f"!{self.condition}"


@dataclass
class BinaryCondition(Condition):
    """
    Бинарная операция: left op right

    Правый операнд: всё оставшееся выражение, поэтому цепочки
    операторов группируются справа: a && b || c == a && (b || c).
    """
    left: Condition
    right: Condition
    operator: ConditionType  # AND, OR или XOR

    def get_type(self) -> ConditionType:
        return self.operator

    def _to_string(self) -> str:
        return f"{self.left} {_OPERATOR_SYMBOLS[self.operator]} {self.right}"


AnyCondition = Union[
    TagCondition,
    GroupCondition,
    NotCondition,
    BinaryCondition,
]

__all__ = [
    "Condition",
    "ConditionType",
    "TagCondition",
    "GroupCondition",
    "NotCondition",
    "BinaryCondition",
    "AnyCondition",
]
