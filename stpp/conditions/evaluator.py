"""
Вычислитель условных выражений.

Проходит по AST условия и вычисляет его значение по текущему
множеству тегов.
"""

from __future__ import annotations

from typing import cast

from .model import (
    Condition,
    ConditionType,
    TagCondition,
    GroupCondition,
    NotCondition,
    BinaryCondition,
)
from ..tags import TagContext


class EvaluationError(Exception):
    """Ошибка при вычислении условного выражения."""
    pass


class ConditionEvaluator:
    """
    Вычислитель условных выражений.

    Контекст тегов читается в момент вычисления, поэтому define/undef,
    выполненные раньше по потоку, сразу влияют на результат.
    """

    def __init__(self, tags: TagContext):
        self.tags = tags

    def evaluate(self, condition: Condition) -> bool:
        """
        Вычисляет значение условия.

        Raises:
            EvaluationError: При неизвестном типе узла
        """
        condition_type = condition.get_type()

        if condition_type == ConditionType.TAG:
            return self.tags.is_defined(cast(TagCondition, condition).name)
        elif condition_type == ConditionType.GROUP:
            return self.evaluate(cast(GroupCondition, condition).condition)
        elif condition_type == ConditionType.NOT:
            return not self.evaluate(cast(NotCondition, condition).condition)
        elif condition_type == ConditionType.AND:
            return self._evaluate_and(cast(BinaryCondition, condition))
        elif condition_type == ConditionType.OR:
            return self._evaluate_or(cast(BinaryCondition, condition))
        elif condition_type == ConditionType.XOR:
            return self._evaluate_xor(cast(BinaryCondition, condition))
        else:
            raise EvaluationError(f"Unknown condition type: {condition_type}")

    def _evaluate_and(self, condition: BinaryCondition) -> bool:
        if not self.evaluate(condition.left):
            return False  # Короткое вычисление
        return self.evaluate(condition.right)

    def _evaluate_or(self, condition: BinaryCondition) -> bool:
        if self.evaluate(condition.left):
            return True  # Короткое вычисление
        return self.evaluate(condition.right)

    def _evaluate_xor(self, condition: BinaryCondition) -> bool:
        return self.evaluate(condition.left) != self.evaluate(condition.right)


def evaluate_condition_string(condition_str: str, tags: TagContext) -> bool:
    """
    Удобная функция для вычисления условия из строки.

    Raises:
        ParseError: При ошибке парсинга
        LexError: При ошибке токенизации
        EvaluationError: При ошибке вычисления
    """
    from .parser import ConditionParser

    parser = ConditionParser()
    ast = parser.parse(condition_str)

    evaluator = ConditionEvaluator(tags)
    return evaluator.evaluate(ast)
