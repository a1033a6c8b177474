"""
Булевы условия над тегами: лексер, парсер и вычислитель.
"""

from .evaluator import ConditionEvaluator, EvaluationError, evaluate_condition_string
from .lexer import ConditionLexer, LexError, Token, TokenType
from .model import (
    BinaryCondition,
    Condition,
    ConditionType,
    GroupCondition,
    NotCondition,
    TagCondition,
)
from .parser import ConditionParser, EmptyConditionError, ParseError

__all__ = [
    "ConditionEvaluator",
    "EvaluationError",
    "evaluate_condition_string",
    "ConditionLexer",
    "LexError",
    "Token",
    "TokenType",
    "BinaryCondition",
    "Condition",
    "ConditionType",
    "GroupCondition",
    "NotCondition",
    "TagCondition",
    "ConditionParser",
    "EmptyConditionError",
    "ParseError",
]
