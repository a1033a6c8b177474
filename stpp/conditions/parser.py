"""
Парсер условных выражений с рекурсивным спуском.

Строит абстрактное синтаксическое дерево (AST) из последовательности токенов.

Грамматика:
expression → unary (("&&" | "||" | "^") expression)?
unary      → "!" unary | primary
primary    → "(" expression ")" | TAG

Приоритетов нет: бинарный оператор берёт уже свёрнутый левый операнд,
а правым операндом делает весь остаток строки (до закрывающей скобки
текущей группы). Поэтому смешанные цепочки группируются справа:
"a && b || c" означает "a && (b || c)", а не "(a && b) || c".
Это поведение формата и сохраняется намеренно.
"""

from __future__ import annotations

from typing import List

from .lexer import ConditionLexer, Token, TokenType
from .model import (
    Condition,
    ConditionType,
    TagCondition,
    GroupCondition,
    NotCondition,
    BinaryCondition,
)


class ParseError(Exception):
    """Ошибка парсинга условного выражения."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Parse error at position {position}: {message}")


class EmptyConditionError(ParseError):
    """Директива условия без выражения."""

    def __init__(self, position: int = 0):
        super().__init__("Expected condition but got nothing", position)


_BINARY_OPERATORS = {
    TokenType.AND: ConditionType.AND,
    TokenType.OR: ConditionType.OR,
    TokenType.XOR: ConditionType.XOR,
}


class ConditionParser:
    """
    Парсер условных выражений с рекурсивным спуском.

    Может разбирать как строку (parse), так и уже полученный
    от лексера список токенов (parse_tokens).
    """

    def __init__(self, strict_operators: bool = False):
        self.lexer = ConditionLexer(strict_operators=strict_operators)
        self._tokens: List[Token] = []
        self._position = 0

    def parse(self, condition_str: str) -> Condition:
        """
        Парсит строку условия в AST.

        Raises:
            ParseError: При синтаксической ошибке
            LexError: При одиночном '&'/'|' в строгом режиме
        """
        return self.parse_tokens(self.lexer.tokenize(condition_str))

    def parse_tokens(self, tokens: List[Token]) -> Condition:
        """
        Строит AST из списка токенов, заканчивающегося EOL.

        Raises:
            EmptyConditionError: Если в строке нет ни одного токена
            ParseError: При синтаксической ошибке или лишних токенах
        """
        self._tokens = tokens
        self._position = 0

        if self._current_token().type is TokenType.EOL:
            raise EmptyConditionError(self._current_position())

        result = self._parse_expression()

        # Остаток после выражения (например, лишняя ')') считается ошибкой
        if not self._is_at_end():
            current = self._current_token()
            raise ParseError(f"Unexpected token '{current.describe()}'", current.position)

        return result

    def _parse_expression(self) -> Condition:
        left = self._parse_unary()

        current = self._current_token()
        operator = _BINARY_OPERATORS.get(current.type)
        if operator is not None:
            self._advance()
            right = self._parse_expression()
            return BinaryCondition(left=left, right=right, operator=operator)

        if current.type in (TokenType.EOL, TokenType.PAREN_CLOSE):
            return left

        raise ParseError(f"Expected operator but got '{current.describe()}'", current.position)

    def _parse_unary(self) -> Condition:
        if self._match(TokenType.NOT):
            return NotCondition(condition=self._parse_unary())
        return self._parse_primary()

    def _parse_primary(self) -> Condition:
        if self._match(TokenType.PAREN_OPEN):
            expr = self._parse_expression()
            self._expect(TokenType.PAREN_CLOSE)
            return GroupCondition(condition=expr)

        current = self._current_token()
        if current.type is TokenType.TAG:
            self._advance()
            return TagCondition(name=current.value)

        raise ParseError(f"Expected 'Tag' but got '{current.describe()}'", current.position)

    # Вспомогательные методы для работы с токенами

    def _current_token(self) -> Token:
        if self._position >= len(self._tokens):
            end = self._tokens[-1].position if self._tokens else 0
            return Token(TokenType.EOL, "", end)
        return self._tokens[self._position]

    def _current_position(self) -> int:
        return self._current_token().position

    def _is_at_end(self) -> bool:
        return self._current_token().type is TokenType.EOL

    def _advance(self) -> Token:
        token = self._current_token()
        if not self._is_at_end():
            self._position += 1
        return token

    def _match(self, token_type: TokenType) -> bool:
        if self._current_token().type is token_type:
            self._advance()
            return True
        return False

    def _expect(self, token_type: TokenType) -> Token:
        current = self._current_token()
        if current.type is not token_type:
            raise ParseError(
                f"Expected '{token_type.value}' but got '{current.describe()}'",
                current.position,
            )
        return self._advance()


__all__ = ["ParseError", "EmptyConditionError", "ConditionParser"]
