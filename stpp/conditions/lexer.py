"""
Лексер для разбора условных выражений.

Читает одну строку условия прямо из входного потока (до перевода строки
или конца потока) и разбивает её на токены:
- имена тегов (любая непрерывная последовательность символов, кроме
  пробельных и символов операторов)
- операторы &&, ||, ^, !
- скобки
- конец строки
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..source import CharSource


class TokenType(Enum):
    TAG = "Tag"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    AND = "&&"
    OR = "||"
    XOR = "^"
    NOT = "!"
    EOL = "EOL"


_SINGLE_CHAR_TOKENS = {
    "!": TokenType.NOT,
    "^": TokenType.XOR,
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
}

# Операторы, требующие удвоенного символа
_DOUBLED_TOKENS = {
    "&": (TokenType.AND, "And"),
    "|": (TokenType.OR, "Or"),
}


@dataclass
class Token:
    """
    Токен условия.

    Attributes:
        type: Тип токена
        value: Имя тега (только для TAG) или текст оператора
        position: Позиция (колонка) в строке условия
    """
    type: TokenType
    value: str
    position: int

    def describe(self) -> str:
        """Человекочитаемое описание токена для диагностики."""
        if self.type is TokenType.TAG:
            return self.value
        return self.type.value

    def __repr__(self):
        return f"Token({self.type.name}, '{self.value}', pos={self.position})"


class LexError(ValueError):
    """Ошибка токенизации (только в строгом режиме операторов)."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Lex error at position {position}: {message}")


class ConditionLexer:
    """
    Лексер строки условия.

    Одиночные '&' и '|' по умолчанию допускаются: выдаётся предупреждение
    (см. warnings), а токен считается удвоенным оператором. В строгом
    режиме это LexError.
    """

    def __init__(self, strict_operators: bool = False):
        self.strict_operators = strict_operators
        self.warnings: List[str] = []

    def tokenize(self, text: str) -> List[Token]:
        """
        Разбивает строку на токены.

        Разбор останавливается на первом переводе строки.

        Returns:
            Список токенов, включая EOL в конце
        """
        return self.tokenize_line(CharSource(io.StringIO(text)))

    def tokenize_line(self, source: CharSource) -> List[Token]:
        """
        Читает из потока остаток строки условия и разбивает его на токены.

        Перевод строки потребляется. Предупреждения предыдущего вызова
        сбрасываются.
        """
        self.warnings = []
        tokens: List[Token] = []
        tag_chars: List[str] = []
        tag_start: Optional[int] = None
        position = 0

        def flush_tag() -> None:
            nonlocal tag_start
            if tag_chars:
                tokens.append(Token(TokenType.TAG, "".join(tag_chars), tag_start or 0))
                tag_chars.clear()
            tag_start = None

        while True:
            c = source.get()
            if not c or c == "\n":
                break

            if c.isspace():
                flush_tag()
            elif c in _SINGLE_CHAR_TOKENS:
                flush_tag()
                tokens.append(Token(_SINGLE_CHAR_TOKENS[c], c, position))
            elif c in _DOUBLED_TOKENS:
                flush_tag()
                token_type, op_name = _DOUBLED_TOKENS[c]
                nxt = source.get()
                if nxt == c:
                    tokens.append(Token(token_type, c * 2, position))
                    position += 1
                else:
                    if nxt:
                        source.unget()
                    message = f"{op_name} operator is {c * 2} not {c}"
                    if self.strict_operators:
                        raise LexError(message, position)
                    self.warnings.append(message)
                    tokens.append(Token(token_type, c, position))
            else:
                if tag_start is None:
                    tag_start = position
                tag_chars.append(c)

            position += 1

        # Хвостовой тег без завершающего пробела
        flush_tag()
        tokens.append(Token(TokenType.EOL, "", position))
        return tokens


__all__ = ["TokenType", "Token", "LexError", "ConditionLexer"]
