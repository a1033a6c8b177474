"""
Распознавание директив.

После символа-маркера читается ключевое слово (не длиннее
MAX_KEYWORD_LENGTH символов) и классифицируется точным сравнением
с шестью ключевыми словами. Всё остальное считается Operation.UNKNOWN,
такая директива выводится как обычный текст.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .source import CharSource

MAX_KEYWORD_LENGTH = 16


class Operation(Enum):
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    ENDIF = "endif"
    DEFINE = "define"
    UNDEF = "undef"
    UNKNOWN = ""


_KEYWORDS = {op.value: op for op in Operation if op is not Operation.UNKNOWN}


def classify(keyword: str) -> Operation:
    """Точное, чувствительное к регистру сопоставление ключевого слова."""
    return _KEYWORDS.get(keyword, Operation.UNKNOWN)


@dataclass(frozen=True)
class Directive:
    """
    Распознанная директива.

    Attributes:
        operation: Тип директивы
        keyword: Захваченное ключевое слово (без пробелов)
        raw: Все символы, потреблённые после маркера, включая пробелы
             перед ключевым словом и завершающий разделитель
        terminator: Завершающий символ ('' при конце потока или лимите длины)
        line: Номер строки маркера
    """
    operation: Operation
    keyword: str
    raw: str
    terminator: str
    line: int

    @property
    def ends_line(self) -> bool:
        """Остаток строки пуст: ключевое слово закончилось переводом строки."""
        return self.terminator in ("\n", "\r\n")


class DirectiveScanner:
    """
    Сканер ключевого слова директивы.

    Потребляет ключевое слово и один завершающий пробельный символ
    (в том числе перевод строки или пару CRLF); остаток строки не трогает. При
    достижении лимита длины разделитель не потребляется.
    """

    def __init__(self, max_length: int = MAX_KEYWORD_LENGTH):
        self.max_length = max_length

    def scan(self, source: CharSource) -> Directive:
        line = source.line
        keyword: list[str] = []
        raw: list[str] = []
        terminator = ""

        while len(keyword) < self.max_length:
            c = source.get()
            if not c:
                break
            raw.append(c)
            if c == "\n":
                terminator = c
                break
            if c == "\r":
                # CRLF считается одним переводом строки
                nxt = source.get()
                if nxt == "\n":
                    raw.append(nxt)
                    terminator = "\r\n"
                    break
                if nxt:
                    source.unget()
            if not c.isspace():
                keyword.append(c)
            elif keyword:
                terminator = c
                break

        name = "".join(keyword)
        return Directive(
            operation=classify(name),
            keyword=name,
            raw="".join(raw),
            terminator=terminator,
            line=line,
        )


__all__ = ["MAX_KEYWORD_LENGTH", "Operation", "Directive", "DirectiveScanner", "classify"]
