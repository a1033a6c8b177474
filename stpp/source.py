"""
Посимвольное чтение входного потока.

Препроцессор делает один проход вперёд; единственный возврат на один
символ (нужен лексеру условий, чтобы отличить '&' от '&&' и '|' от '||').
"""

from __future__ import annotations

from typing import Optional, TextIO


class CharSource:
    """
    Источник символов поверх текстового потока.

    get() возвращает пустую строку в конце потока. Номер строки
    отслеживается для диагностики.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pushback: Optional[str] = None
        self._last: str = ""
        self.line = 1

    def get(self) -> str:
        """Читает следующий символ или '' в конце потока."""
        if self._pushback is not None:
            c = self._pushback
            self._pushback = None
        else:
            c = self._stream.read(1)
        if c == "\n":
            self.line += 1
        self._last = c
        return c

    def unget(self) -> None:
        """Возвращает последний прочитанный символ обратно в поток."""
        if self._pushback is not None:
            raise RuntimeError("Only one character of pushback is supported")
        if not self._last:
            return
        if self._last == "\n":
            self.line -= 1
        self._pushback = self._last
        self._last = ""

    def read_line(self) -> str:
        """
        Читает остаток текущей строки.

        Завершающий перевод строки потребляется, но в результат не входит.
        """
        chars = []
        while True:
            c = self.get()
            if not c or c == "\n":
                break
            chars.append(c)
        return "".join(chars)


__all__ = ["CharSource"]
