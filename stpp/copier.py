"""
Сквозное копирование текста в выходной поток.
"""

from __future__ import annotations

from typing import TextIO

from .directives import Directive


class StreamCopier:
    """
    Пишет в выход обычные символы и нераспознанные директивы,
    если текущая ветка не подавлена.

    Нераспознанная директива выводится как маркер плюс захваченное
    ключевое слово: пробелы вокруг него теряются (`#pragma once` →
    `#pragmaonce`). С keep_separator выводятся ровно потреблённые символы.
    """

    def __init__(self, sink: TextIO, marker: str = "#", keep_separator: bool = False):
        self.sink = sink
        self.marker = marker
        self.keep_separator = keep_separator
        self.written = 0

    def copy(self, c: str, ignore: bool) -> None:
        if ignore:
            return
        self.sink.write(c)
        self.written += len(c)

    def echo_directive(self, directive: Directive, ignore: bool) -> None:
        if ignore:
            return
        body = directive.raw if self.keep_separator else directive.keyword
        text = self.marker + body
        self.sink.write(text)
        self.written += len(text)


__all__ = ["StreamCopier"]
