"""
Машина состояний условного включения текста.

Один проход вперёд по входному потоку: обычные символы уходят
в StreamCopier, после символа-маркера управление получает
DirectiveScanner, а распознанные директивы меняют стек условных
групп или множество тегов.

Вложенность if реализована явным стеком кадров, а не рекурсией,
поэтому глубина вложенности ограничена только памятью.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO, Tuple

from .conditions import (
    ConditionEvaluator,
    ConditionParser,
    EmptyConditionError,
    LexError,
    ParseError,
    Token,
    TokenType,
)
from .copier import StreamCopier
from .diagnostics import Diagnostics
from .directives import Directive, DirectiveScanner, Operation
from .errors import FatalPreprocessError, MalformedGroupError, MissingTagNameError
from .source import CharSource
from .tags import TagContext
from .types import RunOptions, RunResult

logger = logging.getLogger(__name__)


@dataclass
class ConditionalFrame:
    """
    Состояние одной открытой группы if/elif/else/endif.

    Attributes:
        outer_ignore: Объемлющий контекст уже подавлен
        matched: Одна из предыдущих веток группы уже сработала
        active: Условие текущей ветки
        line: Строка открывающего if
        seen_else: В группе уже был else
    """
    outer_ignore: bool
    matched: bool
    active: bool
    line: int
    seen_else: bool = False

    @property
    def ignore(self) -> bool:
        return self.outer_ignore or not self.active


class ConditionalEngine:
    """
    Обработчик условных групп.

    Правила:
    - в группе активна не более чем одна ветка: первая истинная;
    - после срабатывания ветки все последующие подавлены независимо
      от своих условий;
    - если подавлен объемлющий кадр, подавлены и все вложенные.
    """

    def __init__(
        self,
        source: CharSource,
        sink: TextIO,
        tags: TagContext,
        options: RunOptions,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.source = source
        self.tags = tags
        self.options = options
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.scanner = DirectiveScanner()
        self.copier = StreamCopier(sink, options.marker, options.keep_separator)
        self.parser = ConditionParser(strict_operators=options.strict_operators)
        self.evaluator = ConditionEvaluator(tags)
        self._frames: List[ConditionalFrame] = []

    @property
    def ignore(self) -> bool:
        """Подавлен ли сейчас вывод."""
        return self._frames[-1].ignore if self._frames else False

    @property
    def depth(self) -> int:
        return len(self._frames)

    def run(self) -> None:
        """
        Обрабатывает весь входной поток.

        Raises:
            FatalPreprocessError: define/undef без имени тега или
                нарушение структуры группы в строгом режиме
        """
        marker = self.options.marker
        while True:
            c = self.source.get()
            if not c:
                break
            if c == marker:
                self._handle_directive(self.scanner.scan(self.source))
            else:
                self.copier.copy(c, self.ignore)

        self._close_unterminated()

    def _handle_directive(self, directive: Directive) -> None:
        op = directive.operation
        if op is Operation.IF:
            self._open_group(directive)
        elif op is Operation.ELIF or op is Operation.ELSE:
            self._next_clause(directive)
        elif op is Operation.ENDIF:
            self._close_group(directive)
        elif op is Operation.DEFINE:
            name = self._read_tag_name(directive, "Define statement without tag")
            if not self.ignore:
                self.tags.define(name)
        elif op is Operation.UNDEF:
            name = self._read_tag_name(directive, "Undef statement without tag")
            if not self.ignore:
                self.tags.undef(name)
        elif op is Operation.UNKNOWN:
            self.copier.echo_directive(directive, self.ignore)
        else:
            raise AssertionError(f"Unhandled directive operation: {op}")

    # ---- Условные группы ----

    def _open_group(self, directive: Directive) -> None:
        outer = self.ignore
        if outer:
            self._skip_condition(directive)
            condition = False
        else:
            condition = self._read_condition(directive)

        self._frames.append(ConditionalFrame(
            outer_ignore=outer,
            matched=condition,
            active=condition,
            line=directive.line,
        ))
        logger.debug("line %d: if -> %s (depth %d)", directive.line, condition, self.depth)

    def _next_clause(self, directive: Directive) -> None:
        if not self._frames:
            self._stray(directive)
            return

        frame = self._frames[-1]
        is_else = directive.operation is Operation.ELSE

        if frame.seen_else:
            message = f"'{directive.keyword}' after 'else' in group opened at line {frame.line}"
            if self.options.strict_clauses:
                raise MalformedGroupError(message, directive.line)
            logger.debug("line %d: %s", directive.line, message)

        if frame.matched:
            # Ветка уже сработала, остальные подавлены
            frame.active = False
            if not is_else:
                self._skip_condition(directive)
        elif is_else:
            frame.active = True
        elif frame.outer_ignore:
            self._skip_condition(directive)
            frame.active = False
        else:
            frame.active = self._read_condition(directive)

        if frame.active:
            frame.matched = True
        if is_else:
            frame.seen_else = True
        logger.debug("line %d: %s -> %s", directive.line, directive.keyword, frame.active)

    def _close_group(self, directive: Directive) -> None:
        if not self._frames:
            self._stray(directive)
            return
        self._frames.pop()

    def _stray(self, directive: Directive) -> None:
        # Без открытой группы директива выводится как обычный текст
        self.diagnostics.warning(f"'{directive.keyword}' without matching 'if'", directive.line)
        self.copier.echo_directive(directive, self.ignore)

    def _close_unterminated(self) -> None:
        while self._frames:
            frame = self._frames.pop()
            message = f"Unterminated 'if' opened at line {frame.line}"
            if self.options.strict_clauses:
                raise MalformedGroupError(message, frame.line)
            self.diagnostics.warning(message, frame.line)

    # ---- Чтение остатка строки директивы ----

    def _read_condition(self, directive: Directive) -> bool:
        """
        Читает и вычисляет условие до конца строки.

        Ошибки разбора не прерывают проход: выдаётся предупреждение,
        а условие считается ложным.
        """
        lexer = self.parser.lexer
        if directive.ends_line:
            tokens = [Token(TokenType.EOL, "", 0)]
        else:
            try:
                tokens = lexer.tokenize_line(self.source)
            except LexError as e:
                self.source.read_line()
                self.diagnostics.warning(e.message, directive.line)
                return False
            for message in lexer.warnings:
                self.diagnostics.warning(message, directive.line)

        try:
            condition = self.parser.parse_tokens(tokens)
        except EmptyConditionError as e:
            self.diagnostics.warning(e.message, directive.line)
            return False
        except ParseError as e:
            self.diagnostics.warning(f"{e.message} (column {e.position + 1})", directive.line)
            return False

        return self.evaluator.evaluate(condition)

    def _skip_condition(self, directive: Directive) -> None:
        if not directive.ends_line:
            self.source.read_line()

    def _read_tag_name(self, directive: Directive, missing_message: str) -> str:
        """
        Читает имя тега для define/undef.

        Имя читается всегда, даже в подавленной ветке, поэтому пустое
        имя фатально независимо от состояния вывода.
        """
        rest = "" if directive.ends_line else self.source.read_line()
        parts = rest.split(None, 1)
        if not parts:
            raise MissingTagNameError(missing_message, directive.line)

        name = parts[0]
        if len(parts) > 1:
            self.diagnostics.warning(
                f"Ignoring unexpected text after tag '{name}': '{parts[1].strip()}'",
                directive.line,
            )
        return name


def preprocess(
    source: TextIO,
    sink: TextIO,
    options: Optional[RunOptions] = None,
    tags: Optional[TagContext] = None,
) -> RunResult:
    """
    Выполняет один проход препроцессора.

    Args:
        source: Входной текстовый поток
        sink: Выходной поток (только дозапись)
        options: Параметры прохода
        tags: Готовый контекст тегов; если не задан, создаётся из options.tags

    Returns:
        RunResult с признаком успеха и диагностикой
    """
    options = options or RunOptions()
    if tags is None:
        tags = TagContext(options.tags)
    diagnostics = Diagnostics()
    engine = ConditionalEngine(CharSource(source), sink, tags, options, diagnostics)

    ok = True
    try:
        engine.run()
    except FatalPreprocessError as e:
        diagnostics.error(e.message, e.line)
        ok = False

    return RunResult(
        ok=ok,
        diagnostics=diagnostics.items,
        final_tags=tags.snapshot(),
        chars_written=engine.copier.written,
    )


def preprocess_text(
    text: str,
    tags: Iterable[str] = (),
    **option_kwargs,
) -> Tuple[str, RunResult]:
    """
    Удобная функция: обрабатывает строку и возвращает (вывод, результат).
    """
    options = RunOptions(tags=frozenset(tags), **option_kwargs)
    out = io.StringIO()
    result = preprocess(io.StringIO(text), out, options)
    return out.getvalue(), result


__all__ = ["ConditionalFrame", "ConditionalEngine", "preprocess", "preprocess_text"]
