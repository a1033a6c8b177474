from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional, TextIO

from .config import load_config
from .engine import preprocess
from .errors import StppUserError
from .report import build_report, write_report
from .types import RunOptions
from .version import tool_version

_LOG = logging.getLogger("stpp")

# Имена, означающие стандартные потоки
_STD_STREAM_NAMES = ("", "-", "--")


def _setup_logging_once(level_name: str) -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    _LOG.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    if not _LOG.handlers:
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)
    _LOG.propagate = False


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stpp",
        description="Simple tag preprocessor: conditional text inclusion driven by tags",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "input",
        nargs="?",
        default="",
        help="входной файл (по умолчанию или '-': stdin)",
    )
    p.add_argument(
        "output",
        nargs="?",
        default="",
        help="выходной файл (по умолчанию или '-': stdout)",
    )
    p.add_argument(
        "-D", "--definition",
        action="append",
        metavar="TAG",
        help="определить тег (можно указать несколько раз)",
    )
    p.add_argument(
        "--config",
        metavar="PATH",
        help="YAML-файл конфигурации (defines, marker, strict-флаги)",
    )
    p.add_argument(
        "--marker",
        metavar="CHAR",
        help="символ-маркер директив (по умолчанию '#')",
    )
    p.add_argument(
        "--keep-separator",
        action="store_true",
        help="сохранять пробелы при выводе нераспознанных директив",
    )
    p.add_argument(
        "--strict-operators",
        action="store_true",
        help="одиночные '&' и '|' считать ошибкой условия",
    )
    p.add_argument(
        "--strict-clauses",
        action="store_true",
        help="повторный else, elif после else и незакрытый if считать фатальными ошибками",
    )
    p.add_argument(
        "--report",
        metavar="PATH",
        help="записать JSON-отчёт о проходе в файл",
    )
    p.add_argument(
        "--log-level",
        default=os.environ.get("STPP_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="уровень логирования диагностики в stderr",
    )
    return p


def _parse_tags(values: Optional[List[str]]) -> set[str]:
    """Проверяет и собирает теги из -D."""
    result = set()
    for value in values or []:
        tag = value.strip()
        if not tag or any(ch.isspace() for ch in tag):
            raise ValueError(f"Invalid tag name '{value}'")
        result.add(tag)
    return result


def _opts(ns: argparse.Namespace) -> RunOptions:
    config = load_config(Path(ns.config) if ns.config else None)
    if ns.marker is not None:
        config.marker = ns.marker
    config.keep_separator = config.keep_separator or ns.keep_separator
    config.strict_operators = config.strict_operators or ns.strict_operators
    config.strict_clauses = config.strict_clauses or ns.strict_clauses
    return config.to_options(_parse_tags(ns.definition))


def _open_input(name: str, stack: ExitStack) -> TextIO:
    if name in _STD_STREAM_NAMES:
        return sys.stdin
    try:
        return stack.enter_context(open(name, "r", encoding="utf-8", newline=""))
    except OSError as e:
        raise StppUserError(f"Could not open input stream. Aborting. ({e.strerror}: {name})") from e


def _open_output(name: str, stack: ExitStack) -> TextIO:
    if name in _STD_STREAM_NAMES:
        return sys.stdout
    try:
        return stack.enter_context(open(name, "w", encoding="utf-8", newline=""))
    except OSError as e:
        raise StppUserError(f"Could not open output stream. Aborting. ({e.strerror}: {name})") from e


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging_once(ns.log_level)

    try:
        options = _opts(ns)
        with ExitStack() as stack:
            source = _open_input(ns.input, stack)
            sink = _open_output(ns.output, stack)
            result = preprocess(source, sink, options)
            sink.flush()

        if ns.report:
            report = build_report(
                result,
                input_name=ns.input or "-",
                output_name=ns.output or "-",
            )
            write_report(report, Path(ns.report))

    except StppUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
