"""
JSON-отчёт о проходе препроцессора (--report).
"""

from __future__ import annotations

from pathlib import Path

from .errors import StppUserError
from .jsonic import dumps as jdumps
from .protocol import PROTOCOL_VERSION
from .report_schema import ReportDiagnostic, RunReport, Severity
from .types import RunResult
from .version import tool_version


def build_report(result: RunResult, *, input_name: str, output_name: str) -> RunReport:
    return RunReport(
        protocol=PROTOCOL_VERSION,
        version=tool_version(),
        ok=result.ok,
        input=input_name,
        output=output_name,
        charsWritten=result.chars_written,
        finalTags=list(result.final_tags),
        diagnostics=[
            ReportDiagnostic(severity=Severity(d.severity.value), line=d.line, message=d.message)
            for d in result.diagnostics
        ],
    )


def write_report(report: RunReport, path: Path) -> None:
    """Пишет отчёт в файл (UTF-8, с завершающим переводом строки)."""
    try:
        path.write_text(jdumps(report.model_dump(mode="json", by_alias=True)) + "\n", encoding="utf-8")
    except OSError as e:
        raise StppUserError(f"Could not write report: {e.strerror}: {path}") from e


__all__ = ["build_report", "write_report"]
