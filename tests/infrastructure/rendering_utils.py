"""
Utilities for running the preprocessor in tests.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from stpp import RunResult, preprocess_text


def render(text: str, tags: Iterable[str] = (), **options) -> str:
    """Runs a pass and returns only the output; the pass must succeed."""
    out, result = preprocess_text(text, tags, **options)
    assert result.ok, [str(d) for d in result.diagnostics]
    return out


def render_with_result(text: str, tags: Iterable[str] = (), **options) -> Tuple[str, RunResult]:
    """Runs a pass and returns (output, result) without asserting success."""
    return preprocess_text(text, tags, **options)


def messages(result: RunResult) -> list[str]:
    """Diagnostic messages of a pass, without line prefixes."""
    return [d.message for d in result.diagnostics]


__all__ = ["render", "render_with_result", "messages"]
