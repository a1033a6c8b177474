"""
stpp: простой препроцессор текста по тегам.

Директивы if/elif/else/endif управляют включением текста,
define/undef меняют множество тегов.
"""

from .conditions import evaluate_condition_string
from .diagnostics import Diagnostic, Severity
from .engine import ConditionalEngine, preprocess, preprocess_text
from .errors import FatalPreprocessError, MissingTagNameError, MalformedGroupError, StppUserError
from .tags import TagContext
from .types import RunOptions, RunResult

__all__ = [
    "evaluate_condition_string",
    "Diagnostic",
    "Severity",
    "ConditionalEngine",
    "preprocess",
    "preprocess_text",
    "FatalPreprocessError",
    "MissingTagNameError",
    "MalformedGroupError",
    "StppUserError",
    "TagContext",
    "RunOptions",
    "RunResult",
]
