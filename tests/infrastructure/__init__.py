"""
Unified test infrastructure for stpp.

Modules:
- file_utils: Utilities for creating files and configs
- cli_utils: Running the CLI in a subprocess
- rendering_utils: Running preprocessor passes in-process
"""

from .file_utils import write, write_config, read
from .cli_utils import run_cli, jload
from .rendering_utils import render, render_with_result, messages

__all__ = [
    # File utilities
    "write", "write_config", "read",

    # CLI utilities
    "run_cli", "jload",

    # Rendering utilities
    "render", "render_with_result", "messages",
]
