from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(Enum):
    warning = "warning"
    error = "error"


class ReportDiagnostic(BaseModel):
    model_config = ConfigDict(extra="forbid")

    severity: Severity
    line: Optional[int] = None
    message: str


class RunReport(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    protocol: int
    version: str
    ok: bool
    input: str
    output: str
    chars_written: int = Field(..., alias="charsWritten")
    final_tags: List[str] = Field(..., alias="finalTags")
    diagnostics: List[ReportDiagnostic]
