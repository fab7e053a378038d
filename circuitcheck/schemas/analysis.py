from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, Field


class FailureCode(str, Enum):
    MISSING_COMPONENTS = "missing_components"
    SHORT_CIRCUIT = "short_circuit"
    LOOP_NOT_CLOSED = "loop_not_closed"


class AnalysisResult(BaseModel):
    valid: bool
    reason: str | None = None
    code: FailureCode | None = None
    element_ids: list[str] = Field(default_factory=list)
    loop: list[str] = Field(default_factory=list)
