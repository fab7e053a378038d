from circuitcheck.schemas.schematic import (
    ComponentCategory,
    Element,
    Schematic,
    UnitSegment,
    WireSegment,
    parse_schematic,
)
from circuitcheck.schemas.analysis import AnalysisResult, FailureCode

__all__ = [
    "ComponentCategory",
    "Element",
    "Schematic",
    "UnitSegment",
    "WireSegment",
    "parse_schematic",
    "AnalysisResult",
    "FailureCode",
]
