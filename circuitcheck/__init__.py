"""circuitcheck — closed-loop and short-circuit checker for grid schematics."""

from circuitcheck.errors import InvalidSchematic, SearchBudgetExceeded
from circuitcheck.schemas import AnalysisResult, FailureCode, Schematic
from circuitcheck.services.loader import load_schematic
from circuitcheck.topology.engine import analyze_circuit

__all__ = [
    "analyze_circuit",
    "load_schematic",
    "AnalysisResult",
    "FailureCode",
    "Schematic",
    "InvalidSchematic",
    "SearchBudgetExceeded",
]
